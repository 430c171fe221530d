"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def sample_content() -> str:
    """A small policy document mixing text and every table kind."""
    return "\n".join(
        [
            "## Allergen Control Program",
            "This policy applies to **all** production lines.",
            "",
            "| PURPOSE | Prevent undeclared allergens. |",
            "| --- | --- |",
            "",
            "| POLICY | |",
            "| Step | Action |",
            "|---|---|",
            "| 1 | Label all **allergen** bins |",
            "| | Verify labels at changeover |",
            "",
            "| DEFINITIONS | AID - Allergen Ingredient Disclosure |",
            "",
            "| REFERENCE DOCUMENTS | SOP-001 - Cleaning Procedure |",
            "",
            "| Approved By | QA Manager |",
            "Closing note.",
        ]
    )
