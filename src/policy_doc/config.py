"""Shared configuration for the policy-document parser and header formatting."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# ─── Header Display ───────────────────────────────────────────────────────────

DATE_DISPLAY_FORMAT = "%m/%d/%Y"
MISSING_DATE = "N/A"
MISSING_DOCUMENT_NUMBER = "—"
MISSING_OWNER = "Not assigned"

# ─── Parser ───────────────────────────────────────────────────────────────────

# A PURPOSE/SCOPE/ROLES cell renders as a nested table only with MORE than this
# many table lines in it.
NESTED_TABLE_MIN_LINES = 2

# ─── Logging ──────────────────────────────────────────────────────────────────

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def log_level() -> int:
    """Return the log level named by POLICY_DOC_LOG_LEVEL (default INFO)."""
    name = os.getenv("POLICY_DOC_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
