"""Compiled regex patterns and label keyword tuples for policy content parsing.

These patterns identify the structural elements of the pseudo-markdown
content blob: pipe-table rows, separator rows, the two inline markup tokens,
and the "TERM - description" line shapes used by the reference and
definition sub-parsers.  Used by classifiers.py, markup.py, grid.py,
extractors.py, and sections.py.
"""

import re

# ─── Table Patterns ───────────────────────────────────────────────────────────

# Separator row between a pipe-table header and its body, e.g. "| --- | :-: |".
# Applied to the stripped line.
SEPARATOR_ROW_RE = re.compile(r"^\|[\s\-:|]+\|$")


# ─── Inline Markup Tokens ─────────────────────────────────────────────────────

# One or more "## " heading markers at the start of any line
HEADING_RE = re.compile(r"^(?:## )+", re.MULTILINE)

# "**bold**" span; the inner text may cross a line break but not contain "*"
BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")


# ─── Sub-Parser Line Shapes ───────────────────────────────────────────────────

# Reference line such as "SOP-001 - Cleaning Procedure" or
# "FSMA 117.135 (b) : Preventive controls"
REFERENCE_LINE_RE = re.compile(r"^([A-Z0-9.\-()]+(?:\s+\([^)]+\))?)\s*[-|:]\s*(.+)$", re.IGNORECASE)

# Definition line such as "CCP - Critical Control Point" (2-6 letter term)
DEFINITION_LINE_RE = re.compile(r"^([A-Z]{2,6})\s*[-–:]\s*(.+)$", re.IGNORECASE)


# ─── String-Match Constants ───────────────────────────────────────────────────

# Cell value that marks a markdown rule rather than data
RULE_CELL = "---"

# Keywords checked against the upper-cased first cell of a table block
REFERENCE_KEYWORDS = ("REFERENCE", "DOCUMENT")  # all must be present
DEFINITION_KEYWORDS = ("DEFINITION",)
POLICY_STEP_KEYWORDS = ("POLICY", "STEP", "LINE")
# First cell of the "| Step | Action |" column-header row under a POLICY label
STEP_HEADER_LABELS = ("STEP", "STEPS")
METADATA_KEYWORDS = ("PURPOSE", "SCOPE", "ROLES", "RESPONSIBILITIES")

# Fixed labels for sections whose label is not taken from the grid
REFERENCE_TABLE_LABEL = "REFERENCE DOCUMENTS"
DEFINITION_LIST_LABEL = "DEFINITIONS"
POLICY_STEPS_LABEL = "POLICY"
