"""Line classification helpers for policy content parsing.

Each function takes a line (or a multi-line cell value) and returns
True/False to classify it as a table line, a separator row, or a cell that
holds a nested table.
"""

from policy_doc.config import NESTED_TABLE_MIN_LINES
from policy_doc.parsing.patterns import SEPARATOR_ROW_RE


def is_table_line(line: str) -> bool:
    """Return True if the line is part of a pipe table ('|' first, plus at least one more '|')."""
    stripped = line.strip()
    return stripped.startswith("|") and "|" in stripped[1:]


def is_separator_row(line: str) -> bool:
    """Return True for a header separator row like '| --- | :---: |'."""
    return bool(SEPARATOR_ROW_RE.match(line.strip()))


def has_nested_table(content: str) -> bool:
    """Return True if a cell value carries more than NESTED_TABLE_MIN_LINES table lines."""
    table_lines = sum(1 for line in content.split("\n") if is_table_line(line))
    return table_lines > NESTED_TABLE_MIN_LINES
