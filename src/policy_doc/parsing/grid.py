"""Pipe-table text to grid conversion.

A grid is a list of rows, each a list of trimmed cell strings.  Separator
rows never appear in a grid, nor do rows whose cells are all empty.
"""

from policy_doc.parsing.classifiers import is_separator_row


def parse_pipe_row(line: str) -> list[str]:
    """Split a single pipe-delimited row into trimmed cell strings."""
    return [cell.strip() for cell in line.strip().strip("|").split("|")]


def parse_markdown_table(table_text: str) -> list[list[str]]:
    """Parse a run of pipe-table lines into a grid.

    Only lines that both start and end with '|' become rows; a line such as
    '| a | b' without a closing pipe is ignored.
    """
    rows: list[list[str]] = []
    for line in table_text.strip().split("\n"):
        stripped = line.strip()
        if is_separator_row(stripped):
            continue
        if not (stripped.startswith("|") and stripped.endswith("|")):
            continue
        # Strip exactly one pipe on each side; cells may legitimately be empty
        cells = [cell.strip() for cell in stripped[1:-1].split("|")]
        if any(cells):
            rows.append(cells)
    return rows
