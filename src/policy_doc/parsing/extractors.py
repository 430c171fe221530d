"""Reference-list and definition-list sub-parsers.

Both sub-parsers read the multi-line second cell of a REFERENCE DOCUMENTS or
DEFINITIONS block.  Authors write these cells either as "TERM - description"
lines or as pipe rows, often mixed, so each line goes through two named
matchers composed with :func:`first_match`.  The matcher order differs
between the two parsers and is significant:

- references try the pipe row first, then the "REF - title" line;
- definitions try the "TERM - description" line first, then the pipe row,
  so a pipe row whose text happens to look like "ABC - ..." is read as a
  plain definition line.
"""

import logging
from typing import Callable, TypeVar

from policy_doc.parsing.grid import parse_pipe_row
from policy_doc.parsing.markup import clean
from policy_doc.parsing.patterns import DEFINITION_LINE_RE, REFERENCE_LINE_RE, RULE_CELL
from policy_doc.parsing.schema import Definition, Reference

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_match(line: str, *matchers: Callable[[str], T | None]) -> T | None:
    """Return the result of the first matcher that accepts *line*, or None."""
    for matcher in matchers:
        result = matcher(line)
        if result is not None:
            return result
    return None


def _non_blank_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


# ─── References ───────────────────────────────────────────────────────────────


def match_reference_row(line: str) -> Reference | None:
    """Read a '| SOP-001 | Cleaning Procedure |' row, skipping header and rule rows."""
    if not line.startswith("|"):
        return None
    cells = [clean(cell) for cell in parse_pipe_row(line)]
    cells = [cell for cell in cells if cell]
    if len(cells) < 2:
        return None
    ref_no, title = cells[0], cells[1]
    if "reference" in ref_no.lower() and "title" in title.lower():
        return None
    if RULE_CELL in (ref_no, title):
        return None
    return Reference(ref_no=ref_no, title=title)


def match_reference_line(line: str) -> Reference | None:
    """Read a 'SOP-001 - Cleaning Procedure' line (separator may be '-', '|' or ':')."""
    match = REFERENCE_LINE_RE.match(line)
    if not match:
        return None
    return Reference(ref_no=clean(match.group(1)), title=clean(match.group(2)))


def _reference_from_line(line: str) -> Reference | None:
    # A pipe-led line is settled by the row matcher alone
    if line.startswith("|"):
        return match_reference_row(line)
    return match_reference_line(line)


def extract_references(text: str) -> list[Reference]:
    """Extract every reference from a REFERENCE DOCUMENTS cell; may return []."""
    references = []
    for line in _non_blank_lines(clean(text)):
        reference = _reference_from_line(line)
        if reference is not None:
            references.append(reference)
    logger.debug("Extracted %d references", len(references))
    return references


# ─── Definitions ──────────────────────────────────────────────────────────────


def match_definition_line(line: str) -> Definition | None:
    """Read a 'CCP - Critical Control Point' line; the term is upper-cased."""
    match = DEFINITION_LINE_RE.match(line)
    if not match:
        return None
    return Definition(term=match.group(1).strip().upper(), description=match.group(2).strip())


def match_definition_row(line: str) -> Definition | None:
    """Read a '| Term | Description |' row, skipping the column-header row."""
    if not line.startswith("|"):
        return None
    cells = parse_pipe_row(line)
    if len(cells) < 2:
        return None
    term, description = clean(cells[0]), clean(cells[1])
    if not term or not description or term == RULE_CELL:
        return None
    if "definition" in term.lower():
        return None
    return Definition(term=term, description=description)


def extract_definitions(text: str) -> list[Definition]:
    """Extract every definition from a DEFINITIONS cell; may return [].

    The "TERM - description" shape is matched against the line as written,
    so an indented line is not a definition line.
    """
    definitions = []
    for line in text.split("\n"):
        if not line.strip() or RULE_CELL in line:
            continue
        definition = first_match(
            line,
            match_definition_line,
            lambda raw: match_definition_row(raw.strip()),
        )
        if definition is not None:
            definitions.append(definition)
    logger.debug("Extracted %d definitions", len(definitions))
    return definitions
