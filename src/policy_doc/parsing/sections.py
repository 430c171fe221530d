"""Turn one parsed table grid into one typed Section.

A table block is read as a single logical "label -> content" row: only the
first row's label cell decides the section kind.  The rules are an ordered
table of (name, predicate, handler) entries evaluated top-down; the first
predicate that accepts the upper-cased label wins.  The last rule accepts
everything, so every non-empty grid yields exactly one Section.
"""

import logging
from typing import Callable, NamedTuple

from policy_doc.parsing.classifiers import has_nested_table
from policy_doc.parsing.extractors import extract_definitions, extract_references
from policy_doc.parsing.grid import parse_markdown_table
from policy_doc.parsing.markup import clean
from policy_doc.parsing.patterns import (
    DEFINITION_KEYWORDS,
    METADATA_KEYWORDS,
    POLICY_STEP_KEYWORDS,
    REFERENCE_KEYWORDS,
    STEP_HEADER_LABELS,
)
from policy_doc.parsing.schema import (
    DefinitionListSection,
    MetadataSection,
    NestedTableSection,
    PolicyStepsSection,
    ReferenceTableSection,
    Section,
)

logger = logging.getLogger(__name__)

Grid = list[list[str]]


class SectionRule(NamedTuple):
    """One classification rule: *handler* runs when *predicate* accepts the label."""

    name: str
    predicate: Callable[[str], bool]
    handler: Callable[[str, str, Grid], Section]


def _clean_grid(grid: Grid) -> Grid:
    return [[clean(cell) for cell in row] for row in grid]


# ─── Handlers ─────────────────────────────────────────────────────────────────
#
# Each handler receives (label, content, grid): the upper-cased cleaned first
# cell, the raw second cell ("" when absent), and the full grid.


def _reference_section(label: str, content: str, _grid: Grid) -> Section:
    references = extract_references(content)
    if references:
        return ReferenceTableSection(references=references)
    logger.debug("No references found under %r, falling back to nested table", label)
    return NestedTableSection(label=label, rows=parse_markdown_table(content))


def _definition_section(label: str, content: str, grid: Grid) -> Section:
    definitions = extract_definitions(content)
    if definitions:
        return DefinitionListSection(definitions=definitions)
    logger.debug("No definitions found under %r, falling back to metadata", label)
    return MetadataSection(label=label, content=content, rows=grid)


def _policy_steps_section(_label: str, _content: str, grid: Grid) -> Section:
    rows = grid[1:]
    # A "POLICY" label row may be followed by its own "| Step | Action |" header
    if rows and clean(rows[0][0]).upper() in STEP_HEADER_LABELS:
        rows = rows[1:]
    return PolicyStepsSection(rows=rows)


def _labelled_metadata_section(label: str, content: str, grid: Grid) -> Section:
    if has_nested_table(content):
        return NestedTableSection(label=label, rows=parse_markdown_table(content))
    return MetadataSection(label=label, content=clean(content), rows=_clean_grid(grid))


def _generic_section(_label: str, content: str, grid: Grid) -> Section:
    # Keeps the author's casing, unlike the keyword rules above
    return MetadataSection(label=clean(grid[0][0]), content=clean(content), rows=_clean_grid(grid))


# ─── Rule Table ───────────────────────────────────────────────────────────────


SECTION_RULES: tuple[SectionRule, ...] = (
    SectionRule(
        "reference-documents",
        lambda label: all(word in label for word in REFERENCE_KEYWORDS),
        _reference_section,
    ),
    SectionRule(
        "definitions",
        lambda label: any(word in label for word in DEFINITION_KEYWORDS),
        _definition_section,
    ),
    SectionRule(
        "policy-steps",
        lambda label: any(word in label for word in POLICY_STEP_KEYWORDS),
        _policy_steps_section,
    ),
    SectionRule(
        "labelled-metadata",
        lambda label: any(word in label for word in METADATA_KEYWORDS),
        _labelled_metadata_section,
    ),
    SectionRule("generic", lambda label: True, _generic_section),
)


def select_rule(label: str) -> SectionRule:
    """Return the first rule whose predicate accepts the upper-cased *label*."""
    return next(rule for rule in SECTION_RULES if rule.predicate(label))


def classify_grid(grid: Grid) -> Section | None:
    """Classify a parsed table grid, returning None for an empty grid."""
    if not grid:
        return None
    first_row = grid[0]
    label = clean(first_row[0]).upper()
    content = first_row[1] if len(first_row) > 1 else ""
    rule = select_rule(label)
    logger.debug("Grid labelled %r matched rule %s", label, rule.name)
    return rule.handler(label, content, grid)
