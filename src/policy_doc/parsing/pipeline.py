"""Main content-parsing entry point and command-line wrapper.

Segments a policy content blob into alternating text/table blocks in source
order, then flushes each block: table blocks go through the grid parser and
the section classifier, text blocks through heading cleanup.  Empty blocks
emit nothing.  The parser is a pure function of its input string; it never
raises and keeps no state between calls.

Usage:
    python -m policy_doc.parsing.pipeline content.md
    python -m policy_doc.parsing.pipeline document.json --json-document
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Iterator

from policy_doc.config import LOG_FORMAT, log_level
from policy_doc.parsing.grid import parse_markdown_table
from policy_doc.parsing.markup import strip_headings
from policy_doc.parsing.schema import Block, Line, RawDocument, Section, TextSection
from policy_doc.parsing.sections import classify_grid

logger = logging.getLogger(__name__)


# ─── Segmentation ─────────────────────────────────────────────────────────────


def iter_blocks(content: str) -> Iterator[Block]:
    """Yield maximal runs of text lines and table lines, in source order.

    The first block is always a text block (possibly with no lines) because
    accumulation starts in the text state.
    """
    kind = "text"
    buffer: list[str] = []
    for line in (Line.from_text(text) for text in content.split("\n")):
        line_kind = "table" if line.is_table_row else "text"
        if line_kind != kind:
            yield Block(kind=kind, lines=buffer)
            kind, buffer = line_kind, []
        buffer.append(line.text)
    yield Block(kind=kind, lines=buffer)


# ─── Flushing ─────────────────────────────────────────────────────────────────


def _flush_text(block: Block) -> Section | None:
    """Strip heading markers and trim; bold markers are kept for the renderer."""
    text = strip_headings(block.text).strip()
    if not text:
        return None
    return TextSection(content=text)


def _flush_table(block: Block) -> Section | None:
    return classify_grid(parse_markdown_table(block.text))


def flush_block(block: Block) -> Section | None:
    """Turn one block into its Section, or None when the block carries nothing."""
    section = _flush_table(block) if block.kind == "table" else _flush_text(block)
    logger.debug(
        "Flushed %s block (%d lines) -> %s",
        block.kind,
        len(block.lines),
        section.kind if section is not None else "nothing",
    )
    return section


# ─── Main Entry Point ─────────────────────────────────────────────────────────


def parse(content: str | None) -> list[Section]:
    """Parse a policy content blob into an ordered list of Sections."""
    if not content:
        return []
    sections = []
    for block in iter_blocks(content):
        section = flush_block(block)
        if section is not None:
            sections.append(section)
    return sections


def main():
    """Parse a content file (or a JSON document) and print the sections as JSON."""
    parser = argparse.ArgumentParser(description="Parse policy document content into typed sections")
    parser.add_argument("path", type=Path, help="Content file, or a JSON document with --json-document")
    parser.add_argument("--json-document", action="store_true", help="Treat PATH as a JSON policy document")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent for the output (default: 2)")
    args = parser.parse_args()

    logging.basicConfig(level=log_level(), format=LOG_FORMAT)

    with open(args.path, "r", encoding="utf-8") as fopen:
        raw = fopen.read()

    if args.json_document:
        # Imported here: header depends on this module for parse()
        from policy_doc.header import render_document  # pylint: disable=import-outside-toplevel

        document = RawDocument.model_validate_json(raw)
        output = render_document(document).model_dump(mode="json")
        n_lines = len((document.content or "").split("\n"))
        n_sections = len(output["sections"])
    else:
        sections = parse(raw)
        output = [section.model_dump(mode="json") for section in sections]
        n_lines = len(raw.split("\n"))
        n_sections = len(sections)

    logger.info("Parsed %d lines into %d sections", n_lines, n_sections)
    print(json.dumps(output, indent=args.indent, ensure_ascii=False))


if __name__ == "__main__":
    main()
