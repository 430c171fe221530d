"""Pseudo-markdown policy content parser.

Submodules:
  patterns     -- compiled regex patterns and label keyword tuples
  classifiers  -- line classification helpers (table line, separator row, nested table)
  markup       -- ``## `` / ``**bold**`` cleanup in strip and format modes
  grid         -- pipe-table text to a grid of trimmed cells
  extractors   -- reference-list and definition-list sub-parsers
  schema       -- Pydantic models for documents, blocks, and sections
  sections     -- ordered rule table that turns one grid into one Section
  pipeline     -- block segmentation, parse() entry point, and CLI
"""

from policy_doc.parsing.pipeline import parse

__all__ = ["parse"]
