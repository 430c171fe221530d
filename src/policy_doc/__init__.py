"""Policy-document content parsing.

Subpackages:
  parsing  -- pseudo-markdown content parser that emits typed Sections
  header   -- display scalars shown above the parsed sections
"""
