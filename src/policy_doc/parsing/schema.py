"""Pydantic models for policy documents, content blocks, and parsed sections.

Every model is frozen: entities are built fresh inside one parse call and
never mutated afterwards.  ``Section`` is a discriminated union on ``kind``
so a dumped section list validates straight back into typed sections.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from policy_doc.parsing.classifiers import is_table_line
from policy_doc.parsing.patterns import DEFINITION_LIST_LABEL, POLICY_STEPS_LABEL, REFERENCE_TABLE_LABEL


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ─── Input ────────────────────────────────────────────────────────────────────


class Owner(_Frozen):
    """Document owner as shown in the header."""

    id: str | None = None
    name: str | None = None


class RawDocument(_Frozen):
    """A policy document as loaded by the data layer.

    Only ``content`` is parsed; the other fields are display-only scalars
    handled by :mod:`policy_doc.header`.
    """

    content: str | None = ""
    title: str
    policy_number: str | None = None
    effective_date: str | None = None
    review_date: str | None = None
    owner: Owner | None = None


# ─── Segmentation ─────────────────────────────────────────────────────────────


class Line(_Frozen):
    text: str
    is_table_row: bool

    @classmethod
    def from_text(cls, text: str) -> "Line":
        return cls(text=text, is_table_row=is_table_line(text))


class Block(_Frozen):
    """A maximal run of contiguous lines of one kind."""

    kind: Literal["text", "table"]
    lines: list[str]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


# ─── Sub-Parser Results ───────────────────────────────────────────────────────


class Definition(_Frozen):
    term: str
    description: str


class Reference(_Frozen):
    ref_no: str
    title: str


# ─── Sections ─────────────────────────────────────────────────────────────────


class TextSection(_Frozen):
    """Free text between tables; inline '**bold**' markers are kept for format-mode rendering."""

    kind: Literal["text"] = "text"
    content: str


class MetadataSection(_Frozen):
    """A label/content table such as PURPOSE or SCOPE, or any unrecognised table."""

    kind: Literal["metadata"] = "metadata"
    label: str
    content: str
    rows: list[list[str]]


class PolicyStepsSection(_Frozen):
    """Step/Action rows with the block's header row already dropped.

    Action cells are carried uncleaned; the renderer formats them.
    """

    kind: Literal["policy-steps"] = "policy-steps"
    label: str = POLICY_STEPS_LABEL
    rows: list[list[str]]

    def steps(self) -> list[tuple[str, str]]:
        """Return (step_label, action) pairs, numbering rows whose label cell is empty."""
        pairs = []
        for idx, row in enumerate(self.rows, start=1):
            step_label = row[0] if row and row[0] else str(idx)
            action = row[1] if len(row) > 1 else ""
            pairs.append((step_label, action))
        return pairs


class NestedTableSection(_Frozen):
    kind: Literal["nested-table"] = "nested-table"
    label: str
    rows: list[list[str]]


class DefinitionListSection(_Frozen):
    kind: Literal["definition-list"] = "definition-list"
    label: str = DEFINITION_LIST_LABEL
    definitions: list[Definition]


class ReferenceTableSection(_Frozen):
    kind: Literal["reference-table"] = "reference-table"
    label: str = REFERENCE_TABLE_LABEL
    references: list[Reference]


Section = Annotated[
    Union[
        TextSection,
        MetadataSection,
        PolicyStepsSection,
        NestedTableSection,
        DefinitionListSection,
        ReferenceTableSection,
    ],
    Field(discriminator="kind"),
]

SECTION_LIST_ADAPTER = TypeAdapter(list[Section])
