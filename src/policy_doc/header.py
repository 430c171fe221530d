"""Display scalars shown above a policy document's parsed sections.

None of these fields are parsed as content; they are formatted for the
header block (document number, dates, owner) and bundled with the parsed
sections for the rendering layer.
"""

import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from policy_doc.config import DATE_DISPLAY_FORMAT, MISSING_DATE, MISSING_DOCUMENT_NUMBER, MISSING_OWNER
from policy_doc.parsing.pipeline import parse
from policy_doc.parsing.schema import Owner, RawDocument, Section

logger = logging.getLogger(__name__)


class DocumentHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    document_number: str
    effective_date: str
    review_date: str
    owner_name: str


class RenderedDocument(BaseModel):
    """Header plus parsed sections, handed to the rendering layer."""

    model_config = ConfigDict(frozen=True)

    header: DocumentHeader
    sections: list[Section]


def format_display_date(value: str | None) -> str:
    """Format an ISO-8601 date or datetime string as MM/DD/YYYY, or 'N/A'."""
    if not value:
        return MISSING_DATE
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        logger.warning("Unparseable display date %r", value)
        return MISSING_DATE
    return parsed.strftime(DATE_DISPLAY_FORMAT)


def format_owner_name(owner: Owner | None) -> str:
    """Return the trimmed owner name; only a missing owner reads 'Not assigned'."""
    if owner is None:
        return MISSING_OWNER
    return (owner.name or "").strip()


def build_header(document: RawDocument) -> DocumentHeader:
    """Build the header display fields for *document*."""
    return DocumentHeader(
        title=document.title,
        document_number=document.policy_number or MISSING_DOCUMENT_NUMBER,
        effective_date=format_display_date(document.effective_date),
        review_date=format_display_date(document.review_date),
        owner_name=format_owner_name(document.owner),
    )


def render_document(document: RawDocument) -> RenderedDocument:
    """Bundle the header with the parsed content sections."""
    return RenderedDocument(header=build_header(document), sections=parse(document.content))
