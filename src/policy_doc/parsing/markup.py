"""Inline markup cleanup for the two tokens the content format recognises.

``## `` at the start of a line is a heading marker and is always dropped.
``**bold**`` spans are either unwrapped (:func:`clean`) or rewritten into an
inline emphasis marker (:func:`format_text`).  Both modes go through the same
:func:`_rewrite` tokenizer so the token patterns live in exactly one place.
"""

from policy_doc.parsing.patterns import BOLD_RE, HEADING_RE

# Markers understood by the rendering collaborator
EMPHASIS_TEMPLATE = r"<strong>\1</strong>"
LINE_BREAK = "<br/>"


def _rewrite(text: str, bold_replacement: str) -> str:
    """Rewrite bold spans with *bold_replacement*, then drop line-start heading markers.

    Bold spans are rewritten until none is left, since unwrapping one span in
    a run of stars ("****a**b**") can close another.  Headings go last so a
    marker exposed by unwrapping ("**## x**") is removed in the same call.
    """
    while True:
        text, n_spans = BOLD_RE.subn(bold_replacement, text)
        if not n_spans:
            break
    return HEADING_RE.sub("", text)


def strip_headings(text: str) -> str:
    """Remove every line-start '## ' marker, leaving bold markers in place."""
    return HEADING_RE.sub("", text)


def clean(text: str) -> str:
    """Strip heading markers and unwrap '**bold**' spans to their inner text."""
    return _rewrite(text, r"\1")


def format_text(text: str) -> str:
    """Strip heading markers, emphasise '**bold**' spans, and turn newlines into line breaks."""
    return _rewrite(text, EMPHASIS_TEMPLATE).replace("\n", LINE_BREAK)
