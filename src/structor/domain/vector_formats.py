from __future__ import annotations

from .models import ContentHint

VECTOR_EXTENSIONS = (".svg", ".eps", ".ai")
SVG_SNIPPET_BYTES = 8000

_HINTS = {
    "svg": ContentHint(
        mime_type="image/svg+xml",
        description="SVG vector graphic content (XML).",
        text_snippet=True,
    ),
    "eps": ContentHint(
        mime_type="application/postscript",
        description="EPS vector graphic (PostScript-based).",
    ),
    "ai": ContentHint(
        mime_type="application/illustrator",
        description="Adobe Illustrator vector graphic.",
    ),
}
_GENERIC_HINT = ContentHint(
    mime_type="application/octet-stream",
    description="Vector design file.",
)


def is_vector_name(name: str) -> bool:
    return name.lower().endswith(VECTOR_EXTENSIONS)


def content_hint_for(extension: str) -> ContentHint:
    return _HINTS.get(extension.lower().lstrip("."), _GENERIC_HINT)


def text_snippet(file_bytes: bytes, hint: ContentHint) -> str:
    """
    Return the leading text of a text-based vector file, or "" for binary formats.

    Undecodable bytes are replaced so a truncated multi-byte sequence at the
    cut point does not fail the request.
    """
    if not hint.text_snippet:
        return ""
    return file_bytes[:SVG_SNIPPET_BYTES].decode("utf-8", errors="replace")
