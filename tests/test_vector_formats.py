from structor.domain.vector_formats import (
    SVG_SNIPPET_BYTES,
    content_hint_for,
    is_vector_name,
    text_snippet,
)


def test_is_vector_name_is_case_insensitive() -> None:
    assert is_vector_name("logo.SVG")
    assert is_vector_name("poster.eps")
    assert is_vector_name("brand.Ai")
    assert not is_vector_name("photo.png")
    assert not is_vector_name("svg")


def test_content_hint_for_known_and_unknown_extensions() -> None:
    assert content_hint_for("svg").mime_type == "image/svg+xml"
    assert content_hint_for(".EPS").description == "EPS vector graphic (PostScript-based)."
    assert content_hint_for("ai").description == "Adobe Illustrator vector graphic."
    assert content_hint_for("pdf").description == "Vector design file."


def test_text_snippet_only_for_text_formats() -> None:
    svg = content_hint_for("svg")
    eps = content_hint_for("eps")
    content = b"<svg>" + b"x" * (SVG_SNIPPET_BYTES * 2)
    assert len(text_snippet(content, svg)) == SVG_SNIPPET_BYTES
    assert text_snippet(content, eps) == ""


def test_text_snippet_tolerates_cut_multibyte_sequence() -> None:
    hint = content_hint_for("svg")
    content = b"a" * (SVG_SNIPPET_BYTES - 1) + "é".encode("utf-8")
    snippet = text_snippet(content, hint)
    assert snippet.startswith("aaa")
    assert len(snippet) == SVG_SNIPPET_BYTES
