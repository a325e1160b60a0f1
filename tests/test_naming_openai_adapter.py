import pytest
import requests

from structor.adapters import naming_openai
from structor.adapters.naming_openai import OpenAINamingAdapter
from structor.domain.errors import NamingServiceFailure
from structor.domain.vector_formats import content_hint_for


def _adapter() -> OpenAINamingAdapter:
    return OpenAINamingAdapter(model="mock", base_url="https://example.com/v1/")


class _FakeResponse:
    def __init__(self, payload: object, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> object:
        return self._payload


def test_suggest_name_posts_prompt_and_reads_output_text(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def _fake_post(url, headers, json, timeout):
        captured["url"] = url
        captured["headers"] = headers
        captured["json"] = json
        captured["timeout"] = timeout
        return _FakeResponse({"output_text": "  ElegantFloralMandala \n"})

    monkeypatch.setattr(naming_openai.requests, "post", _fake_post)

    name = _adapter().suggest_name(b"<svg><circle/></svg>", content_hint_for("svg"), "sk-test")

    assert name == "ElegantFloralMandala"
    assert captured["url"] == "https://example.com/v1/responses"
    assert captured["headers"]["Authorization"] == "Bearer sk-test"
    body = captured["json"]
    assert body["model"] == "mock"
    assert body["temperature"] == 0.2
    prompt = body["input"][0]["content"][0]["text"]
    assert "SVG vector graphic content (XML)." in prompt
    assert "<svg><circle/></svg>" in prompt


def test_prompt_omits_snippet_for_binary_formats() -> None:
    messages = _adapter()._build_messages(b"%!PS-Adobe", content_hint_for("eps"))
    prompt = messages[0]["content"]
    assert "EPS vector graphic (PostScript-based)." in prompt
    assert "Snippet" not in prompt
    assert "%!PS-Adobe" not in prompt


def test_prompt_truncates_long_svg_snippet() -> None:
    content = b"<svg>" + b"x" * 5000
    prompt = _adapter()._build_messages(content, content_hint_for("svg"))[0]["content"]
    snippet = prompt.split("Snippet (may be truncated):\n", 1)[1]
    assert len(snippet) == naming_openai.PROMPT_SNIPPET_CHARS


def test_suggest_name_requires_api_key() -> None:
    with pytest.raises(NamingServiceFailure, match="Missing API key"):
        _adapter().suggest_name(b"", content_hint_for("svg"), "")


def test_request_errors_become_naming_failures(monkeypatch) -> None:
    monkeypatch.setattr(
        naming_openai.requests,
        "post",
        lambda *args, **kwargs: _FakeResponse({"error": "bad key"}, status_code=401),
    )
    with pytest.raises(NamingServiceFailure, match="401"):
        _adapter().suggest_name(b"", content_hint_for("ai"), "sk-test")


def test_non_json_response_becomes_naming_failure(monkeypatch) -> None:
    class _BrokenResponse(_FakeResponse):
        def json(self) -> object:
            raise ValueError("not json")

    monkeypatch.setattr(
        naming_openai.requests, "post", lambda *args, **kwargs: _BrokenResponse(None)
    )
    with pytest.raises(NamingServiceFailure, match="not JSON"):
        _adapter().suggest_name(b"", content_hint_for("ai"), "sk-test")


def test_extract_output_text_reads_nested_blocks() -> None:
    payload = {
        "output": [
            {"type": "reasoning", "content": []},
            {"content": [{"type": "output_text", "text": " GoldenLeaf "}]},
        ]
    }
    assert OpenAINamingAdapter._extract_output_text(payload) == "GoldenLeaf"
    assert OpenAINamingAdapter._extract_output_text({}) == ""
