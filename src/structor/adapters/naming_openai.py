from __future__ import annotations

import json

import requests

from structor.domain.errors import NamingServiceFailure
from structor.domain.models import ContentHint
from structor.domain.vector_formats import text_snippet
from structor.ports.naming_port import NamingPort

PROMPT_SNIPPET_CHARS = 2000


class OpenAINamingAdapter(NamingPort):
    def __init__(
        self,
        model: str,
        base_url: str,
        temperature: float = 0.2,
        timeout: float = 30,
        max_tokens: int = 60,
    ) -> None:
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._temperature = temperature
        self._timeout = timeout
        self._max_tokens = max_tokens

    def suggest_name(self, file_bytes: bytes, hint: ContentHint, api_key: str) -> str:
        if not api_key:
            raise NamingServiceFailure("Missing API key")
        messages = self._build_messages(file_bytes, hint)
        payload = self._post_response(messages, api_key)
        return self._extract_output_text(payload)

    def _build_messages(self, file_bytes: bytes, hint: ContentHint) -> list[dict[str, str]]:
        snippet = text_snippet(file_bytes, hint)
        snippet_block = (
            f"Snippet (may be truncated):\n{snippet[:PROMPT_SNIPPET_CHARS]}" if snippet else ""
        )
        prompt = (
            "You are a professional digital asset curator.\n"
            "Return a concise filename title for the file described below.\n"
            "- Use ONLY English letters (A-Z, a-z). No digits. No spaces. "
            "No underscores. No hyphens. No punctuation.\n"
            "- Length: 2-5 words concatenated (e.g., ElegantFloralMandala).\n"
            "- Do NOT include any file extension.\n"
            "- The name must be generic but content-relevant and stock-ready.\n\n"
            f"Context hint: {hint.description}\n"
            f"{snippet_block}"
        )
        return [{"role": "user", "content": prompt}]

    def _post_response(self, messages: list[dict[str, str]], api_key: str) -> dict:
        try:
            response = requests.post(
                f"{self._base_url}/responses",
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": self._model,
                    "input": self._to_response_input(messages),
                    "temperature": self._temperature,
                    "max_output_tokens": self._max_tokens,
                },
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NamingServiceFailure(f"Naming request failed: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise NamingServiceFailure("Naming response was not JSON") from exc
        if not isinstance(payload, dict):
            raise NamingServiceFailure("Naming response was not an object")
        return payload

    @staticmethod
    def _extract_output_text(payload: dict) -> str:
        direct_text = payload.get("output_text")
        if isinstance(direct_text, str) and direct_text.strip():
            return direct_text.strip()
        output_items = payload.get("output", [])
        for item in output_items:
            content = item.get("content", [])
            for block in content:
                if block.get("type") in {"output_text", "text"}:
                    return (block.get("text") or "").strip()
                if block.get("type") == "output_json":
                    json_payload = block.get("json")
                    if json_payload is None:
                        continue
                    return json.dumps(json_payload)
        return ""

    @staticmethod
    def _to_response_input(messages: list[dict[str, str]]) -> list[dict]:
        converted = []
        for message in messages:
            content = message.get("content", "")
            converted.append(
                {
                    "role": message.get("role"),
                    "content": [{"type": "input_text", "text": str(content)}],
                }
            )
        return converted
