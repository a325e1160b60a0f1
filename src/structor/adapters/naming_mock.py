from __future__ import annotations

from structor.domain.models import ContentHint
from structor.ports.naming_port import NamingPort


class MockNamingAdapter(NamingPort):
    """Offline stand-in that names every file after its format."""

    def suggest_name(self, file_bytes: bytes, hint: ContentHint, api_key: str) -> str:
        _ = file_bytes
        _ = api_key
        words = hint.description.split()
        return "".join(word.capitalize() for word in words[:2])
