from __future__ import annotations

from typing import Protocol, runtime_checkable

from structor.domain.models import ContentHint


@runtime_checkable
class NamingPort(Protocol):
    def suggest_name(self, file_bytes: bytes, hint: ContentHint, api_key: str) -> str:
        """Return a free-text title suggestion, raising on any failure."""
