from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialPort(Protocol):
    def is_usable(self) -> bool:
        """Return True when a key is available for the naming service."""

    def api_key(self) -> str:
        """Return the key passed to the naming service."""
