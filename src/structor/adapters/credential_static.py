from __future__ import annotations

from structor.ports.credential_port import CredentialPort


class StaticCredentialAdapter(CredentialPort):
    def __init__(self, api_key: str | None) -> None:
        self._api_key = (api_key or "").strip()

    def is_usable(self) -> bool:
        return bool(self._api_key)

    def api_key(self) -> str:
        return self._api_key
