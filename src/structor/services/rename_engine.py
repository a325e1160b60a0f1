from __future__ import annotations

import logging

from structor.domain.errors import NamingServiceFailure
from structor.domain.models import InputFile, RenameOutcome
from structor.domain.naming import FALLBACK_NAME, sanitize_name, uniquify
from structor.domain.vector_formats import content_hint_for
from structor.ports.naming_port import NamingPort

logger = logging.getLogger(__name__)


class RenameEngine:
    def __init__(self, naming: NamingPort) -> None:
        self._naming = naming

    def fetch_suggestion(
        self, file: InputFile, api_key: str
    ) -> tuple[str, NamingServiceFailure | None]:
        """Ask the naming service for a title, degrading to the fallback token."""
        hint = content_hint_for(file.extension)
        try:
            raw = self._naming.suggest_name(file.content, hint, api_key)
        except NamingServiceFailure as exc:
            logger.warning("Naming failed for %s: %s", file.name, exc)
            return FALLBACK_NAME, exc
        except Exception as exc:
            logger.warning("Naming failed for %s: %s", file.name, exc)
            failure = NamingServiceFailure(f"Rename failed for {file.name}: {exc}")
            failure.__cause__ = exc
            return FALLBACK_NAME, failure
        return (raw or FALLBACK_NAME), None

    def assign_name(self, raw: str, used_names: set[str]) -> str:
        return uniquify(sanitize_name(raw), used_names)

    def process_one(
        self, file: InputFile, used_names: set[str], api_key: str
    ) -> RenameOutcome:
        raw, error = self.fetch_suggestion(file, api_key)
        final_name = self.assign_name(raw, used_names)
        return RenameOutcome(
            index=file.index, final_name=final_name, raw_suggestion=raw, error=error
        )
