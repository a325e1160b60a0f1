from __future__ import annotations

from typing import Any

from structor.adapters.credential_static import StaticCredentialAdapter
from structor.adapters.folder_source import FolderSourceAdapter
from structor.adapters.naming_mock import MockNamingAdapter
from structor.adapters.naming_openai import OpenAINamingAdapter
from structor.ports.naming_port import NamingPort
from structor.services.export_service import ExportService
from structor.services.rename_engine import RenameEngine
from structor.services.run_controller import ProgressCallback, RunController
from structor.settings import (
    ARCHIVE_NAME,
    NAMING_PROVIDER,
    OPENAI_BASE_URL,
    OPENAI_MODEL,
    OPENAI_TEMPERATURE,
    OPENAI_TIMEOUT_SECONDS,
    RUN_YIELD_SECONDS,
)

SUPPORTED_PROVIDERS = ("openai", "mock")


def build_naming(provider: str) -> NamingPort:
    provider = provider.strip().lower()
    if provider == "openai":
        return OpenAINamingAdapter(
            model=OPENAI_MODEL,
            base_url=OPENAI_BASE_URL,
            temperature=OPENAI_TEMPERATURE,
            timeout=OPENAI_TIMEOUT_SECONDS,
        )
    if provider == "mock":
        return MockNamingAdapter()
    raise ValueError(f"Only OpenAI supported in this build (got {provider!r})")


def build_services(
    api_key: str,
    provider: str | None = None,
    on_progress: ProgressCallback | None = None,
    yield_seconds: float | None = None,
) -> dict[str, Any]:
    naming = build_naming(provider or NAMING_PROVIDER)
    credentials = StaticCredentialAdapter(api_key)
    engine = RenameEngine(naming)
    controller = RunController(
        engine,
        credentials,
        on_progress=on_progress,
        yield_seconds=RUN_YIELD_SECONDS if yield_seconds is None else yield_seconds,
    )
    return {
        "run_controller": controller,
        "rename_engine": engine,
        "export_service": ExportService(ARCHIVE_NAME),
        "folder_source": FolderSourceAdapter(),
        "credentials": credentials,
        "naming": naming,
    }
