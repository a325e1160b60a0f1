from __future__ import annotations

import os

NAMING_PROVIDER = os.getenv("NAMING_PROVIDER", "mock")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.2"))
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30"))
RUN_YIELD_SECONDS = float(os.getenv("RUN_YIELD_SECONDS", "0.05"))
ARCHIVE_NAME = os.getenv("ARCHIVE_NAME", "renamed_files.zip")
