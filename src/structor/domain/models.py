from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from .errors import NamingServiceFailure

NameResult = dict[int, str]


@dataclass(frozen=True)
class InputFile:
    index: int
    name: str
    content: bytes = field(repr=False)

    def __post_init__(self) -> None:
        _, dot, ext = self.name.rpartition(".")
        if dot == "" or ext == "":
            raise ValueError(f"File name has no extension: {self.name!r}")

    @property
    def extension(self) -> str:
        return self.name.rpartition(".")[2]

    @property
    def base_name(self) -> str:
        return self.name.rpartition(".")[0]


@dataclass(frozen=True)
class ContentHint:
    mime_type: str
    description: str
    text_snippet: bool = False


class RunStatus(str, Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    STOPPED = "STOPPED"
    COMPLETED = "COMPLETED"


@dataclass
class RunState:
    status: RunStatus = RunStatus.IDLE
    processed_count: int = 0
    total: int = 0
    used_names: set[str] = field(default_factory=set)
    failures: dict[int, str] = field(default_factory=dict)

    @property
    def progress(self) -> int:
        """Percent of files processed, halves rounded up."""

        if self.total <= 0:
            return 0
        return math.floor(self.processed_count * 100 / self.total + 0.5)

    @property
    def is_active(self) -> bool:
        return self.status in (RunStatus.RUNNING, RunStatus.PAUSED)


@dataclass
class RenameOutcome:
    index: int
    final_name: str
    raw_suggestion: str
    error: NamingServiceFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ExportArchive:
    filename: str
    data: bytes = field(repr=False)
