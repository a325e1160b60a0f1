from .errors import (
    InvalidRunTransition,
    MissingInput,
    NamingServiceFailure,
    PackagingEmpty,
    StructorError,
)
from .models import (
    ContentHint,
    ExportArchive,
    InputFile,
    NameResult,
    RenameOutcome,
    RunState,
    RunStatus,
)
from .naming import FALLBACK_NAME, letter_suffix, sanitize_name, uniquify

__all__ = [
    "ContentHint",
    "ExportArchive",
    "FALLBACK_NAME",
    "InputFile",
    "InvalidRunTransition",
    "MissingInput",
    "NameResult",
    "NamingServiceFailure",
    "PackagingEmpty",
    "RenameOutcome",
    "RunState",
    "RunStatus",
    "StructorError",
    "letter_suffix",
    "sanitize_name",
    "uniquify",
]
