from __future__ import annotations


class StructorError(RuntimeError):
    """Base class for errors surfaced to callers of the rename services."""


class MissingInput(StructorError):
    """Files, credential or a file index required by the operation is missing."""


class NamingServiceFailure(StructorError):
    """The naming service could not produce a suggestion for one file."""


class PackagingEmpty(StructorError):
    """An export was requested before any name was recorded."""


class InvalidRunTransition(StructorError):
    """The run state machine does not allow the requested operation."""
