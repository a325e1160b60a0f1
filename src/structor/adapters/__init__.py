from .credential_static import StaticCredentialAdapter
from .folder_source import FolderSourceAdapter
from .naming_mock import MockNamingAdapter
from .naming_openai import OpenAINamingAdapter

__all__ = [
    "FolderSourceAdapter",
    "MockNamingAdapter",
    "OpenAINamingAdapter",
    "StaticCredentialAdapter",
]
