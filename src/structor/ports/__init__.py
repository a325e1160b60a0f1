from .credential_port import CredentialPort
from .naming_port import NamingPort

__all__ = ["CredentialPort", "NamingPort"]
