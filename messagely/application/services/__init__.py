from .credential_store import CredentialStore
from .password_hashing import WerkzeugPasswordHasher

__all__ = ["CredentialStore", "WerkzeugPasswordHasher"]
