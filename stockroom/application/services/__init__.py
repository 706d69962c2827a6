from .password_hashing import WerkzeugPasswordHasher
from .tokens import SignedTokenService

__all__ = ["SignedTokenService", "WerkzeugPasswordHasher"]
