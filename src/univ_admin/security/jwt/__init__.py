"""Security – JWT utilities (PyJWT-backed)."""
from univ_admin.security.jwt.decoder import (
    DEFAULT_ALGORITHM,
    JwtClaims,
    JwtDecoder,
    JwtIssuer,
    JwtValidationError,
)

__all__ = ["DEFAULT_ALGORITHM", "JwtClaims", "JwtDecoder", "JwtIssuer", "JwtValidationError"]
