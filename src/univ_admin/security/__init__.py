"""Security – JWT and password hashing adapters."""
from univ_admin.security.hashing import BcryptPasswordHasher
from univ_admin.security.jwt import JwtClaims, JwtDecoder, JwtIssuer, JwtValidationError

__all__ = ["BcryptPasswordHasher", "JwtClaims", "JwtDecoder", "JwtIssuer", "JwtValidationError"]
