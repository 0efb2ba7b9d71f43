"""Security – JWT signing and verification bound to one secret (PyJWT-backed)."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any, Final

import jwt as pyjwt

from univ_admin.kernel.errors import ExceptionBase

__all__ = [
    "DEFAULT_ALGORITHM",
    "JwtClaims",
    "JwtDecoder",
    "JwtIssuer",
    "JwtValidationError",
]

DEFAULT_ALGORITHM: Final = "HS256"
_REGISTERED_CLAIMS: Final = frozenset({"sub", "iss", "aud", "exp", "iat", "nbf", "jti"})


class JwtValidationError(ExceptionBase):
    """Raised when a token is malformed, badly signed, expired or meant for someone else."""
    default_code = "JWT_INVALID"


def _from_timestamp(value: Any) -> datetime:
    return datetime.fromtimestamp(int(value), tz=UTC)


@dataclass(frozen=True)
class JwtClaims:
    """Contents of a verified token.

    Registered claims get typed attributes; everything else (``username``,
    ``role``, ...) is kept in :attr:`private`.
    """

    subject: str
    expires_at: datetime
    issued_at: datetime | None = None
    issuer: str | None = None
    audience: str | list[str] | None = None
    private: dict[str, Any] = field(default_factory=dict)

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> JwtClaims:
        return cls(
            subject=str(payload["sub"]),
            expires_at=_from_timestamp(payload["exp"]),
            issued_at=_from_timestamp(payload["iat"]) if "iat" in payload else None,
            issuer=payload.get("iss"),
            audience=payload.get("aud"),
            private={k: v for k, v in payload.items() if k not in _REGISTERED_CLAIMS},
        )


class JwtIssuer:
    """Signs tokens with a single secret.

    ``iss`` and ``aud`` are stamped on every token when configured; ``iat``
    and ``exp`` are always set.
    """

    def __init__(
        self,
        secret: str | bytes,
        *,
        issuer: str = "",
        audience: str = "",
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._algorithm = algorithm

    def issue(self, subject: str, expires_in: timedelta, **claims: Any) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {**claims, "sub": subject, "iat": now, "exp": now + expires_in}
        if self._issuer:
            payload["iss"] = self._issuer
        if self._audience:
            payload["aud"] = self._audience
        return pyjwt.encode(payload, self._secret, algorithm=self._algorithm)


class JwtDecoder:
    """Verifies tokens signed by the matching :class:`JwtIssuer`.

    ``sub`` and ``exp`` are mandatory.  Issuer and audience are checked only
    when configured.
    """

    def __init__(
        self,
        secret: str | bytes,
        *,
        issuer: str = "",
        audience: str = "",
        algorithms: list[str] | None = None,
    ) -> None:
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._algorithms = algorithms or [DEFAULT_ALGORITHM]

    def decode(self, token: str) -> JwtClaims:
        options: dict[str, Any] = {"require": ["exp", "sub"], "verify_aud": bool(self._audience)}
        try:
            payload = pyjwt.decode(
                token,
                self._secret,
                algorithms=self._algorithms,
                audience=self._audience or None,
                issuer=self._issuer or None,
                options=options,
            )
        except pyjwt.ExpiredSignatureError as exc:
            raise JwtValidationError("Token has expired", cause=exc) from exc
        except pyjwt.InvalidAudienceError as exc:
            raise JwtValidationError("Invalid audience", cause=exc) from exc
        except pyjwt.InvalidIssuerError as exc:
            raise JwtValidationError("Invalid issuer", cause=exc) from exc
        except pyjwt.PyJWTError as exc:
            raise JwtValidationError(str(exc), cause=exc) from exc
        return JwtClaims.from_payload(payload)
