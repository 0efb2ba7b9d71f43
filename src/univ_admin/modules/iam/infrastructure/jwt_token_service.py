"""IAM infrastructure – JWT-backed TokenService."""
from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import Final

from univ_admin.config import AppSettings
from univ_admin.kernel.types import Option, from_nullable, from_throwable, nothing, some
from univ_admin.modules.iam.application.ports import AuthTokens, TokenPayload, TokenService
from univ_admin.security.jwt import JwtClaims, JwtDecoder, JwtIssuer

JWT_ALGORITHM: Final = "HS256"
DEFAULT_TTL: Final = timedelta(minutes=15)

_DURATION_RE: Final = re.compile(r"^(\d+)([smhd])$")
_UNIT_SECONDS: Final = {"s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str) -> timedelta:
    """``"15m"`` → 15 minutes.  Unparseable input falls back to 15 minutes."""
    match = _DURATION_RE.match(value.strip())
    if match is None:
        return DEFAULT_TTL
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])


def _payload_from(claims: JwtClaims) -> Option[TokenPayload]:
    username = claims.private.get("username")
    role = claims.private.get("role")
    if not claims.subject or not isinstance(username, str) or not isinstance(role, str):
        return nothing()
    return some(TokenPayload(user_id=claims.subject, username=username, role=role))


class JwtTokenService(TokenService):
    """HS256 access + refresh tokens signed with separate secrets."""

    def __init__(
        self,
        secret: str,
        refresh_secret: str,
        *,
        access_ttl: str = "15m",
        refresh_ttl: str = "7d",
        issuer: str = "",
        audience: str = "",
    ) -> None:
        self._access_ttl = parse_duration(access_ttl)
        self._refresh_ttl = parse_duration(refresh_ttl)
        scope = {"issuer": issuer, "audience": audience}
        self._access_issuer = JwtIssuer(secret, algorithm=JWT_ALGORITHM, **scope)
        self._refresh_issuer = JwtIssuer(refresh_secret, algorithm=JWT_ALGORITHM, **scope)
        self._access_decoder = JwtDecoder(secret, algorithms=[JWT_ALGORITHM], **scope)
        self._refresh_decoder = JwtDecoder(refresh_secret, algorithms=[JWT_ALGORITHM], **scope)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> JwtTokenService:
        return cls(
            settings.jwt_secret,
            settings.jwt_refresh_secret,
            access_ttl=settings.jwt_access_ttl,
            refresh_ttl=settings.jwt_refresh_ttl,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )

    def generate_auth_tokens(self, payload: TokenPayload) -> AuthTokens:
        access_token = self._access_issuer.issue(
            payload.user_id, self._access_ttl, username=payload.username, role=payload.role
        )
        refresh_token = self._refresh_issuer.issue(payload.user_id, self._refresh_ttl)
        expires_at = datetime.now(UTC) + self._access_ttl
        return AuthTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=int(expires_at.timestamp()),
        )

    def verify_token(self, token: str) -> Option[TokenPayload]:
        return (
            from_throwable(self._access_decoder.decode, token)
            .map(_payload_from)
            .match(ok=lambda payload: payload, err=lambda _: nothing())
        )

    def verify_refresh_token(self, token: str) -> Option[str]:
        """User id carried by a valid refresh token."""
        return from_throwable(self._refresh_decoder.decode, token).match(
            ok=lambda claims: from_nullable(claims.subject or None), err=lambda _: nothing()
        )


__all__ = ["JwtTokenService", "parse_duration"]
