"""IAM application ports."""
from __future__ import annotations

import abc
import dataclasses

from univ_admin.kernel.types import Option


@dataclasses.dataclass(frozen=True)
class TokenPayload:
    """Claims carried by an access token."""

    user_id: str
    username: str
    role: str


@dataclasses.dataclass(frozen=True)
class AuthTokens:
    access_token: str
    refresh_token: str
    expires_in: int
    """Unix timestamp (seconds) at which the access token expires."""


class TokenService(abc.ABC):
    """Port: issue and verify authentication tokens."""

    @abc.abstractmethod
    def generate_auth_tokens(self, payload: TokenPayload) -> AuthTokens: ...

    @abc.abstractmethod
    def verify_token(self, token: str) -> Option[TokenPayload]:
        """Payload of a valid access token, ``Nothing`` otherwise."""


__all__ = ["AuthTokens", "TokenPayload", "TokenService"]
