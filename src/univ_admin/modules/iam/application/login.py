"""IAM use case – authenticate with username/e-mail and password."""
from __future__ import annotations

import asyncio

from univ_admin.application.cqrs import CommandHandler
from univ_admin.kernel.errors import DomainError
from univ_admin.kernel.security import PasswordHasher
from univ_admin.kernel.types import Option, Result, err, ok
from univ_admin.modules.iam.application.dtos import LoginCommand, LoginResponse, UserSummary
from univ_admin.modules.iam.application.errors import AccountDisabledError, InvalidCredentialsError
from univ_admin.modules.iam.application.ports import TokenPayload, TokenService
from univ_admin.modules.iam.domain import UserAccount, UserRepository
from univ_admin.observability.logging import get_logger

_log = get_logger(__name__)


class LoginService(CommandHandler[LoginCommand, LoginResponse]):
    """Unknown user and wrong password are indistinguishable to the caller."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def execute(self, command: LoginCommand) -> Result[LoginResponse, DomainError]:
        found = await self._lookup(command.identifier)
        if found.is_none():
            _log.info("auth.login_failed", reason="unknown_user")
            return err(InvalidCredentialsError())

        user = found.unwrap()
        matches = await asyncio.to_thread(self._hasher.verify, command.password, user.password_hash)
        if not matches:
            _log.info("auth.login_failed", reason="bad_password", user_id=str(user.id))
            return err(InvalidCredentialsError())

        if not user.is_active:
            _log.info("auth.login_failed", reason="disabled", user_id=str(user.id))
            return err(AccountDisabledError(str(user.id)))

        tokens = self._tokens.generate_auth_tokens(
            TokenPayload(user_id=str(user.id), username=user.username, role=user.role.value)
        )
        _log.info("auth.login_succeeded", user_id=str(user.id))
        return ok(LoginResponse(tokens=tokens, user=UserSummary.from_user(user)))

    async def _lookup(self, identifier: str) -> Option[UserAccount]:
        value = identifier.strip()
        if "@" in value:
            return await self._users.find_by_email(value.lower())
        return await self._users.find_by_username(value)


__all__ = ["LoginService"]
