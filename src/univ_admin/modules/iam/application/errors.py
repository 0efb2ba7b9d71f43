"""IAM application errors."""
from __future__ import annotations

from univ_admin.kernel.errors import ConflictError, ForbiddenError, UnauthorizedError


class UserAlreadyExistsError(ConflictError):
    default_code = "USER.ALREADY_EXISTS"

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"User with identifier '{identifier}' already exists",
            metadata={"identifier": identifier},
        )


class InvalidCredentialsError(UnauthorizedError):
    default_code = "AUTH.INVALID_CREDENTIALS"

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class InvalidTokenError(UnauthorizedError):
    default_code = "AUTH.INVALID_TOKEN"

    def __init__(self) -> None:
        super().__init__("Missing, invalid or expired token")


class AccountDisabledError(ForbiddenError):
    default_code = "AUTH.ACCOUNT_DISABLED"

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} is disabled", metadata={"id": user_id})


__all__ = [
    "AccountDisabledError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "UserAlreadyExistsError",
]
