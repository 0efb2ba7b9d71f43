"""IAM domain errors – returned inside ``Err``, never raised."""
from __future__ import annotations

from univ_admin.kernel.errors import ConflictError, ValidationError


class InvalidUsernameError(ValidationError):
    default_code = "USER.INVALID_USERNAME"

    def __init__(self, username: str, reason: str) -> None:
        super().__init__(
            f"Username '{username}' is not valid: {reason}",
            metadata={"username": username, "reason": reason},
        )


class InvalidEmailError(ValidationError):
    default_code = "USER.INVALID_EMAIL"

    def __init__(self, email: str) -> None:
        super().__init__(f"Email '{email}' is not valid", metadata={"email": email})


class InvalidNameError(ValidationError):
    default_code = "USER.INVALID_NAME"

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(
            f"Name '{name}' is not valid: {reason}",
            metadata={"name": name, "reason": reason},
        )


class InvalidPasswordError(ValidationError):
    default_code = "USER.INVALID_PASSWORD"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Password is not valid: {reason}", metadata={"reason": reason})


class InvalidRoleError(ValidationError):
    default_code = "USER.INVALID_ROLE"

    def __init__(self, role: str) -> None:
        super().__init__(f"Role '{role}' is not an allowed role", metadata={"role": role})


class UserAlreadyActiveError(ConflictError):
    default_code = "USER.ALREADY_ACTIVE"

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} is already active", metadata={"id": user_id})


class UserAlreadyInactiveError(ConflictError):
    default_code = "USER.ALREADY_INACTIVE"

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} is already inactive", metadata={"id": user_id})


__all__ = [
    "InvalidEmailError",
    "InvalidNameError",
    "InvalidPasswordError",
    "InvalidRoleError",
    "InvalidUsernameError",
    "UserAlreadyActiveError",
    "UserAlreadyInactiveError",
]
