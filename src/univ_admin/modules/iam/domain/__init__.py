"""IAM domain layer."""
from univ_admin.modules.iam.domain.errors import (
    InvalidEmailError,
    InvalidNameError,
    InvalidPasswordError,
    InvalidRoleError,
    InvalidUsernameError,
    UserAlreadyActiveError,
    UserAlreadyInactiveError,
)
from univ_admin.modules.iam.domain.events import UserCreated, UserCreatedPayload
from univ_admin.modules.iam.domain.repository import UserRepository
from univ_admin.modules.iam.domain.types import UserRole
from univ_admin.modules.iam.domain.user_account import CreateUserProps, UserAccount, UserAccountProps
from univ_admin.modules.iam.domain.value_objects import (
    ActiveFlag,
    EmailAddress,
    HashedPassword,
    PersonName,
    Role,
    Username,
)

__all__ = [
    "ActiveFlag",
    "CreateUserProps",
    "EmailAddress",
    "HashedPassword",
    "InvalidEmailError",
    "InvalidNameError",
    "InvalidPasswordError",
    "InvalidRoleError",
    "InvalidUsernameError",
    "PersonName",
    "Role",
    "UserAccount",
    "UserAccountProps",
    "UserAlreadyActiveError",
    "UserAlreadyInactiveError",
    "UserCreated",
    "UserCreatedPayload",
    "UserRepository",
    "UserRole",
    "Username",
]
