"""IAM application layer – use cases, ports and DTOs."""
from univ_admin.modules.iam.application.create_user import CreateUserService
from univ_admin.modules.iam.application.dtos import (
    CreateUserCommand,
    CreateUserResponse,
    LoginCommand,
    LoginResponse,
    UserSummary,
)
from univ_admin.modules.iam.application.errors import (
    AccountDisabledError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserAlreadyExistsError,
)
from univ_admin.modules.iam.application.login import LoginService
from univ_admin.modules.iam.application.ports import AuthTokens, TokenPayload, TokenService

__all__ = [
    "AccountDisabledError",
    "AuthTokens",
    "CreateUserCommand",
    "CreateUserResponse",
    "CreateUserService",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "LoginCommand",
    "LoginResponse",
    "LoginService",
    "TokenPayload",
    "TokenService",
    "UserAlreadyExistsError",
    "UserSummary",
]
