"""IAM infrastructure – persistence and token adapters."""
from univ_admin.modules.iam.infrastructure.in_memory_repository import InMemoryUserRepository
from univ_admin.modules.iam.infrastructure.jwt_token_service import JwtTokenService, parse_duration
from univ_admin.modules.iam.infrastructure.mapper import UserMapper
from univ_admin.modules.iam.infrastructure.models import UserModel
from univ_admin.modules.iam.infrastructure.sqlalchemy_repository import SqlAlchemyUserRepository

__all__ = [
    "InMemoryUserRepository",
    "JwtTokenService",
    "SqlAlchemyUserRepository",
    "UserMapper",
    "UserModel",
    "parse_duration",
]
