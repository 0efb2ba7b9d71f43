"""IAM persistence – SQLAlchemy-backed UserRepository."""
from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from univ_admin.adapters.sqlalchemy import SqlAlchemyRepositoryBase
from univ_admin.kernel.types import Option
from univ_admin.modules.iam.domain import UserAccount, UserRepository
from univ_admin.modules.iam.infrastructure.mapper import UserMapper
from univ_admin.modules.iam.infrastructure.models import UserModel


class SqlAlchemyUserRepository(SqlAlchemyRepositoryBase[UserAccount, UserModel], UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserModel, UserMapper())

    async def find_by_email(self, email: str) -> Option[UserAccount]:
        return await self._find_one(UserModel.email == email)

    async def find_by_username(self, username: str) -> Option[UserAccount]:
        return await self._find_one(UserModel.username == username)

    async def find_conflicting_user(self, email: str, username: str) -> Option[UserAccount]:
        return await self._find_one(or_(UserModel.email == email, UserModel.username == username))


__all__ = ["SqlAlchemyUserRepository"]
