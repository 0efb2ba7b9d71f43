"""IAM persistence – UserAccount ⇄ UserModel mapping."""
from __future__ import annotations

from univ_admin.adapters.sqlalchemy import as_utc
from univ_admin.kernel.types import UniqueEntityID
from univ_admin.modules.iam.domain import (
    ActiveFlag,
    EmailAddress,
    HashedPassword,
    PersonName,
    Role,
    UserAccount,
    UserAccountProps,
    UserRole,
    Username,
)
from univ_admin.modules.iam.infrastructure.models import UserModel


class UserMapper:
    """Stored rows are trusted: value objects are built without validation."""

    @staticmethod
    def to_persistence(user: UserAccount) -> UserModel:
        return UserModel(
            id=str(user.id),
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_domain(row: UserModel) -> UserAccount:
        props = UserAccountProps(
            username=Username(row.username),
            email=EmailAddress(row.email),
            first_name=PersonName(row.first_name),
            last_name=PersonName(row.last_name),
            password=HashedPassword(row.password_hash),
            role=Role(UserRole(row.role)),
            is_active=ActiveFlag(bool(row.is_active)),
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )
        return UserAccount.rehydrate(props, UniqueEntityID(row.id))


__all__ = ["UserMapper"]
