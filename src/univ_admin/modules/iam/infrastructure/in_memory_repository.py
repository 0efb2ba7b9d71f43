"""IAM persistence – in-memory UserRepository for tests and local runs."""
from __future__ import annotations

from univ_admin.kernel.types import NOTHING, Option, Some
from univ_admin.modules.iam.domain import UserAccount, UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed store keyed by user id; keeps insertion order."""

    def __init__(self) -> None:
        self._items: dict[str, UserAccount] = {}

    async def save(self, aggregate: UserAccount) -> None:
        self._items[str(aggregate.id)] = aggregate

    async def find_by_id(self, id: str) -> Option[UserAccount]:  # noqa: A002
        user = self._items.get(id)
        return Some(user) if user is not None else NOTHING

    async def delete(self, aggregate: UserAccount) -> None:
        self._items.pop(str(aggregate.id), None)

    async def find_by_email(self, email: str) -> Option[UserAccount]:
        return self._first(lambda u: u.email == email)

    async def find_by_username(self, username: str) -> Option[UserAccount]:
        return self._first(lambda u: u.username == username)

    async def find_conflicting_user(self, email: str, username: str) -> Option[UserAccount]:
        return self._first(lambda u: u.email == email or u.username == username)

    def _first(self, predicate) -> Option[UserAccount]:  # noqa: ANN001
        for user in self._items.values():
            if predicate(user):
                return Some(user)
        return NOTHING

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["InMemoryUserRepository"]
