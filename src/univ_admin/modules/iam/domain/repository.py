"""IAM domain – UserRepository port."""
from __future__ import annotations

import abc

from univ_admin.kernel.ddd import Repository
from univ_admin.kernel.types import Option
from univ_admin.modules.iam.domain.user_account import UserAccount


class UserRepository(Repository[UserAccount]):
    """Port: persistence of :class:`UserAccount` aggregates.

    E-mail lookups expect the normalised (lower-cased) address.
    """

    @abc.abstractmethod
    async def find_by_email(self, email: str) -> Option[UserAccount]: ...

    @abc.abstractmethod
    async def find_by_username(self, username: str) -> Option[UserAccount]: ...

    @abc.abstractmethod
    async def find_conflicting_user(self, email: str, username: str) -> Option[UserAccount]:
        """First account holding either *email* or *username*, if any."""


__all__ = ["UserRepository"]
