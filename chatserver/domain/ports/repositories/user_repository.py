"""
User Repository Port - Interface for user persistence.
Implementation: chatserver/infrastructure/persistence/sqlalchemy_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from chatserver.domain.entities.user import User, UserRecord
from chatserver.domain.value_objects.user_email import UserEmail


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: UserEmail) -> Optional[UserRecord]:
        """Return the record including its password hash."""
        ...

    @abstractmethod
    async def create(
        self, ws_id: int, fullname: str, email: UserEmail, password_hash: str
    ) -> User:
        """Insert a user. Raises EmailAlreadyExists on a unique violation."""
        ...

    @abstractmethod
    async def existing_ids(self, user_ids: Iterable[int]) -> set[int]:
        """Return the subset of user_ids that exist."""
        ...
