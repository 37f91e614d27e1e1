"""
SQLAlchemy User Repository Implementation.

- Implements UserRepository port from domain layer
- Maps between UserRow and the User / UserRecord entities
- Never commits: the request's UnitOfWork decides
"""

from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chatserver.domain.entities.user import User, UserRecord
from chatserver.domain.exceptions import EmailAlreadyExists
from chatserver.domain.ports.repositories import UserRepository
from chatserver.domain.value_objects.user_email import UserEmail
from chatserver.infrastructure.persistence.models import UserRow


def to_user(row: UserRow) -> User:
    return User(
        id=row.id,
        ws_id=row.ws_id,
        fullname=row.fullname,
        email=UserEmail(row.email),
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_record(self, row: UserRow) -> UserRecord:
        return UserRecord(
            id=row.id,
            ws_id=row.ws_id,
            fullname=row.fullname,
            email=UserEmail(row.email),
            password_hash=row.password_hash,
            created_at=row.created_at,
        )

    async def get_by_id(self, user_id: int) -> Optional[User]:
        row = await self._session.get(UserRow, user_id)
        return to_user(row) if row else None

    async def get_by_email(self, email: UserEmail) -> Optional[UserRecord]:
        result = await self._session.execute(
            select(UserRow).where(UserRow.email == email.value)
        )
        row = result.scalar_one_or_none()
        return self._to_record(row) if row else None

    async def create(
        self, ws_id: int, fullname: str, email: UserEmail, password_hash: str
    ) -> User:
        row = UserRow(
            ws_id=ws_id,
            fullname=fullname,
            email=email.value,
            password_hash=password_hash,
        )
        try:
            async with self._session.begin_nested():
                self._session.add(row)
                await self._session.flush()
        except IntegrityError as e:
            raise EmailAlreadyExists(email.value) from e
        return to_user(row)

    async def existing_ids(self, user_ids: Iterable[int]) -> set[int]:
        ids = list(user_ids)
        if not ids:
            return set()
        result = await self._session.execute(
            select(UserRow.id).where(UserRow.id.in_(ids))
        )
        return set(result.scalars().all())
