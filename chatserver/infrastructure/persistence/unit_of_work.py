"""
SQLAlchemy Unit of Work - commits or rolls back the request's session.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from chatserver.domain.ports.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
