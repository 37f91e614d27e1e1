"""
SQLAlchemy Chat Repository Implementation.

Members are stored as a JSON array; order is preserved as given.
"""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatserver.domain.entities.chat import Chat, ChatSpec
from chatserver.domain.ports.repositories import ChatRepository
from chatserver.domain.value_objects.chat_type import ChatType
from chatserver.infrastructure.persistence.models import ChatRow


class SqlAlchemyChatRepository(ChatRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, row: ChatRow) -> Chat:
        return Chat(
            id=row.id,
            ws_id=row.ws_id,
            name=row.name,
            type=ChatType(row.type),
            members=[int(member) for member in row.members],
            created_at=row.created_at,
        )

    async def get_by_id(self, chat_id: int) -> Optional[Chat]:
        row = await self._session.get(ChatRow, chat_id, populate_existing=True)
        return self._to_entity(row) if row else None

    async def list_by_workspace(self, ws_id: int) -> list[Chat]:
        result = await self._session.execute(
            select(ChatRow).where(ChatRow.ws_id == ws_id).order_by(ChatRow.id)
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, ws_id: int, spec: ChatSpec) -> Chat:
        row = ChatRow(
            ws_id=ws_id,
            name=spec.name,
            type=spec.chat_type,
            members=list(spec.members),
        )
        self._session.add(row)
        await self._session.flush()
        return self._to_entity(row)

    async def update(self, chat_id: int, spec: ChatSpec) -> Optional[Chat]:
        row = await self._session.get(ChatRow, chat_id, populate_existing=True)
        if row is None:
            return None
        row.name = spec.name
        row.type = spec.chat_type
        row.members = list(spec.members)
        await self._session.flush()
        return self._to_entity(row)

    async def delete(self, chat_id: int) -> bool:
        result = await self._session.execute(
            delete(ChatRow.__table__).where(ChatRow.__table__.c.id == chat_id)
        )
        return result.rowcount > 0
