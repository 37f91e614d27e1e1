"""
SQLAlchemy Workspace Repository Implementation.

Ownership updates are single conditional UPDATE statements; the membership
check lives in the WHERE clause so it is evaluated atomically with the write:

    UPDATE workspaces SET owner_id = :user
    WHERE id = :ws AND (SELECT ws_id FROM users WHERE id = :user) = :ws
"""

import dataclasses
import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chatserver.domain.entities.user import User
from chatserver.domain.entities.workspace import UNOWNED, Workspace
from chatserver.domain.exceptions import DuplicateWorkspace, OwnershipAssignmentFailed
from chatserver.domain.ports.repositories import WorkspaceRepository
from chatserver.infrastructure.persistence.models import UserRow, WorkspaceRow
from chatserver.infrastructure.persistence.sqlalchemy_user_repository import to_user

logger = logging.getLogger(__name__)


class SqlAlchemyWorkspaceRepository(WorkspaceRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, row: WorkspaceRow) -> Workspace:
        return Workspace(
            id=row.id,
            name=row.name,
            owner_id=row.owner_id,
            created_at=row.created_at,
        )

    async def get_by_id(self, workspace_id: int) -> Optional[Workspace]:
        row = await self._session.get(
            WorkspaceRow, workspace_id, populate_existing=True
        )
        return self._to_entity(row) if row else None

    async def get_by_name(self, name: str) -> Optional[Workspace]:
        result = await self._session.execute(
            select(WorkspaceRow)
            .where(WorkspaceRow.name == name)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return self._to_entity(row) if row else None

    async def create(self, name: str, owner_id: int = UNOWNED) -> Workspace:
        row = WorkspaceRow(name=name, owner_id=owner_id)
        try:
            async with self._session.begin_nested():
                self._session.add(row)
                await self._session.flush()
        except IntegrityError as e:
            raise DuplicateWorkspace(name) from e
        return self._to_entity(row)

    async def update_owner(self, workspace: Workspace, owner_id: int) -> Workspace:
        return await self._set_owner(workspace, owner_id, only_if_unowned=False)

    async def claim_ownership(self, workspace: Workspace, user_id: int) -> Workspace:
        return await self._set_owner(workspace, user_id, only_if_unowned=True)

    async def _set_owner(
        self, workspace: Workspace, owner_id: int, only_if_unowned: bool
    ) -> Workspace:
        table = WorkspaceRow.__table__
        member_ws_id = (
            select(UserRow.ws_id).where(UserRow.id == owner_id).scalar_subquery()
        )
        stmt = (
            update(table)
            .where(table.c.id == workspace.id, member_ws_id == workspace.id)
            .values(owner_id=owner_id)
        )
        if only_if_unowned:
            stmt = stmt.where(table.c.owner_id == UNOWNED)

        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise OwnershipAssignmentFailed(workspace.id, owner_id)

        logger.info(f"Workspace {workspace.id} is now owned by user {owner_id}")
        return dataclasses.replace(workspace, owner_id=owner_id)

    async def list_members(self, workspace_id: int) -> list[User]:
        result = await self._session.execute(
            select(UserRow).where(UserRow.ws_id == workspace_id).order_by(UserRow.id)
        )
        return [to_user(row) for row in result.scalars().all()]
