"""Workspace API Router - the caller's workspace and its members."""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, status

from chatserver.application.dto import UserDTO, WorkspaceDTO
from chatserver.application.queries.workspaces import (
    GetWorkspaceHandler,
    GetWorkspaceQuery,
    ListWorkspaceUsersHandler,
    ListWorkspaceUsersQuery,
)
from chatserver.domain.entities.user import User
from chatserver.domain.exceptions import EntityNotFoundError
from chatserver.presentation.dependencies.auth import get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/api", tags=["workspaces"])


@router.get("/users", response_model=list[UserDTO], status_code=status.HTTP_200_OK)
@inject
async def list_users(
    handler: FromDishka[ListWorkspaceUsersHandler],
    current_user: User = Depends(get_current_user),
):
    users = await handler.execute(ListWorkspaceUsersQuery(ws_id=current_user.ws_id))
    return [UserDTO.from_entity(user) for user in users]


@router.get("/workspace", response_model=WorkspaceDTO, status_code=status.HTTP_200_OK)
@inject
async def get_workspace(
    handler: FromDishka[GetWorkspaceHandler],
    current_user: User = Depends(get_current_user),
):
    try:
        workspace = await handler.execute(
            GetWorkspaceQuery(workspace_id=current_user.ws_id)
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return WorkspaceDTO.from_entity(workspace)
