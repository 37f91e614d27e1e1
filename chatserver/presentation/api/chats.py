"""
Chats API Router - FastAPI endpoints for chat management.

Flow:
  HTTP Request → Router → Command → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← Chat ←

Every endpoint requires a valid token. Reads are not scoped to the caller's
workspace; updates require the same workspace and deletes require the
caller to own the chat's workspace.
"""

from logging import getLogger
from typing import Annotated, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, Path, status
from pydantic import BaseModel, Field

from chatserver.application.commands.chats import (
    CreateChatCommand,
    CreateChatHandler,
    DeleteChatCommand,
    DeleteChatHandler,
    UpdateChatCommand,
    UpdateChatHandler,
)
from chatserver.application.dto import ChatDTO
from chatserver.application.queries.chats import (
    GetChatHandler,
    GetChatQuery,
    ListChatsHandler,
    ListChatsQuery,
)
from chatserver.domain.entities.chat import ChatSpec
from chatserver.domain.entities.user import User
from chatserver.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatserver.presentation.dependencies.auth import get_current_user

logger = getLogger(__name__)

# ids are stored as signed 64-bit integers; larger values are rejected as bad input
MAX_ID = 2**63 - 1

ChatId = Annotated[int, Path(ge=0, le=MAX_ID)]
MemberId = Annotated[int, Field(ge=1, le=MAX_ID)]


# ==================== REQUEST/RESPONSE MODELS ====================


class ChatRequest(BaseModel):
    """Body of both create and update."""

    name: Optional[str] = None
    members: list[MemberId]
    public: bool = False

    def to_spec(self) -> ChatSpec:
        return ChatSpec.of(self.members, name=self.name, public=self.public)


class DeleteChatResponse(BaseModel):
    success: bool


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/chats", tags=["chats"])


# ==================== ENDPOINTS ====================


@router.get("", response_model=list[ChatDTO], status_code=status.HTTP_200_OK)
@inject
async def list_chats(
    handler: FromDishka[ListChatsHandler],
    current_user: User = Depends(get_current_user),
):
    """List chats of the caller's workspace."""
    chats = await handler.execute(ListChatsQuery(ws_id=current_user.ws_id))
    return [ChatDTO.from_entity(chat) for chat in chats]


@router.post("", response_model=ChatDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_chat(
    request: ChatRequest,
    handler: FromDishka[CreateChatHandler],
    current_user: User = Depends(get_current_user),
):
    try:
        chat = await handler.execute(
            CreateChatCommand(actor=current_user, spec=request.to_spec())
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    logger.info(f"Chat {chat.id} ({chat.type.value}) created by user {current_user.id}")
    return ChatDTO.from_entity(chat)


@router.get("/{chat_id}", response_model=ChatDTO, status_code=status.HTTP_200_OK)
@inject
async def get_chat(
    chat_id: ChatId,
    handler: FromDishka[GetChatHandler],
    current_user: User = Depends(get_current_user),
):
    try:
        chat = await handler.execute(GetChatQuery(chat_id=chat_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ChatDTO.from_entity(chat)


@router.patch("/{chat_id}", response_model=ChatDTO, status_code=status.HTTP_200_OK)
@inject
async def update_chat(
    chat_id: ChatId,
    request: ChatRequest,
    handler: FromDishka[UpdateChatHandler],
    current_user: User = Depends(get_current_user),
):
    """Replace name, members and public flag; the type is recomputed."""
    try:
        chat = await handler.execute(
            UpdateChatCommand(
                chat_id=chat_id, actor=current_user, spec=request.to_spec()
            )
        )
        return ChatDTO.from_entity(chat)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete(
    "/{chat_id}",
    response_model=DeleteChatResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_chat(
    chat_id: ChatId,
    handler: FromDishka[DeleteChatHandler],
    current_user: User = Depends(get_current_user),
):
    """Delete a chat; only the owner of its workspace may do this."""
    try:
        success = await handler.execute(
            DeleteChatCommand(chat_id=chat_id, actor=current_user)
        )
        return DeleteChatResponse(success=success)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
