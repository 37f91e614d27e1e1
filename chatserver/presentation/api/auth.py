"""
Auth API Router - signup and signin.

Both endpoints answer with {"token": "..."}; the token is what every other
/api route expects as "Authorization: Bearer <token>".
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from chatserver.application.commands.auth import (
    SigninCommand,
    SigninHandler,
    SignupCommand,
    SignupHandler,
)
from chatserver.domain.exceptions import ConflictError
from chatserver.domain.value_objects.user_email import UserEmail

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SignupRequest(BaseModel):
    workspace: str
    fullname: str
    email: str
    password: str


class SigninRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    token: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/api", tags=["auth"])


# ==================== ENDPOINTS ====================


@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def signup(request: SignupRequest, handler: FromDishka[SignupHandler]):
    """Create a user, joining or creating the named workspace."""
    workspace = request.workspace.strip()
    fullname = request.fullname.strip()
    if not workspace or not fullname or not request.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="workspace, fullname and password are required",
        )
    try:
        email = UserEmail(request.email)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    try:
        result = await handler.execute(
            SignupCommand(
                workspace=workspace,
                fullname=fullname,
                email=email,
                password=request.password,
            )
        )
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    return TokenResponse(token=result.token)


@router.post("/signin", response_model=TokenResponse, status_code=status.HTTP_200_OK)
@inject
async def signin(request: SigninRequest, handler: FromDishka[SigninHandler]):
    """Exchange email and password for a token."""
    token = await handler.execute(
        SigninCommand(email=request.email, password=request.password)
    )
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="invalid email or password",
        )
    return TokenResponse(token=token)
