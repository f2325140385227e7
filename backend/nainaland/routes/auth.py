"""
Nainaland Backend — Auth Route Handlers
=========================================

What:  Admin login and "who am I" for the back office.
Who:   The admin login page stores the returned token and sends it as
       `Authorization: Bearer <token>` on every admin request.
"""

import logging

from fastapi import APIRouter, Depends

from nainaland.dependencies import get_storage, require_admin
from nainaland.schemas.common import ErrorResponse
from nainaland.schemas.user import LoginRequest, LoginResponse, User, UserPublic
from nainaland.services.auth_service import auth_service
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Username or password missing", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
        429: {"description": "Too many login attempts", "model": ErrorResponse},
    },
    summary="Exchange admin credentials for a bearer token",
)
async def login(
    data: LoginRequest,
    storage: MemStorage = Depends(get_storage),
) -> LoginResponse:
    return auth_service.login(storage, data.username, data.password)


@router.get(
    "/me",
    response_model=UserPublic,
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
    summary="Return the user the presented token belongs to",
)
async def me(admin: User = Depends(require_admin)) -> UserPublic:
    """Lets the admin UI check a remembered token before showing the dashboard."""
    return UserPublic(id=admin.id, username=admin.username)
