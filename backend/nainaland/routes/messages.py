"""
Nainaland Backend — Message Route Handlers
============================================

What:  Contact form intake (public) and the admin inbox.

Access:
    POST /api/messages is the only open route here; visitors must be able to
    reach us without an account. Reading, flagging and deleting messages
    require an admin token because messages carry personal contact details.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from nainaland.dependencies import get_storage, require_admin
from nainaland.schemas.common import DeleteResponse, ErrorResponse
from nainaland.schemas.message import Message, MessageCreate, MessageReadStatus
from nainaland.schemas.user import User
from nainaland.services.message_service import message_service
from nainaland.storage import MemStorage

router = APIRouter(prefix="/api/messages", tags=["Messages"])

_NOT_FOUND = {404: {"description": "Message not found", "model": ErrorResponse}}
_UNAUTHORIZED = {401: {"description": "Missing or invalid token", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[Message],
    responses=_UNAUTHORIZED,
    summary="List received messages (admin)",
)
async def list_messages(
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> List[Message]:
    return message_service.list_messages(storage)


@router.get(
    "/{message_id}",
    response_model=Message,
    responses={**_UNAUTHORIZED, **_NOT_FOUND},
    summary="Get one message (admin)",
)
async def get_message(
    message_id: int,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> Message:
    return message_service.get_message(storage, message_id)


@router.post(
    "",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid message data", "model": ErrorResponse},
        429: {"description": "Too many submissions", "model": ErrorResponse},
    },
    summary="Submit the contact form",
)
async def submit_message(
    data: MessageCreate,
    storage: MemStorage = Depends(get_storage),
) -> Message:
    return message_service.submit_message(storage, data)


@router.put(
    "/{message_id}/read",
    response_model=Message,
    responses={
        400: {"description": "isRead must be a boolean", "model": ErrorResponse},
        **_UNAUTHORIZED,
        **_NOT_FOUND,
    },
    summary="Mark a message read or unread (admin)",
)
async def set_read_status(
    message_id: int,
    body: MessageReadStatus,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> Message:
    return message_service.set_read_status(storage, message_id, body.is_read)


@router.delete(
    "/{message_id}",
    response_model=DeleteResponse,
    responses={**_UNAUTHORIZED, **_NOT_FOUND},
    summary="Delete a message (admin)",
)
async def delete_message(
    message_id: int,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> DeleteResponse:
    message_service.delete_message(storage, message_id)
    return DeleteResponse(success=True)
