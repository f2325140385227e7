"""
Nainaland Backend — Contact Message Schemas
=============================================

What:  Inquiries submitted through the public contact form.

Lifecycle:
    Created by anyone (POST /api/messages) with is_read = False, then only the
    read flag changes, via PUT /api/messages/{id}/read from the admin inbox.
    There is no MessageUpdate struct.
"""

from datetime import datetime

from pydantic import EmailStr, Field, StrictBool

from nainaland.schemas.common import InsertModel, RecordModel


class MessageCreate(InsertModel):
    """
    Contact form payload.

    Any `isRead` key the client sends is ignored; new messages always start unread.
    """

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=10, max_length=20)
    interest: str = Field(min_length=1, max_length=100, description="What the sender is looking for")
    message: str = Field(min_length=1, max_length=5000)


class MessageReadStatus(InsertModel):
    """Body of PUT /api/messages/{id}/read. Must be a real JSON boolean."""

    is_read: StrictBool = Field(alias="isRead")


class Message(RecordModel):
    id: int
    name: str
    email: str
    phone: str
    interest: str
    message: str
    is_read: bool = Field(default=False, alias="isRead")
    created_at: datetime = Field(alias="createdAt")
