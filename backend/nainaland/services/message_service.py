"""
Nainaland Backend — Message Service
=====================================

What:  Contact form intake and the admin inbox.
Who:   Called by the /api/messages route handlers.

Privacy:
    Log lines carry message ids only. Sender name, email and phone stay out
    of the logs.
"""

import logging
from typing import List

from nainaland.exceptions import NotFoundError
from nainaland.schemas.message import Message, MessageCreate
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)


class MessageService:
    def list_messages(self, storage: MemStorage) -> List[Message]:
        return storage.get_all_messages()

    def get_message(self, storage: MemStorage, message_id: int) -> Message:
        message = storage.get_message(message_id)
        if message is None:
            raise NotFoundError(resource="message", resource_id=message_id)
        return message

    def submit_message(self, storage: MemStorage, data: MessageCreate) -> Message:
        """Store a contact form submission. It always starts unread."""
        message = storage.create_message(data)
        logger.info("Received message %d (interest: %s)", message.id, message.interest)
        return message

    def set_read_status(self, storage: MemStorage, message_id: int, is_read: bool) -> Message:
        message = storage.set_message_read_status(message_id, is_read)
        if message is None:
            raise NotFoundError(resource="message", resource_id=message_id)
        logger.info("Message %d marked %s", message_id, "read" if is_read else "unread")
        return message

    def delete_message(self, storage: MemStorage, message_id: int) -> None:
        if not storage.delete_message(message_id):
            raise NotFoundError(resource="message", resource_id=message_id)
        logger.info("Deleted message %d", message_id)


message_service = MessageService()
