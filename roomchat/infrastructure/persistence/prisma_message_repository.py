"""
Prisma Message Repository Implementation.

Prisma models (schema.prisma):
    Message      { id, room_id, sender_id, body, created_at, sender, media }
    MessageMedia { id, message_id, url }

Reads return the newest `limit` rows under the cursor, fetched in
descending canonical order and reversed so callers get oldest first.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from prisma import errors as prisma_errors

from roomchat.domain.entities.message import Message, MessageDraft
from roomchat.domain.exceptions import EntityNotFoundError
from roomchat.domain.ports.repositories.message_repository import MessageRepository
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.infrastructure.persistence.mappers import (
    MESSAGE_INCLUDE,
    message_to_entity,
)
from roomchat.infrastructure.persistence.storage_guard import guarded, read_retry

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Messages are append-only: there is no update or delete here.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    @read_retry
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        record = await guarded(
            self._prisma.message.find_unique(
                where={"id": message_id.value}, include=MESSAGE_INCLUDE
            ),
            "message.get_by_id",
        )
        return message_to_entity(record) if record else None

    @read_retry
    async def get_by_room(
        self,
        room_id: RoomId,
        limit: int,
        before: Optional[Message] = None,
        before_time: Optional[datetime] = None,
    ) -> list[Message]:
        """
        Get one page of a room's messages, oldest first.

        Args:
            room_id: Room to read
            limit: Maximum number of messages to return
            before: Cursor message; only messages sorting strictly before it
            before_time: Only messages created strictly before this instant
        """
        conditions: list[dict[str, Any]] = [{"room_id": room_id.value}]
        if before is not None:
            conditions.append(
                {
                    "OR": [
                        {"created_at": {"lt": before.created_at}},
                        {
                            "created_at": before.created_at,
                            "id": {"lt": before.id.value},
                        },
                    ]
                }
            )
        if before_time is not None:
            conditions.append({"created_at": {"lt": before_time}})

        records = await guarded(
            self._prisma.message.find_many(
                where={"AND": conditions},
                include=MESSAGE_INCLUDE,
                order=[{"created_at": "desc"}, {"id": "desc"}],
                take=limit,
            ),
            "message.get_by_room",
        )
        records.reverse()  # Now oldest first
        return [message_to_entity(record) for record in records]

    async def add(self, draft: MessageDraft) -> Message:
        data: dict[str, Any] = {
            "room_id": draft.room_id.value,
            "sender_id": draft.sender_id.value,
            "body": draft.body,
        }
        if draft.media_urls:
            data["media"] = {"create": [{"url": url} for url in draft.media_urls]}

        try:
            record = await guarded(
                self._prisma.message.create(data=data, include=MESSAGE_INCLUDE),
                "message.add",
            )
        except prisma_errors.ForeignKeyViolationError as e:
            # Room or sender vanished between the membership check and the insert
            raise EntityNotFoundError(
                f"Room {draft.room_id} or user {draft.sender_id} no longer exists"
            ) from e

        return message_to_entity(record)
