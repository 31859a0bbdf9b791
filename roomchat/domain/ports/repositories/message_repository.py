"""
Message Repository Port - Interface for append-only message storage.
Implementation: roomchat/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from roomchat.domain.entities.message import Message, MessageDraft
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.room_id import RoomId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def get_by_room(
        self,
        room_id: RoomId,
        limit: int,
        before: Optional[Message] = None,
        before_time: Optional[datetime] = None,
    ) -> list[Message]:
        """
        The newest `limit` messages of a room that sort strictly before the
        `before` message and were created strictly before `before_time`,
        returned oldest first.
        """
        ...

    @abstractmethod
    async def add(self, draft: MessageDraft) -> Message: ...
