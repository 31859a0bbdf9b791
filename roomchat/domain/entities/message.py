"""
Message Entity - An immutable, timestamped, room-scoped text record.

Canonical order is created_at ascending, ties broken by id ascending.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from roomchat.domain.entities.user import Member
from roomchat.domain.exceptions.validation_error import DomainValidationError
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Message:
    id: MessageId
    room_id: RoomId
    sender_id: UserId
    body: str
    created_at: datetime
    sender: Optional[Member] = None
    media_urls: tuple[str, ...] = field(default_factory=tuple)

    def sort_key(self) -> tuple[datetime, int]:
        return (self.created_at, self.id.value)

    def is_before(self, other: Message) -> bool:
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class MessageDraft:
    room_id: RoomId
    sender_id: UserId
    body: str
    media_urls: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        room_id: RoomId,
        sender_id: UserId,
        body: str,
        media_urls: Iterable[str] = (),
    ) -> MessageDraft:
        if not body or not body.strip():
            raise DomainValidationError("Message body cannot be empty")
        return cls(
            room_id=room_id,
            sender_id=sender_id,
            body=body,
            media_urls=tuple(media_urls),
        )
