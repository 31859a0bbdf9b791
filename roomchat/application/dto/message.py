"""Message DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from roomchat.application.dto.room import MemberDTO
from roomchat.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: int
    room_id: int
    sender_id: int
    body: str
    created_at: datetime
    sender: Optional[MemberDTO] = None
    media_urls: list[str] = []

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            room_id=message.room_id.value,
            sender_id=message.sender_id.value,
            body=message.body,
            created_at=message.created_at,
            sender=MemberDTO.from_entity(message.sender) if message.sender else None,
            media_urls=list(message.media_urls),
        )


class MessagePageDTO(BaseModel):
    """Messages oldest first; `next_before` pages further back."""

    messages: list[MessageDTO]
    next_before: Optional[int] = None
