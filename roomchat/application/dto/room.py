"""Room DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from roomchat.domain.entities.room import Room
from roomchat.domain.entities.user import Member


class MemberDTO(BaseModel):
    """Public profile of a room member. Never carries sensitive user fields."""

    id: int
    display_name: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_entity(cls, member: Member) -> MemberDTO:
        return cls(
            id=member.user_id.value,
            display_name=member.display_name,
            avatar_url=member.avatar_url,
        )


class RoomDTO(BaseModel):
    id: int
    name: Optional[str] = None
    kind: str
    created_at: datetime
    updated_at: datetime
    members: list[MemberDTO]

    @classmethod
    def from_entity(cls, room: Room) -> RoomDTO:
        return cls(
            id=room.id.value,
            name=room.name,
            kind=room.kind.value,
            created_at=room.created_at,
            updated_at=room.updated_at,
            members=[MemberDTO.from_entity(m) for m in room.members],
        )


class RoomPageDTO(BaseModel):
    rooms: list[RoomDTO]
    # Pass as `after` to fetch the next page
    next_after: Optional[int] = None
