"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier (assigned by the store)
- Pure Python dataclasses (no ORM, no Pydantic)

Drafts (RoomDraft, MessageDraft) carry validated input for rows that do
not have an identifier yet.
"""

from roomchat.domain.entities.user import Member, User
from roomchat.domain.entities.room import Room, RoomDraft
from roomchat.domain.entities.message import Message, MessageDraft

__all__ = [
    "Member",
    "User",
    "Room",
    "RoomDraft",
    "Message",
    "MessageDraft",
]
