"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value)
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from roomchat.domain.value_objects.user_id import UserId
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.room_kind import RoomKind
from roomchat.domain.value_objects.pair_key import PairKey

__all__ = [
    "UserId",
    "RoomId",
    "MessageId",
    "RoomKind",
    "PairKey",
]
