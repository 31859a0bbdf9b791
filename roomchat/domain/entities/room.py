"""
Room Entity - A persisted grouping of users who can exchange messages.

Rooms are either explicit named groups or direct rooms between exactly two
users. Direct rooms carry a canonical pair key which the store keeps unique.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from roomchat.domain.entities.user import Member
from roomchat.domain.exceptions.validation_error import DomainValidationError
from roomchat.domain.value_objects.pair_key import PairKey
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.room_kind import RoomKind
from roomchat.domain.value_objects.user_id import UserId


@dataclass
class Room:
    id: RoomId
    name: Optional[str]
    kind: RoomKind
    created_at: datetime
    updated_at: datetime
    members: list[Member] = field(default_factory=list)
    pair_key: Optional[PairKey] = None

    @property
    def member_ids(self) -> list[UserId]:
        return [member.user_id for member in self.members]

    def has_member(self, user_id: UserId) -> bool:
        return any(member.user_id == user_id for member in self.members)

    @property
    def is_direct(self) -> bool:
        return self.kind is RoomKind.DIRECT


@dataclass(frozen=True)
class RoomDraft:
    """Validated input for a room that has not been stored yet."""

    kind: RoomKind
    member_ids: tuple[UserId, ...]
    name: Optional[str] = None
    pair_key: Optional[PairKey] = None

    @classmethod
    def group(cls, name: Optional[str], member_ids: Iterable[UserId]) -> RoomDraft:
        # Set semantics, kept in ascending id order so storage is deterministic
        unique_ids = tuple(sorted(set(member_ids), key=lambda uid: uid.value))
        if not unique_ids:
            raise DomainValidationError("A room needs at least one member")
        return cls(kind=RoomKind.GROUP, member_ids=unique_ids, name=name)

    @classmethod
    def direct(cls, user_a: UserId, user_b: UserId) -> RoomDraft:
        pair_key = PairKey.of(user_a, user_b)
        return cls(
            kind=RoomKind.DIRECT,
            member_ids=pair_key.user_ids(),
            name=None,
            pair_key=pair_key,
        )
