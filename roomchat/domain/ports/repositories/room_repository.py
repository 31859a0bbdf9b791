"""
Room Repository Port - Interface for rooms and their memberships.
Implementation: roomchat/infrastructure/persistence/prisma_room_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from roomchat.domain.entities.room import Room, RoomDraft
from roomchat.domain.value_objects.pair_key import PairKey
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId


class RoomRepository(ABC):
    @abstractmethod
    async def get_by_id(self, room_id: RoomId) -> Optional[Room]: ...

    @abstractmethod
    async def exists(self, room_id: RoomId) -> bool: ...

    @abstractmethod
    async def get_by_pair_key(self, pair_key: PairKey) -> Optional[Room]: ...

    @abstractmethod
    async def get_for_user(
        self, user_id: UserId, limit: int, after: Optional[RoomId] = None
    ) -> list[Room]:
        """Rooms the user belongs to, ordered by room id ascending."""
        ...

    @abstractmethod
    async def is_member(self, room_id: RoomId, user_id: UserId) -> bool: ...

    @abstractmethod
    async def create(self, draft: RoomDraft) -> Room:
        """
        Store a room and all its memberships as one atomic unit.

        Raises:
            RoomAlreadyExistsError: a room with the draft's pair key exists
            EntityNotFoundError: a member id does not reference a user
        """
        ...
