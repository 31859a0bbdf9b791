"""
Prisma Room Repository Implementation.

Prisma models (schema.prisma):
    Room       { id, name?, kind, pair_key? @unique, created_at, updated_at, members }
    RoomMember { room_id, user_id, joined_at, @@id([room_id, user_id]) }

- Room and memberships are written with one nested create, which Prisma
  runs in a single transaction: a room never exists without its members.
- A unique violation on create can only come from pair_key and is reported
  as RoomAlreadyExistsError for the direct room resolver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from prisma import errors as prisma_errors

from roomchat.domain.entities.room import Room, RoomDraft
from roomchat.domain.exceptions import (
    EntityNotFoundError,
    RoomAlreadyExistsError,
    StorageError,
)
from roomchat.domain.ports.repositories import RoomRepository
from roomchat.domain.value_objects.pair_key import PairKey
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId
from roomchat.infrastructure.persistence.mappers import ROOM_INCLUDE, room_to_entity
from roomchat.infrastructure.persistence.storage_guard import guarded, read_retry

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaRoomRepository(RoomRepository):
    """
    Prisma implementation of RoomRepository.

    Handles persistence of Room entities and memberships to PostgreSQL.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    @read_retry
    async def get_by_id(self, room_id: RoomId) -> Optional[Room]:
        record = await guarded(
            self._prisma.room.find_unique(
                where={"id": room_id.value}, include=ROOM_INCLUDE
            ),
            "room.get_by_id",
        )
        return room_to_entity(record) if record else None

    @read_retry
    async def exists(self, room_id: RoomId) -> bool:
        count = await guarded(
            self._prisma.room.count(where={"id": room_id.value}),
            "room.exists",
        )
        return count > 0

    @read_retry
    async def get_by_pair_key(self, pair_key: PairKey) -> Optional[Room]:
        record = await guarded(
            self._prisma.room.find_unique(
                where={"pair_key": pair_key.value}, include=ROOM_INCLUDE
            ),
            "room.get_by_pair_key",
        )
        return room_to_entity(record) if record else None

    @read_retry
    async def get_for_user(
        self, user_id: UserId, limit: int, after: Optional[RoomId] = None
    ) -> list[Room]:
        where: dict = {"members": {"some": {"user_id": user_id.value}}}
        if after is not None:
            where["id"] = {"gt": after.value}

        records = await guarded(
            self._prisma.room.find_many(
                where=where,
                include=ROOM_INCLUDE,
                order={"id": "asc"},
                take=limit,
            ),
            "room.get_for_user",
        )
        return [room_to_entity(record) for record in records]

    @read_retry
    async def is_member(self, room_id: RoomId, user_id: UserId) -> bool:
        record = await guarded(
            self._prisma.roommember.find_unique(
                where={
                    "room_id_user_id": {
                        "room_id": room_id.value,
                        "user_id": user_id.value,
                    }
                }
            ),
            "room.is_member",
        )
        return record is not None

    async def create(self, draft: RoomDraft) -> Room:
        data = {
            "name": draft.name,
            "kind": draft.kind.value,
            "pair_key": draft.pair_key.value if draft.pair_key else None,
            "members": {
                "create": [{"user_id": uid.value} for uid in draft.member_ids]
            },
        }
        try:
            record = await guarded(
                self._prisma.room.create(data=data, include=ROOM_INCLUDE),
                "room.create",
            )
        except prisma_errors.UniqueViolationError as e:
            if draft.pair_key is None:
                raise StorageError("room.create hit an unexpected unique constraint") from e
            raise RoomAlreadyExistsError(
                f"Direct room for pair {draft.pair_key} already exists",
                pair_key=draft.pair_key.value,
            ) from e
        except (
            prisma_errors.ForeignKeyViolationError,
            prisma_errors.RecordNotFoundError,
        ) as e:
            ids = ", ".join(str(uid) for uid in draft.member_ids)
            raise EntityNotFoundError(f"One or more users do not exist: {ids}") from e

        return room_to_entity(record)
