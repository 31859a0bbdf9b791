"""
Get-or-create Direct Room Command.

Resolves the unique direct room between two users. The lookup goes through
the canonical pair key, so (A, B) and (B, A) land on the same room.

Concurrency:
    Two callers may both miss the lookup and both try to create. The store
    keeps pair keys unique, so exactly one create wins; the loser gets
    RoomAlreadyExistsError and re-reads the winner's room.
"""

import logging
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.domain.entities.room import Room, RoomDraft
from roomchat.domain.exceptions import RoomAlreadyExistsError, StorageError
from roomchat.domain.ports.repositories import RoomRepository
from roomchat.domain.value_objects.pair_key import PairKey
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetOrCreateDirectRoomCommand(Command[Room]):
    user_a: UserId
    user_b: UserId


class GetOrCreateDirectRoomHandler(CommandHandler[Room]):
    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, command: GetOrCreateDirectRoomCommand) -> Room:
        # Raises DomainValidationError on a self-pair
        pair_key = PairKey.of(command.user_a, command.user_b)

        room = await self._room_repository.get_by_pair_key(pair_key)
        if room:
            return room

        try:
            room = await self._room_repository.create(
                RoomDraft.direct(command.user_a, command.user_b)
            )
            logger.info(f"[direct_room] Created room {room.id} for pair {pair_key}")
            return room
        except RoomAlreadyExistsError:
            logger.info(
                f"[direct_room] Pair {pair_key} was created concurrently, re-reading"
            )

        room = await self._room_repository.get_by_pair_key(pair_key)
        if room is None:
            raise StorageError(
                f"Direct room for pair {pair_key} reported as existing but not found"
            )
        return room
