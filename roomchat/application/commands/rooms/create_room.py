"""Create Room Command - explicit (group) room with its initial members."""

import logging
from dataclasses import dataclass
from typing import Optional

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.config.settings import Config
from roomchat.domain.entities.room import Room, RoomDraft
from roomchat.domain.exceptions import DomainValidationError
from roomchat.domain.ports.repositories import RoomRepository
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateRoomCommand(Command[Room]):
    member_ids: tuple[UserId, ...]
    name: Optional[str] = None


class CreateRoomHandler(CommandHandler[Room]):
    _room_repository: RoomRepository

    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, command: CreateRoomCommand) -> Room:
        name = (command.name or "").strip() or None
        if name and len(name) > Config.ROOM_NAME_MAX_LENGTH:
            raise DomainValidationError(
                f"Room name cannot exceed {Config.ROOM_NAME_MAX_LENGTH} characters"
            )

        draft = RoomDraft.group(name, command.member_ids)
        room = await self._room_repository.create(draft)
        logger.info(
            f"[create_room] Room {room.id} created with {len(room.members)} member(s)"
        )
        return room
