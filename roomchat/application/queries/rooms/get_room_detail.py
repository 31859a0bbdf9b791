"""Get Room Detail Query - a room with its full member list."""

from dataclasses import dataclass
from typing import Optional

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.domain.entities.room import Room
from roomchat.domain.exceptions import AccessDeniedError, EntityNotFoundError
from roomchat.domain.ports.repositories import RoomRepository
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetRoomDetailQuery(Query[Room]):
    room_id: RoomId
    # When set, only members of the room may read it
    viewer_id: Optional[UserId] = None


class GetRoomDetailHandler(QueryHandler[Room]):
    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, query: GetRoomDetailQuery) -> Room:
        room = await self._room_repository.get_by_id(query.room_id)
        if not room:
            raise EntityNotFoundError(f"Room {query.room_id} not found")

        if query.viewer_id is not None and not room.has_member(query.viewer_id):
            raise AccessDeniedError("You are not a member of this room")

        return room
