"""Room Exists Query - pre-validation for request handlers."""

from dataclasses import dataclass

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.domain.ports.repositories import RoomRepository
from roomchat.domain.value_objects.room_id import RoomId


@dataclass(frozen=True)
class RoomExistsQuery(Query[bool]):
    room_id: RoomId


class RoomExistsHandler(QueryHandler[bool]):
    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, query: RoomExistsQuery) -> bool:
        return await self._room_repository.exists(query.room_id)
