"""List Rooms Query - rooms the user is a member of, paged by room id."""

from dataclasses import dataclass
from typing import Optional

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.application.common.paging import resolve_limit
from roomchat.config.settings import Config
from roomchat.domain.entities.room import Room
from roomchat.domain.ports.repositories.room_repository import RoomRepository
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListRoomsQuery(Query[list[Room]]):
    user_id: UserId
    limit: Optional[int] = None
    after: Optional[RoomId] = None


class ListRoomsHandler(QueryHandler[list[Room]]):
    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, query: ListRoomsQuery) -> list[Room]:
        limit = resolve_limit(query.limit, Config.ROOM_PAGE_DEFAULT, Config.ROOM_PAGE_MAX)
        return await self._room_repository.get_for_user(
            query.user_id, limit, after=query.after
        )
