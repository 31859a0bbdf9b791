"""
GetMessages Query - one page of a room's history.

Pages hold the newest `limit` messages under the cursor, oldest first.
Paging backwards means passing the oldest id of the previous page as
`before`; an empty page marks the start of the room.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.application.common.paging import resolve_limit
from roomchat.config.settings import Config
from roomchat.domain.entities.message import Message
from roomchat.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from roomchat.domain.ports.repositories import MessageRepository, RoomRepository
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetMessagesQuery(Query[list[Message]]):
    room_id: RoomId
    limit: Optional[int] = None
    before: Optional[MessageId] = None
    before_time: Optional[datetime] = None
    viewer_id: Optional[UserId] = None


class GetMessagesHandler(QueryHandler[list[Message]]):
    def __init__(
        self,
        room_repository: RoomRepository,
        message_repository: MessageRepository,
    ):
        self._room_repository = room_repository
        self._message_repository = message_repository

    async def execute(self, query: GetMessagesQuery) -> list[Message]:
        """
        Raises:
            DomainValidationError: bad limit, or cursor from another room
            EntityNotFoundError: room does not exist
            AccessDeniedError: viewer given and not a member
        """
        limit = resolve_limit(
            query.limit, Config.MESSAGE_PAGE_DEFAULT, Config.MESSAGE_PAGE_MAX
        )

        if not await self._room_repository.exists(query.room_id):
            raise EntityNotFoundError(f"Room {query.room_id} not found")

        if query.viewer_id is not None and not await self._room_repository.is_member(
            query.room_id, query.viewer_id
        ):
            raise AccessDeniedError("You are not a member of this room")

        cursor = None
        if query.before is not None:
            cursor = await self._message_repository.get_by_id(query.before)
            if cursor is None or cursor.room_id != query.room_id:
                raise DomainValidationError(
                    f"Cursor message {query.before} does not belong to room {query.room_id}"
                )

        return await self._message_repository.get_by_room(
            query.room_id, limit, before=cursor, before_time=query.before_time
        )
