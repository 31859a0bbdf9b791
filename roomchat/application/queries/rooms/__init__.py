"""Room-related queries."""

from roomchat.application.queries.rooms.list_rooms import (
    ListRoomsQuery,
    ListRoomsHandler,
)
from roomchat.application.queries.rooms.get_room_detail import (
    GetRoomDetailQuery,
    GetRoomDetailHandler,
)
from roomchat.application.queries.rooms.room_exists import (
    RoomExistsQuery,
    RoomExistsHandler,
)

__all__ = [
    "ListRoomsQuery",
    "ListRoomsHandler",
    "GetRoomDetailQuery",
    "GetRoomDetailHandler",
    "RoomExistsQuery",
    "RoomExistsHandler",
]
