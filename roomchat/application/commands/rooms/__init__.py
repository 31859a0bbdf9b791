"""Room commands."""

from .create_room import CreateRoomCommand, CreateRoomHandler
from .get_or_create_direct_room import (
    GetOrCreateDirectRoomCommand,
    GetOrCreateDirectRoomHandler,
)

__all__ = [
    "CreateRoomCommand",
    "CreateRoomHandler",
    "GetOrCreateDirectRoomCommand",
    "GetOrCreateDirectRoomHandler",
]
