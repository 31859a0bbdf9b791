"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateRoomCommand(Command[Room]):
        member_ids: tuple[UserId, ...]
        name: Optional[str] = None

    class CreateRoomHandler(CommandHandler[Room]):
        def __init__(self, room_repository: RoomRepository):
            self._room_repository = room_repository

        async def execute(self, command: CreateRoomCommand) -> Room:
            draft = RoomDraft.group(command.name, command.member_ids)
            return await self._room_repository.create(draft)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
