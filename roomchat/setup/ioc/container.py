"""
Dishka DI Container Setup.

- AppProvider registers the command/query handlers (REQUEST scope). They
  depend only on repository ports.
- PrismaProvider (prisma_provider.py) maps the ports to Prisma repositories
  and owns the connected client (APP scope).

Flow:
  Container → provides → PrismaRoomRepository → to → CreateRoomHandler
                                  ↓
                          uses RoomRepository interface

Any provider that supplies RoomRepository, MessageRepository and
UserRepository can stand in for PrismaProvider.
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from roomchat.application.commands.messages import SendMessageHandler
from roomchat.application.commands.rooms import (
    CreateRoomHandler,
    GetOrCreateDirectRoomHandler,
)
from roomchat.application.queries.messages import GetMessagesHandler
from roomchat.application.queries.rooms import (
    GetRoomDetailHandler,
    ListRoomsHandler,
    RoomExistsHandler,
)
from roomchat.domain.ports.repositories import MessageRepository, RoomRepository


class AppProvider(Provider):
    """Application handlers, auto-wired from repository ports."""

    # ==================== ROOM HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_room_handler(
        self, room_repository: RoomRepository
    ) -> CreateRoomHandler:
        return CreateRoomHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_direct_room_handler(
        self, room_repository: RoomRepository
    ) -> GetOrCreateDirectRoomHandler:
        return GetOrCreateDirectRoomHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_rooms_handler(
        self, room_repository: RoomRepository
    ) -> ListRoomsHandler:
        return ListRoomsHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_room_detail_handler(
        self, room_repository: RoomRepository
    ) -> GetRoomDetailHandler:
        return GetRoomDetailHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_room_exists_handler(
        self, room_repository: RoomRepository
    ) -> RoomExistsHandler:
        return RoomExistsHandler(room_repository)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        room_repository: RoomRepository,
        message_repository: MessageRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            room_repository=room_repository,
            message_repository=message_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_messages_handler(
        self,
        room_repository: RoomRepository,
        message_repository: MessageRepository,
    ) -> GetMessagesHandler:
        return GetMessagesHandler(
            room_repository=room_repository,
            message_repository=message_repository,
        )


def create_container(*storage_providers: Provider) -> AsyncContainer:
    """
    Create the DI container.

    Without arguments the Prisma-backed storage is used. The Prisma module is
    imported here rather than at the top because it requires a generated
    client (`prisma generate`).
    """
    if not storage_providers:
        from roomchat.setup.ioc.prisma_provider import PrismaProvider

        storage_providers = (PrismaProvider(),)
    return make_async_container(AppProvider(), *storage_providers)
