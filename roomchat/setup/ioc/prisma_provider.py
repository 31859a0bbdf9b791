"""Prisma storage provider: connected client plus repository implementations."""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from roomchat.domain.ports.repositories import (
    MessageRepository,
    RoomRepository,
    UserRepository,
)
from roomchat.infrastructure.persistence import (
    PrismaMessageRepository,
    PrismaRoomRepository,
    PrismaUserRepository,
)


class PrismaProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected once on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_room_repository(self, prisma: Prisma) -> RoomRepository:
        """
        - Return type is ABSTRACT (RoomRepository)
        - Implementation is CONCRETE (PrismaRoomRepository)
        """
        return PrismaRoomRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)
