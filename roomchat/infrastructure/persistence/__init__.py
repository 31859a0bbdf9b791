"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports. They only need
the generated Prisma client for type checking; the client instance is
injected by the DI container.
"""

from roomchat.infrastructure.persistence.prisma_room_repository import (
    PrismaRoomRepository,
)
from roomchat.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from roomchat.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)

__all__ = [
    "PrismaRoomRepository",
    "PrismaMessageRepository",
    "PrismaUserRepository",
]
