"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the chat layer needs
- Does NOT specify implementation (Prisma, in-memory, etc.)
"""

from roomchat.domain.ports.repositories.room_repository import RoomRepository
from roomchat.domain.ports.repositories.message_repository import MessageRepository
from roomchat.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "RoomRepository",
    "MessageRepository",
    "UserRepository",
]
