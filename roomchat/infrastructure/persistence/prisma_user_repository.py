"""Prisma User Repository - read-only view of the identity subsystem's users."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from roomchat.domain.entities.user import User
from roomchat.domain.ports.repositories import UserRepository
from roomchat.domain.value_objects.user_id import UserId
from roomchat.infrastructure.persistence.mappers import user_to_entity
from roomchat.infrastructure.persistence.storage_guard import guarded, read_retry

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    @read_retry
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await guarded(
            self._prisma.user.find_unique(where={"id": user_id.value}),
            "user.get_by_id",
        )
        return user_to_entity(record) if record else None
