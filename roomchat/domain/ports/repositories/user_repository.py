"""
User Repository Port - Read access to users owned by the identity subsystem.
Implementation: roomchat/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from roomchat.domain.entities.user import User
from roomchat.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...
