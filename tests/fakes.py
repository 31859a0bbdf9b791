"""
In-memory implementations of the repository ports, for tests only.

They mirror the storage contract of the Prisma repositories: unique pair
keys, memberships referencing existing users, canonical message order.
"""

import asyncio
import itertools
from datetime import datetime, timedelta, timezone
from typing import Optional

from dishka import Provider, Scope, provide

from roomchat.domain.entities.message import Message, MessageDraft
from roomchat.domain.entities.room import Room, RoomDraft
from roomchat.domain.entities.user import User
from roomchat.domain.exceptions import EntityNotFoundError, RoomAlreadyExistsError
from roomchat.domain.ports.repositories import (
    MessageRepository,
    RoomRepository,
    UserRepository,
)
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.pair_key import PairKey
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId


class InMemoryStore:
    def __init__(self):
        self.users: dict[int, User] = {}
        self.rooms: dict[int, Room] = {}
        self.memberships: set[tuple[int, int]] = set()  # (room_id, user_id)
        self.messages: dict[int, Message] = {}
        self._room_ids = itertools.count(1)
        self._message_ids = itertools.count(1)
        self._now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.freeze_clock = False

    def now(self) -> datetime:
        if not self.freeze_clock:
            self._now += timedelta(seconds=1)
        return self._now

    def add_user(self, user_id: int, first_name: str, last_name: str = "", **kwargs) -> User:
        user = User(id=UserId(user_id), first_name=first_name, last_name=last_name, **kwargs)
        self.users[user_id] = user
        return user

    def room_count(self) -> int:
        return len(self.rooms)


class InMemoryRoomRepository(RoomRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _with_members(self, room: Room) -> Room:
        member_ids = sorted(
            uid for rid, uid in self._store.memberships if rid == room.id.value
        )
        room.members = [self._store.users[uid].to_member() for uid in member_ids]
        return room

    async def get_by_id(self, room_id: RoomId) -> Optional[Room]:
        room = self._store.rooms.get(room_id.value)
        return self._with_members(room) if room else None

    async def exists(self, room_id: RoomId) -> bool:
        return room_id.value in self._store.rooms

    async def get_by_pair_key(self, pair_key: PairKey) -> Optional[Room]:
        found = next(
            (r for r in self._store.rooms.values() if r.pair_key == pair_key), None
        )
        # Let concurrent callers interleave between lookup and create
        await asyncio.sleep(0)
        return self._with_members(found) if found else None

    async def get_for_user(
        self, user_id: UserId, limit: int, after: Optional[RoomId] = None
    ) -> list[Room]:
        room_ids = sorted(
            rid for rid, uid in self._store.memberships if uid == user_id.value
        )
        if after is not None:
            room_ids = [rid for rid in room_ids if rid > after.value]
        return [self._with_members(self._store.rooms[rid]) for rid in room_ids[:limit]]

    async def is_member(self, room_id: RoomId, user_id: UserId) -> bool:
        return (room_id.value, user_id.value) in self._store.memberships

    async def create(self, draft: RoomDraft) -> Room:
        if draft.pair_key is not None and any(
            r.pair_key == draft.pair_key for r in self._store.rooms.values()
        ):
            raise RoomAlreadyExistsError(pair_key=draft.pair_key.value)
        if any(uid.value not in self._store.users for uid in draft.member_ids):
            raise EntityNotFoundError("One or more users do not exist")

        now = self._store.now()
        room = Room(
            id=RoomId(next(self._store._room_ids)),
            name=draft.name,
            kind=draft.kind,
            created_at=now,
            updated_at=now,
            pair_key=draft.pair_key,
        )
        self._store.rooms[room.id.value] = room
        for uid in draft.member_ids:
            self._store.memberships.add((room.id.value, uid.value))
        return self._with_members(room)


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        return self._store.messages.get(message_id.value)

    async def get_by_room(
        self,
        room_id: RoomId,
        limit: int,
        before: Optional[Message] = None,
        before_time: Optional[datetime] = None,
    ) -> list[Message]:
        messages = [m for m in self._store.messages.values() if m.room_id == room_id]
        if before is not None:
            messages = [m for m in messages if m.is_before(before)]
        if before_time is not None:
            messages = [m for m in messages if m.created_at < before_time]
        messages.sort(key=Message.sort_key)
        return messages[-limit:]

    async def add(self, draft: MessageDraft) -> Message:
        message = Message(
            id=MessageId(next(self._store._message_ids)),
            room_id=draft.room_id,
            sender_id=draft.sender_id,
            body=draft.body,
            created_at=self._store.now(),
            sender=self._store.users[draft.sender_id.value].to_member(),
            media_urls=draft.media_urls,
        )
        self._store.messages[message.id.value] = message
        return message


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.users.get(user_id.value)


class InMemoryStorageProvider(Provider):
    """Stands in for PrismaProvider in the DI container."""

    def __init__(self, store: InMemoryStore):
        super().__init__()
        self._store = store

    @provide(scope=Scope.REQUEST)
    def get_room_repository(self) -> RoomRepository:
        return InMemoryRoomRepository(self._store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository(self._store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository(self._store)
