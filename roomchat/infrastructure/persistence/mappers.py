"""Prisma record → domain entity mapping shared by the repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomchat.domain.entities.message import Message
from roomchat.domain.entities.room import Room
from roomchat.domain.entities.user import Member, User
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.pair_key import PairKey
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.room_kind import RoomKind
from roomchat.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma.models import Message as PrismaMessage
    from prisma.models import Room as PrismaRoom
    from prisma.models import User as PrismaUser

# Members ordered by user id so room detail output is stable
ROOM_INCLUDE = {
    "members": {
        "include": {"user": True},
        "order_by": {"user_id": "asc"},
    }
}

MESSAGE_INCLUDE = {
    "sender": True,
    "media": {"order_by": {"id": "asc"}},
}


def user_to_entity(record: PrismaUser) -> User:
    return User(
        id=UserId(record.id),
        first_name=record.first_name,
        last_name=record.last_name,
        role=getattr(record.role, "value", record.role),
        is_banned=record.is_banned,
        profile_image=record.profile_image,
    )


def user_to_member(record: PrismaUser) -> Member:
    # Only public fields leave the persistence layer
    return Member(
        user_id=UserId(record.id),
        display_name=f"{record.first_name} {record.last_name}".strip(),
        avatar_url=record.profile_image,
    )


def room_to_entity(record: PrismaRoom) -> Room:
    members = [
        user_to_member(membership.user)
        for membership in (record.members or [])
        if membership.user is not None
    ]
    return Room(
        id=RoomId(record.id),
        name=record.name,
        kind=RoomKind(getattr(record.kind, "value", record.kind)),
        created_at=record.created_at,
        updated_at=record.updated_at,
        members=members,
        pair_key=PairKey(record.pair_key) if record.pair_key else None,
    )


def message_to_entity(record: PrismaMessage) -> Message:
    return Message(
        id=MessageId(record.id),
        room_id=RoomId(record.room_id),
        sender_id=UserId(record.sender_id),
        body=record.body,
        created_at=record.created_at,
        sender=user_to_member(record.sender) if record.sender else None,
        media_urls=tuple(media.url for media in (record.media or [])),
    )
