"""
SendMessage Command - Append a message to a room.

Handler:
1. Validate body and media references
2. Verify the room exists
3. Verify the sender is a member of the room
4. Insert the message (never retried)

No fan-out happens here; delivery to other members belongs to whatever
consumes the message store (push or polling).
"""

import logging
from dataclasses import dataclass
from urllib.parse import urlparse

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.config.settings import Config
from roomchat.domain.entities.message import Message, MessageDraft
from roomchat.domain.exceptions import DomainValidationError, EntityNotFoundError
from roomchat.domain.ports.repositories import MessageRepository, RoomRepository
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    room_id: RoomId
    sender_id: UserId
    body: str
    media_urls: tuple[str, ...] = ()


def _validate_media_urls(media_urls: tuple[str, ...]) -> None:
    if len(media_urls) > Config.MESSAGE_MAX_MEDIA:
        raise DomainValidationError(
            f"A message can reference at most {Config.MESSAGE_MAX_MEDIA} media files"
        )
    for url in media_urls:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise DomainValidationError(f"Invalid media URL: {url}")


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        room_repository: RoomRepository,
        message_repository: MessageRepository,
    ):
        self._room_repository = room_repository
        self._message_repository = message_repository

    async def execute(self, command: SendMessageCommand) -> Message:
        draft = MessageDraft.create(
            room_id=command.room_id,
            sender_id=command.sender_id,
            body=command.body,
            media_urls=command.media_urls,
        )
        if len(draft.body) > Config.MESSAGE_MAX_LENGTH:
            raise DomainValidationError(
                f"Message body cannot exceed {Config.MESSAGE_MAX_LENGTH} characters"
            )
        _validate_media_urls(draft.media_urls)

        if not await self._room_repository.exists(command.room_id):
            raise EntityNotFoundError(f"Room {command.room_id} not found")

        if not await self._room_repository.is_member(
            command.room_id, command.sender_id
        ):
            raise EntityNotFoundError(
                f"User {command.sender_id} is not a member of room {command.room_id}"
            )

        message = await self._message_repository.add(draft)
        logger.info(
            f"[send_message] Message {message.id} stored in room {message.room_id}"
        )
        return message
