"""Messages API Router - append a message to a room."""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, Field, PositiveInt

from roomchat.application.commands.messages import (
    SendMessageCommand,
    SendMessageHandler,
)
from roomchat.application.dto.message import MessageDTO
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SendMessageRequest(BaseModel):
    """
    Request body for sending a message.

    {"room_id": 3, "body": "hi", "media_urls": ["https://cdn.example.com/a.jpg"]}

    The mobile client's `roomId` / `content` / `mediaUrls` spelling is accepted too.
    """

    room_id: PositiveInt = Field(validation_alias=AliasChoices("room_id", "roomId"))
    body: str = Field(validation_alias=AliasChoices("body", "content"))
    media_urls: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("media_urls", "mediaUrls"),
    )


# ==================== ROUTER ====================

router = APIRouter(prefix="/messages", tags=["messages"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Send a message as the current user."""
    command = SendMessageCommand(
        room_id=RoomId(request.room_id),
        sender_id=current_user.id,
        body=request.body,
        media_urls=tuple(request.media_urls),
    )
    message = await handler.execute(command)
    return MessageDTO.from_entity(message)
