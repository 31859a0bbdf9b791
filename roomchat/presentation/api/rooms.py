"""
Rooms API Router - FastAPI endpoints for rooms and their history.

- Thin layer: only handles HTTP concerns (request/response)
- Receives handlers via Dependency Injection (Dishka)
- Domain exceptions are mapped to HTTP responses by the app's handlers

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
"""

from datetime import datetime
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import AliasChoices, BaseModel, Field, PositiveInt

from roomchat.application.commands.rooms import (
    CreateRoomCommand,
    CreateRoomHandler,
    GetOrCreateDirectRoomCommand,
    GetOrCreateDirectRoomHandler,
)
from roomchat.application.dto.message import MessageDTO, MessagePageDTO
from roomchat.application.dto.room import RoomDTO, RoomPageDTO
from roomchat.application.queries.messages import GetMessagesHandler, GetMessagesQuery
from roomchat.application.queries.rooms import (
    GetRoomDetailHandler,
    GetRoomDetailQuery,
    ListRoomsHandler,
    ListRoomsQuery,
    RoomExistsHandler,
    RoomExistsQuery,
)
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.room_id import RoomId
from roomchat.domain.value_objects.user_id import UserId
from roomchat.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateRoomRequest(BaseModel):
    """
    Request body for creating a group room.

    {"name": "Trip to Djerba", "user_ids": [7, 12, 31]}
    """

    name: Optional[str] = None
    user_ids: list[PositiveInt] = Field(
        default_factory=list,
        validation_alias=AliasChoices("user_ids", "userIds"),
    )


class GetOrCreateRoomRequest(BaseModel):
    """Request body for opening the direct room with another user."""

    user_id: PositiveInt = Field(validation_alias=AliasChoices("user_id", "userId"))


# ==================== ROUTER ====================

router = APIRouter(prefix="/rooms", tags=["rooms"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=RoomDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_room(
    request: CreateRoomRequest,
    handler: FromDishka[CreateRoomHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a named group room with the given members."""
    command = CreateRoomCommand(
        member_ids=tuple(UserId(uid) for uid in request.user_ids),
        name=request.name,
    )
    room = await handler.execute(command)
    logger.info(f"User {current_user.id} created room {room.id}")
    return RoomDTO.from_entity(room)


@router.post(
    "/get-or-create",
    response_model=RoomDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_or_create_room(
    request: GetOrCreateRoomRequest,
    handler: FromDishka[GetOrCreateDirectRoomHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Return the direct room between the caller and another user, creating it once."""
    command = GetOrCreateDirectRoomCommand(
        user_a=current_user.id,
        user_b=UserId(request.user_id),
    )
    room = await handler.execute(command)
    return RoomDTO.from_entity(room)


@router.get(
    "",
    response_model=RoomPageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_rooms(
    handler: FromDishka[ListRoomsHandler],
    current_user: AuthUser = Depends(get_current_user),
    limit: Optional[int] = Query(None, ge=1),
    after: Optional[int] = Query(None, ge=1),
):
    """List the caller's rooms ordered by id."""
    query = ListRoomsQuery(
        user_id=current_user.id,
        limit=limit,
        after=RoomId(after) if after else None,
    )
    rooms = await handler.execute(query)
    return RoomPageDTO(
        rooms=[RoomDTO.from_entity(room) for room in rooms],
        next_after=rooms[-1].id.value if rooms else None,
    )


@router.get(
    "/{room_id}",
    response_model=RoomDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_room(
    room_id: PositiveInt,
    handler: FromDishka[GetRoomDetailHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Get a room with its members."""
    query = GetRoomDetailQuery(room_id=RoomId(room_id), viewer_id=current_user.id)
    room = await handler.execute(query)
    return RoomDTO.from_entity(room)


@router.head("/{room_id}")
@inject
async def room_exists(
    room_id: PositiveInt,
    handler: FromDishka[RoomExistsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Existence check: 200 if the room exists, 404 otherwise."""
    exists = await handler.execute(RoomExistsQuery(room_id=RoomId(room_id)))
    return Response(
        status_code=status.HTTP_200_OK if exists else status.HTTP_404_NOT_FOUND
    )


@router.get(
    "/{room_id}/messages",
    response_model=MessagePageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_messages(
    room_id: PositiveInt,
    handler: FromDishka[GetMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
    limit: Optional[int] = Query(None, ge=1),
    before: Optional[int] = Query(None, ge=1),
    before_ts: Optional[datetime] = None,
):
    """
    Get one page of messages, oldest first.

    Query params:
        limit: page size (default 50, capped at 200)
        before: message id cursor, returns strictly older messages
        before_ts: only messages created strictly before this timestamp
    """
    query = GetMessagesQuery(
        room_id=RoomId(room_id),
        limit=limit,
        before=MessageId(before) if before else None,
        before_time=before_ts,
        viewer_id=current_user.id,
    )
    messages = await handler.execute(query)
    return MessagePageDTO(
        messages=[MessageDTO.from_entity(m) for m in messages],
        next_before=messages[0].id.value if messages else None,
    )
