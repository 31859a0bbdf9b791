"""
Async HTTP client for the room chat API.

The client keeps no credentials of its own: every call receives the
Session it acts for, so one client can serve many users and nothing holds a
process-wide token.

    async with ChatApiClient("http://localhost:5001") as api:
        session = Session(token=jwt_token)
        room = await api.get_or_create_room(session, user_id=12)
        await api.send_message(session, room.id, "hi")

Errors come back as the domain exceptions named by the body's `kind`.
The API server itself being unreachable is reported with the same storage
kinds, since the caller cannot reach the data either way: a transport
timeout raises StorageTimeoutError and any other transport failure raises
StorageError, both with a message naming the API server.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

import httpx

from roomchat.application.dto.message import MessageDTO, MessagePageDTO
from roomchat.application.dto.room import RoomDTO, RoomPageDTO
from roomchat.domain.exceptions import ERROR_KINDS, StorageError, StorageTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    token: str
    correlation_id: Optional[str] = None

    def headers(self) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self.token}"}
        if self.correlation_id:
            headers["X-Correlation-ID"] = self.correlation_id
        return headers


class ChatApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> ChatApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self, session: Session, method: str, path: str, **kwargs: Any
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method, path, headers=session.headers(), **kwargs
            )
        except httpx.TimeoutException as e:
            raise StorageTimeoutError(
                f"Chat API did not answer {method} {path} in time"
            ) from e
        except httpx.HTTPError as e:
            raise StorageError(f"Chat API unreachable for {method} {path}: {e}") from e

        if response.is_error:
            self._raise_for_error(response)
        return response

    @staticmethod
    def _raise_for_error(response: httpx.Response) -> None:
        """Map an error body {"error", "kind"} back to the domain exception."""
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        message = payload.get("error") or response.reason_phrase
        exc_class = ERROR_KINDS.get(payload.get("kind", ""))
        if exc_class is None:
            logger.warning(f"[client] Unmapped error {response.status_code}: {message}")
            raise StorageError(f"HTTP {response.status_code}: {message}")
        raise exc_class(message)

    # ==================== ROOMS ====================

    async def create_room(
        self, session: Session, user_ids: list[int], name: Optional[str] = None
    ) -> RoomDTO:
        response = await self._request(
            session, "POST", "/rooms", json={"name": name, "user_ids": user_ids}
        )
        return RoomDTO.model_validate(response.json())

    async def get_or_create_room(self, session: Session, user_id: int) -> RoomDTO:
        response = await self._request(
            session, "POST", "/rooms/get-or-create", json={"user_id": user_id}
        )
        return RoomDTO.model_validate(response.json())

    async def list_rooms(
        self, session: Session, limit: Optional[int] = None, after: Optional[int] = None
    ) -> RoomPageDTO:
        params = {k: v for k, v in {"limit": limit, "after": after}.items() if v}
        response = await self._request(session, "GET", "/rooms", params=params)
        return RoomPageDTO.model_validate(response.json())

    async def get_room(self, session: Session, room_id: int) -> RoomDTO:
        response = await self._request(session, "GET", f"/rooms/{room_id}")
        return RoomDTO.model_validate(response.json())

    # ==================== MESSAGES ====================

    async def send_message(
        self,
        session: Session,
        room_id: int,
        body: str,
        media_urls: Optional[list[str]] = None,
    ) -> MessageDTO:
        response = await self._request(
            session,
            "POST",
            "/messages",
            json={"room_id": room_id, "body": body, "media_urls": media_urls or []},
        )
        return MessageDTO.model_validate(response.json())

    async def get_messages(
        self,
        session: Session,
        room_id: int,
        limit: Optional[int] = None,
        before: Optional[int] = None,
        before_ts: Optional[datetime] = None,
    ) -> MessagePageDTO:
        params: dict[str, Any] = {}
        if limit:
            params["limit"] = limit
        if before:
            params["before"] = before
        if before_ts:
            params["before_ts"] = before_ts.isoformat()
        response = await self._request(
            session, "GET", f"/rooms/{room_id}/messages", params=params
        )
        return MessagePageDTO.model_validate(response.json())
