"""
DTOs - Data Transfer Objects

- room.py    → MemberDTO, RoomDTO, RoomPageDTO
- message.py → MessageDTO, MessagePageDTO

DTOs are for API input/output, entities are for business logic.
"""

from roomchat.application.dto.room import MemberDTO, RoomDTO, RoomPageDTO
from roomchat.application.dto.message import MessageDTO, MessagePageDTO

__all__ = [
    "MemberDTO",
    "RoomDTO",
    "RoomPageDTO",
    "MessageDTO",
    "MessagePageDTO",
]
