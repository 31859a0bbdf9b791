"""
RoomKind - stored as a column so direct rooms are never inferred from shape.
"""

from enum import Enum


class RoomKind(str, Enum):
    DIRECT = "direct"
    GROUP = "group"
