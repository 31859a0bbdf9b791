"""
RoomAlreadyExistsError - Raised by a RoomRepository when a direct room with the
same pair key was created concurrently. The room resolver handles it.
Maps to: HTTP 409 Conflict
"""


class RoomAlreadyExistsError(Exception):
    kind = "conflict"

    def __init__(self, message: str = "Room already exists", pair_key: str = ""):
        super().__init__(message)
        self.message = message
        self.pair_key = pair_key
