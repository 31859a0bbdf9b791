"""
MessageId Value Object - autoincrement message identity, also used as a
pagination cursor.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"MessageId must be an integer, got {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"MessageId must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)
