"""
PairKey Value Object - canonical, order-independent key of a direct room.

    PairKey.of(UserId(12), UserId(7)).value == "7:12"
"""

from __future__ import annotations

from dataclasses import dataclass

from roomchat.domain.exceptions.validation_error import DomainValidationError
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class PairKey:
    value: str

    def __post_init__(self):
        parts = self.value.split(":")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid pair key: {self.value!r}")
        low, high = (int(p) for p in parts)
        if not 0 < low < high:
            raise ValueError(f"Pair key is not canonical: {self.value!r}")

    @classmethod
    def of(cls, user_a: UserId, user_b: UserId) -> PairKey:
        if user_a == user_b:
            raise DomainValidationError("Cannot open a direct room with yourself")
        low, high = sorted((user_a.value, user_b.value))
        return cls(f"{low}:{high}")

    def user_ids(self) -> tuple[UserId, UserId]:
        low, high = self.value.split(":")
        return UserId(int(low)), UserId(int(high))

    def __str__(self) -> str:
        return self.value
