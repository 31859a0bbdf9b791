"""
User Entity - A user of the wider application, read-only in the chat layer.

Member is the public projection of a user shown inside rooms and messages:
identifier, display name and avatar reference only.
"""

from dataclasses import dataclass
from typing import Optional

from roomchat.domain.value_objects.user_id import UserId

VALID_ROLES = ("user", "advisor", "admin")


@dataclass(frozen=True)
class Member:
    user_id: UserId
    display_name: str
    avatar_url: Optional[str] = None


@dataclass
class User:
    id: UserId
    first_name: str
    last_name: str
    role: str = "user"
    is_banned: bool = False
    profile_image: Optional[str] = None

    def __post_init__(self):
        if self.role not in VALID_ROLES:
            raise ValueError(
                f"Invalid role: {self.role}. Must be one of {list(VALID_ROLES)}."
            )

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_member(self) -> Member:
        return Member(
            user_id=self.id,
            display_name=self.display_name,
            avatar_url=self.profile_image,
        )
