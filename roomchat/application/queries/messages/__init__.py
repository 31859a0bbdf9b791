"""Message-related queries."""

from roomchat.application.queries.messages.get_messages import (
    GetMessagesQuery,
    GetMessagesHandler,
)

__all__ = [
    "GetMessagesQuery",
    "GetMessagesHandler",
]
