"""
API Routers - FastAPI endpoint definitions.
"""

from roomchat.presentation.api.rooms import router as rooms_router
from roomchat.presentation.api.messages import router as messages_router

__all__ = [
    "rooms_router",
    "messages_router",
]
