"""roomchat - room-based chat persistence service."""

__version__ = "1.0.0"
