"""
DOMAIN LAYER - Rooms, memberships and messages

This layer contains:
- Entities: Room, Message, User (read-only, owned by the identity subsystem)
- Value Objects: UserId, RoomId, MessageId, RoomKind, PairKey
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Domain-specific errors with a stable `kind`

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
