"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (create room, resolve direct room, send message)
- queries/   → Read operations (list rooms, room detail, messages)
- dto/       → Data Transfer Objects for the API
- common/    → Shared interfaces (Command, Query base classes) and paging

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
