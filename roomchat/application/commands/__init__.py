"""
COMMANDS - Write operations (CQRS)

Subfolders:
- rooms/    → create_room, get_or_create_direct_room
- messages/ → send_message
"""
