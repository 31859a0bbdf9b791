"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- rooms/    → list_rooms, get_room_detail, room_exists
- messages/ → get_messages
"""
