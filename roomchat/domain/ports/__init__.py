"""
PORTS - Interfaces that infrastructure implements

A port defines WHAT the chat layer needs from storage without saying HOW.
The Prisma repositories in roomchat.infrastructure.persistence implement them.
"""
