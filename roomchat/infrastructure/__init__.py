"""
INFRASTRUCTURE LAYER - Implementations of domain ports.

- persistence/ → Prisma repositories and the storage call policy
"""
