"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: the access gate attaching an identity to each request
"""
