"""
Authentication Dependency for FastAPI (the access gate).

- Extracts and validates the JWT from the Authorization header (Bearer)
- Loads the caller's identity {id, role, banned} through UserRepository
- Rejects banned identities before any chat operation runs

Handlers never re-check the ban flag; they trust this gate.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from roomchat.config.settings import Config
from roomchat.domain.exceptions import AccessDeniedError, UnauthenticatedError
from roomchat.domain.ports.repositories import UserRepository
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    id: UserId
    role: str
    banned: bool = False


# auto_error=False so a missing header goes through our own error shape
security = HTTPBearer(auto_error=False)


def _decode_token(token: str) -> dict:
    try:
        return jwt.decode(
            token,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthenticatedError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise UnauthenticatedError(f"Invalid token: {str(e)}")


def _claimed_user_id(claims: dict) -> UserId:
    # Integer or string of ASCII digits; floats are rejected, never truncated
    raw_id = claims.get("id", claims.get("sub"))
    if isinstance(raw_id, str) and raw_id.isascii() and raw_id.isdigit():
        raw_id = int(raw_id)
    if isinstance(raw_id, bool) or not isinstance(raw_id, int):
        raise UnauthenticatedError("Invalid user id claim in token")
    try:
        return UserId(raw_id)
    except ValueError:
        raise UnauthenticatedError("Invalid user id claim in token")


async def get_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Resolve the caller's identity.

    Raises:
        UnauthenticatedError: token missing, invalid, expired, or unknown user
    """
    if credentials is None:
        raise UnauthenticatedError("No token provided")

    claims = _decode_token(credentials.credentials)

    user_id = _claimed_user_id(claims)

    # Request-scoped dishka container, set by the dishka middleware
    user_repository = await request.state.dishka_container.get(UserRepository)
    user = await user_repository.get_by_id(user_id)
    if user is None:
        logger.info(f"[auth] Token for unknown user {user_id}")
        raise UnauthenticatedError("User not found")

    return AuthUser(id=user.id, role=user.role, banned=user.is_banned)


async def get_current_user(identity: AuthUser = Depends(get_identity)) -> AuthUser:
    """Identity of a caller allowed to use the chat API."""
    if identity.banned:
        logger.warning(f"[auth] Rejected banned user {identity.id}")
        raise AccessDeniedError("Account is banned")
    return identity
