"""
JWT session tokens issued by signin/createUser.
Token payload: sub (user id), exp. Tokens are never stored server-side.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from issue_tracker.config import get_settings
from issue_tracker.core.errors import AuthenticationError
from issue_tracker.models.user import User
from issue_tracker.repositories.user_repo import UserRepository


class TokenPayload(BaseModel):
    sub: str  # user id
    exp: datetime


def create_access_token(user_id: UUID) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_access_token_expire_minutes)
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> TokenPayload:
    """Validate signature and expiry. Raises AuthenticationError."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        raise AuthenticationError()
    if payload.get("sub") is None:
        raise AuthenticationError()
    return TokenPayload.model_validate(payload)


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_user_for_token(session: AsyncSession, token: str) -> User:
    payload = decode_access_token(token)
    try:
        user_id = UUID(payload.sub)
    except ValueError:
        raise AuthenticationError()
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise AuthenticationError()
    return user
