"""
Per-request GraphQL context: DB session plus the caller's bearer token.
The user is resolved lazily so signin/createUser work without a token.
"""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from issue_tracker.core.auth import bearer_token, get_user_for_token
from issue_tracker.core.errors import AuthenticationError
from issue_tracker.db import get_db
from issue_tracker.models.user import User


class GraphQLContext(BaseContext):
    def __init__(self, session: AsyncSession, token: Optional[str]) -> None:
        super().__init__()
        self.session = session
        self.token = token
        self._user: Optional[User] = None

    async def require_user(self) -> User:
        """Return the authenticated caller. Raises AuthenticationError."""
        if self._user is None:
            if self.token is None:
                raise AuthenticationError("Authentication required")
            self._user = await get_user_for_token(self.session, self.token)
        return self._user


async def get_context(
    session: AsyncSession = Depends(get_db),
    authorization: Optional[str] = Header(None),
) -> GraphQLContext:
    return GraphQLContext(session, bearer_token(authorization))
