"""
Account creation and sign-in. Both return the user plus a fresh token, or None.
None is the contract's failure signal: taken email (createUser), bad credentials (signin).
"""
from __future__ import annotations

from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from issue_tracker.core.auth import create_access_token
from issue_tracker.core.errors import InvalidInputError
from issue_tracker.core.logging import get_logger
from issue_tracker.core.security import hash_password, verify_password
from issue_tracker.models.user import User
from issue_tracker.repositories.user_repo import UserRepository
from issue_tracker.schemas.auth import Credentials

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def create_user(
    session: AsyncSession,
    email: str,
    password: str,
) -> Optional[tuple[User, str]]:
    """
    Validate input, create the user, issue a token.
    Returns None if the email is already registered. Raises InvalidInputError on malformed input.
    """
    try:
        creds = Credentials(email=normalize_email(email), password=password)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise InvalidInputError(f"Invalid sign-up input: {fields}")

    repo = UserRepository(session)
    if await repo.get_by_email(creds.email) is not None:
        logger.info("signup_rejected_duplicate_email")
        return None
    try:
        # A concurrent sign-up can take the email between the check and the insert
        async with session.begin_nested():
            user = await repo.create(creds.email, hash_password(creds.password))
    except IntegrityError:
        logger.info("signup_rejected_duplicate_email")
        return None
    logger.info("user_created", extra={"user_id": user.id})
    return user, create_access_token(user.id)


async def signin(
    session: AsyncSession,
    email: str,
    password: str,
) -> Optional[tuple[User, str]]:
    """Returns (user, token) on valid credentials, else None."""
    repo = UserRepository(session)
    user = await repo.get_by_email(normalize_email(email))
    if user is None or not verify_password(password, user.hashed_password):
        logger.info("signin_failed")
        return None
    logger.info("signin_succeeded", extra={"user_id": user.id})
    return user, create_access_token(user.id)
