"""
Issue lifecycle: create (owner = caller), status update, delete.
Issues owned by another user are reported as not found.
"""
from __future__ import annotations

from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from issue_tracker.core.errors import InvalidInputError, NotFoundError
from issue_tracker.core.logging import get_logger
from issue_tracker.models.issue import Issue, IssueStatus
from issue_tracker.models.user import User
from issue_tracker.repositories.issue_repo import IssueRepository
from issue_tracker.schemas.issue import IssueCreate
from issue_tracker.services.auth_service import normalize_email

logger = get_logger(__name__)


def _parse_issue_id(issue_id: str) -> UUID:
    try:
        return UUID(str(issue_id))
    except ValueError:
        raise NotFoundError("Issue not found")


async def _get_owned_issue(repo: IssueRepository, owner: User, issue_id: str, lock: bool = False) -> Issue:
    uid = _parse_issue_id(issue_id)
    issue = await (repo.get_by_id_for_update(uid) if lock else repo.get_by_id(uid))
    if issue is None or issue.user_id != owner.id:
        raise NotFoundError("Issue not found")
    return issue


async def create_issue(
    session: AsyncSession,
    owner: User,
    title: str,
    content: str,
    status: IssueStatus,
) -> Issue:
    try:
        data = IssueCreate(title=title, content=content, status=status)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise InvalidInputError(f"Invalid issue input: {fields}")
    repo = IssueRepository(session)
    issue = await repo.create(owner.id, data.title, data.content, data.status)
    logger.info("issue_created", extra={"user_id": owner.id, "issue_id": issue.id})
    return issue


async def update_issue_status(
    session: AsyncSession,
    owner: User,
    issue_id: str,
    new_status: IssueStatus,
) -> Issue:
    """Any status may move to any other; only the status column changes."""
    repo = IssueRepository(session)
    issue = await _get_owned_issue(repo, owner, issue_id, lock=True)
    await repo.update_status(issue, new_status)
    await session.flush()
    logger.info(
        "issue_status_updated",
        extra={"user_id": owner.id, "issue_id": issue.id},
    )
    return issue


async def delete_issue(session: AsyncSession, owner: User, issue_id: str) -> Issue:
    """Delete and return the issue as it was before removal."""
    repo = IssueRepository(session)
    issue = await _get_owned_issue(repo, owner, issue_id)
    await repo.delete(issue)
    logger.info("issue_deleted", extra={"user_id": owner.id, "issue_id": issue.id})
    return issue


async def list_issues_for_user(session: AsyncSession, owner: User) -> list[Issue]:
    return await IssueRepository(session).list_for_user(owner.id)


async def list_issues_for_email(session: AsyncSession, email: str) -> list[Issue]:
    return await IssueRepository(session).list_for_email(normalize_email(email))
