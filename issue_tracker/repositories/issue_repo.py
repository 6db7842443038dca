from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from issue_tracker.models.issue import Issue, IssueStatus
from issue_tracker.models.user import User


class IssueRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        user_id: UUID,
        title: str,
        content: str,
        status: IssueStatus,
    ) -> Issue:
        issue = Issue(user_id=user_id, title=title, content=content, status=status)
        self.session.add(issue)
        await self.session.flush()
        return issue

    async def get_by_id(self, issue_id: UUID) -> Issue | None:
        r = await self.session.execute(select(Issue).where(Issue.id == issue_id))
        return r.scalar_one_or_none()

    async def get_by_id_for_update(self, issue_id: UUID) -> Issue | None:
        """Lock row for status update (SELECT FOR UPDATE)."""
        r = await self.session.execute(
            select(Issue).where(Issue.id == issue_id).with_for_update()
        )
        return r.scalar_one_or_none()

    async def list_for_user(self, user_id: UUID) -> list[Issue]:
        r = await self.session.execute(
            select(Issue)
            .where(Issue.user_id == user_id)
            .order_by(Issue.created_at.desc(), Issue.id)
        )
        return list(r.scalars().all())

    async def list_for_email(self, email: str) -> list[Issue]:
        r = await self.session.execute(
            select(Issue)
            .join(User, User.id == Issue.user_id)
            .where(User.email == email)
            .order_by(Issue.created_at.desc(), Issue.id)
        )
        return list(r.scalars().all())

    async def update_status(self, issue: Issue, new_status: IssueStatus) -> None:
        issue.status = new_status

    async def delete(self, issue: Issue) -> None:
        await self.session.delete(issue)
        await self.session.flush()
