"""
GraphQL object and input types: User, Issue, AuthInput, CreateIssueInput, IssueStatus.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

import strawberry
from strawberry.types import Info

from issue_tracker.api.context import GraphQLContext
from issue_tracker.models.issue import Issue, IssueStatus as IssueStatusModel
from issue_tracker.models.user import User
from issue_tracker.repositories.issue_repo import IssueRepository

IssueStatus = strawberry.enum(IssueStatusModel, name="IssueStatus")


def _iso_utc(value: datetime) -> str:
    # SQLite hands back naive datetimes; stored values are UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


@strawberry.type(name="Issue")
class IssueType:
    id: str
    title: str
    user_id: str
    content: str
    status: IssueStatus
    created_at: str

    @classmethod
    def from_model(cls, issue: Issue) -> "IssueType":
        return cls(
            id=str(issue.id),
            title=issue.title,
            user_id=str(issue.user_id),
            content=issue.content,
            status=issue.status,
            created_at=_iso_utc(issue.created_at),
        )


@strawberry.type(name="User")
class UserType:
    id: str
    email: str
    created_at: str
    # Only set on the signin/createUser response
    token: Optional[str] = None

    @strawberry.field
    async def issues(self, info: Info[GraphQLContext, None]) -> list[Optional[IssueType]]:
        rows = await IssueRepository(info.context.session).list_for_user(UUID(self.id))
        return [IssueType.from_model(i) for i in rows]

    @classmethod
    def from_model(cls, user: User, token: Optional[str] = None) -> "UserType":
        return cls(
            id=str(user.id),
            email=user.email,
            created_at=_iso_utc(user.created_at),
            token=token,
        )


@strawberry.input
class AuthInput:
    email: str
    password: str


@strawberry.input
class CreateIssueInput:
    title: str
    content: str
    status: IssueStatus
