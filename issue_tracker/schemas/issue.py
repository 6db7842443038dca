from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from issue_tracker.schemas.enums import IssueStatus


class IssueCreate(BaseModel):
    """Validated CreateIssueInput."""

    title: str = Field(max_length=255)
    content: str
    status: IssueStatus

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
