"""
Typed client for the issue operations. Authenticates through the token store
held by the GraphQL client.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from issue_tracker.client.operations import (
    CREATE_ISSUE_MUTATION,
    DELETE_ISSUE_MUTATION,
    ISSUES_FOR_USER_QUERY,
    ISSUES_QUERY,
    UPDATE_ISSUE_STATUS_MUTATION,
    USER_QUERY,
)
from issue_tracker.client.transport import GraphQLClient
from issue_tracker.core.logging import get_logger
from issue_tracker.schemas.enums import IssueStatus

logger = get_logger(__name__)


class ApiError(Exception):
    def __init__(self, code: Optional[str], message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class UserView(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    created_at: str = Field(alias="createdAt")


class IssueView(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    # Unknown values fail validation; the enum may grow on the server
    status: IssueStatus
    user_id: str = Field(alias="userId")
    created_at: str = Field(alias="createdAt")


class IssuesClient:
    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    async def _run(self, query: str, field: str, variables: Optional[dict[str, Any]] = None) -> Any:
        response = await self.client.execute(query, variables)
        if response.errors:
            first = response.errors[0]
            raise ApiError(first.code, first.message)
        data = response.data or {}
        if field not in data:
            raise ApiError(None, f"Response is missing '{field}'")
        return data[field]

    @staticmethod
    def _issue(payload: Any) -> IssueView:
        try:
            return IssueView.model_validate(payload)
        except ValidationError:
            raise ApiError("MALFORMED_RESPONSE", "Malformed issue in response")

    @staticmethod
    def _issue_list(payload: list[Any]) -> list[IssueView]:
        issues = []
        for item in payload:
            try:
                issues.append(IssueView.model_validate(item))
            except ValidationError:
                logger.warning(
                    "issue_dropped_unrecognised",
                    extra={"issue_id": item.get("id") if isinstance(item, dict) else None},
                )
        return issues

    async def viewer(self) -> UserView:
        return UserView.model_validate(await self._run(USER_QUERY, "user"))

    async def list_issues(self) -> list[IssueView]:
        return self._issue_list(await self._run(ISSUES_QUERY, "issues"))

    async def issues_for_user(self, email: str) -> list[IssueView]:
        return self._issue_list(
            await self._run(ISSUES_FOR_USER_QUERY, "issuesForUser", {"email": email})
        )

    async def create_issue(
        self,
        title: str,
        content: str,
        status: IssueStatus = IssueStatus.TODO,
    ) -> IssueView:
        variables = {"input": {"title": title, "content": content, "status": IssueStatus(status).value}}
        return self._issue(await self._run(CREATE_ISSUE_MUTATION, "createIssue", variables))

    async def update_issue_status(self, issue_id: str, status: IssueStatus) -> IssueView:
        variables = {"id": issue_id, "status": IssueStatus(status).value}
        return self._issue(
            await self._run(UPDATE_ISSUE_STATUS_MUTATION, "updateIssueStatus", variables)
        )

    async def delete_issue(self, issue_id: str) -> IssueView:
        return self._issue(await self._run(DELETE_ISSUE_MUTATION, "deleteIssue", {"id": issue_id}))
