"""
GraphQL schema: Query (user, issues, issuesForUser) and Mutation
(createUser, signin, createIssue, updateIssueStatus, deleteIssue).

createUser/signin report failure as a null result; every other failure is a
GraphQL error carrying extensions.code (UNAUTHENTICATED, NOT_FOUND, BAD_USER_INPUT).
"""
from __future__ import annotations

from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext, Info

from issue_tracker.api.context import GraphQLContext, get_context
from issue_tracker.api.types import AuthInput, CreateIssueInput, IssueStatus, IssueType, UserType
from issue_tracker.core.errors import IssueTrackerError
from issue_tracker.core.logging import get_logger
from issue_tracker.services import auth_service, issue_service

logger = get_logger(__name__)


@strawberry.type
class Query:
    @strawberry.field(description="The authenticated caller.")
    async def user(self, info: Info[GraphQLContext, None]) -> UserType:
        user = await info.context.require_user()
        return UserType.from_model(user)

    @strawberry.field(description="Issues owned by the caller, newest first.")
    async def issues(self, info: Info[GraphQLContext, None]) -> list[IssueType]:
        user = await info.context.require_user()
        rows = await issue_service.list_issues_for_user(info.context.session, user)
        return [IssueType.from_model(i) for i in rows]

    @strawberry.field
    async def issues_for_user(self, info: Info[GraphQLContext, None], email: str) -> list[IssueType]:
        await info.context.require_user()
        rows = await issue_service.list_issues_for_email(info.context.session, email)
        return [IssueType.from_model(i) for i in rows]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def update_issue_status(
        self, info: Info[GraphQLContext, None], id: str, status: IssueStatus
    ) -> IssueType:
        user = await info.context.require_user()
        issue = await issue_service.update_issue_status(info.context.session, user, id, status)
        return IssueType.from_model(issue)

    @strawberry.mutation
    async def create_issue(self, info: Info[GraphQLContext, None], input: CreateIssueInput) -> IssueType:
        user = await info.context.require_user()
        issue = await issue_service.create_issue(
            info.context.session, user, input.title, input.content, input.status
        )
        return IssueType.from_model(issue)

    @strawberry.mutation
    async def delete_issue(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> IssueType:
        user = await info.context.require_user()
        issue = await issue_service.delete_issue(info.context.session, user, str(id))
        return IssueType.from_model(issue)

    @strawberry.mutation
    async def create_user(self, info: Info[GraphQLContext, None], input: AuthInput) -> Optional[UserType]:
        result = await auth_service.create_user(info.context.session, input.email, input.password)
        if result is None:
            return None
        user, token = result
        return UserType.from_model(user, token=token)

    @strawberry.mutation
    async def signin(self, info: Info[GraphQLContext, None], input: AuthInput) -> Optional[UserType]:
        result = await auth_service.signin(info.context.session, input.email, input.password)
        if result is None:
            return None
        user, token = result
        return UserType.from_model(user, token=token)


class IssueTrackerSchema(strawberry.Schema):
    """Logs domain errors quietly; anything else keeps strawberry's traceback logging."""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, IssueTrackerError):
                logger.info(
                    "graphql_request_rejected",
                    extra={"error_code": error.original_error.code},
                )
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = IssueTrackerSchema(query=Query, mutation=Mutation)

graphql_router = GraphQLRouter(schema, context_getter=get_context)
