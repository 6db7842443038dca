"""
Domain errors raised by services and resolvers.

graphql-core copies an exception's ``extensions`` onto the located GraphQL
error, so each subclass surfaces as ``errors[].extensions.code`` on the wire.
"""
from __future__ import annotations


class IssueTrackerError(Exception):
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, str]:
        return {"code": self.code}


class AuthenticationError(IssueTrackerError):
    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Could not validate credentials") -> None:
        super().__init__(message)


class NotFoundError(IssueTrackerError):
    code = "NOT_FOUND"


class InvalidInputError(IssueTrackerError):
    code = "BAD_USER_INPUT"
