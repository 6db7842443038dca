from issue_tracker.core.errors import AuthenticationError, InvalidInputError, IssueTrackerError, NotFoundError
from issue_tracker.core.logging import get_logger, request_id_ctx

__all__ = [
    "AuthenticationError",
    "InvalidInputError",
    "IssueTrackerError",
    "NotFoundError",
    "get_logger",
    "request_id_ctx",
]
