from issue_tracker.models.user import User
from issue_tracker.models.issue import Issue, IssueStatus

__all__ = [
    "User",
    "Issue",
    "IssueStatus",
]
