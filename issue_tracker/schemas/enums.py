from __future__ import annotations

from enum import Enum as PyEnum


class IssueStatus(str, PyEnum):
    BACKLOG = "BACKLOG"
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
