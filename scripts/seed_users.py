#!/usr/bin/env python3
"""
Create a demo user with a few issues for local/dev.
Password is set via env or a dev-only default. Re-running is a no-op for an existing user.
"""
from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

DEMO_ISSUES = [
    ("Set up CI", "Run the test suite on every push.", "DONE"),
    ("Sign-in error message", "Show why a sign-in attempt failed.", "IN_PROGRESS"),
    ("Issue filters", "Filter the issue list by status.", "TODO"),
    ("Dark mode", "Theme toggle for the issue board.", "BACKLOG"),
]


async def seed_users() -> None:
    from issue_tracker.core.security import hash_password
    from issue_tracker.db import db_transaction
    from issue_tracker.models.issue import IssueStatus
    from issue_tracker.repositories.issue_repo import IssueRepository
    from issue_tracker.repositories.user_repo import UserRepository

    email = os.environ.get("SEED_USER_EMAIL", "demo@example.com")
    password = os.environ.get("SEED_USER_PASSWORD", "demo123")
    async with db_transaction() as session:
        users = UserRepository(session)
        if await users.get_by_email(email) is not None:
            print(f"User {email} already exists; nothing to do.")
            return
        user = await users.create(email, hash_password(password))
        issues = IssueRepository(session)
        for title, content, status in DEMO_ISSUES:
            await issues.create(user.id, title, content, IssueStatus(status))
    print(f"Seeded {email} with {len(DEMO_ISSUES)} issues.")


def main() -> None:
    asyncio.run(seed_users())


if __name__ == "__main__":
    main()
