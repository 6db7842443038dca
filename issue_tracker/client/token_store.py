"""
Session token stores. A store is passed explicitly to the transport and the
auth gateway; there is no module-level token.

Lifetimes:
- MemoryTokenStore: lives as long as the owning process (one "tab").
- FileTokenStore: persisted on disk until clear() (sign-out).

Writes are last-write-wins; there is no locking.
"""
from __future__ import annotations

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union


class TokenStore(ABC):
    @abstractmethod
    def get(self) -> Optional[str]:
        """Most recently set token, or None if never set or cleared."""
        ...

    @abstractmethod
    def set(self, token: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @staticmethod
    def _check(token: str) -> str:
        if not token:
            raise ValueError("token must be a non-empty string")
        return token


class MemoryTokenStore(TokenStore):
    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = self._check(token)

    def clear(self) -> None:
        self._token = None


class FileTokenStore(TokenStore):
    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path).expanduser()

    @classmethod
    def from_settings(cls) -> "FileTokenStore":
        from issue_tracker.config import get_settings

        return cls(get_settings().token_file)

    def get(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def set(self, token: str) -> None:
        self._check(token)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # mkstemp creates the file 0600; os.replace swaps it in atomically
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(token)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
