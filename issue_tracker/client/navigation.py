from __future__ import annotations

from enum import Enum
from typing import Union


class Route(str, Enum):
    HOME = "/"
    SIGNIN = "/signin"
    SIGNUP = "/signup"


class Navigator:
    """Records route changes in place of browser routing."""

    def __init__(self, initial: Union[Route, str] = Route.SIGNIN) -> None:
        self.initial = Route(initial)
        self.history: list[Route] = []

    @property
    def current(self) -> Route:
        return self.history[-1] if self.history else self.initial

    def push(self, route: Union[Route, str]) -> None:
        try:
            target = Route(route)
        except ValueError:
            raise ValueError(f"Unknown route: {route}")
        self.history.append(target)
