"""
Sign-in / sign-up form controllers.

Each form holds {email, password} and a request state:
IDLE -> SUBMITTING -> (SUCCEEDED | FAILED). submit() is ignored while a
request is in flight, and the form never stays SUBMITTING once the request
has finished, whatever the outcome.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from issue_tracker.client.gateway import AuthFailure, AuthFailureReason, AuthGateway, AuthResult
from issue_tracker.client.navigation import Route
from issue_tracker.core.logging import get_logger

logger = get_logger(__name__)


class SubmitState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class AuthForm(ABC):
    title = ""
    submit_label = ""
    alternate_prompt = ""
    alternate_label = ""
    alternate_route = Route.SIGNIN

    FIELDS = ("email", "password")

    def __init__(self, gateway: AuthGateway) -> None:
        self.gateway = gateway
        self.email = ""
        self.password = ""
        self.state = SubmitState.IDLE
        self.error: Optional[str] = None
        self.failure_reason: Optional[AuthFailureReason] = None

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmitState.SUBMITTING

    def set_field(self, name: str, value: str) -> None:
        if name not in self.FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        setattr(self, name, value)
        if self.state is SubmitState.FAILED:
            self.state = SubmitState.IDLE
            self.error = None
            self.failure_reason = None

    def set_email(self, value: str) -> None:
        self.set_field("email", value)

    def set_password(self, value: str) -> None:
        self.set_field("password", value)

    @abstractmethod
    async def _send(self, email: str, password: str) -> AuthResult:
        ...

    async def submit(self) -> Optional[AuthResult]:
        """Send the current field values. Returns None if a submission is already in flight."""
        if self.is_submitting:
            logger.info("auth_submit_ignored_in_flight")
            return None
        email, password = self.email, self.password
        self.state = SubmitState.SUBMITTING
        self.error = None
        self.failure_reason = None
        try:
            result = await self._send(email, password)
        except BaseException:
            # Unexpected exception or cancellation
            self.state = SubmitState.FAILED
            self.error = "Something went wrong. Please try again."
            raise
        self._apply(result)
        return result

    def _apply(self, result: AuthResult) -> None:
        if isinstance(result, AuthFailure):
            self.state = SubmitState.FAILED
            self.error = result.message
            self.failure_reason = result.reason
        else:
            self.state = SubmitState.SUCCEEDED


class SignInForm(AuthForm):
    title = "Sign in"
    submit_label = "Signin"
    alternate_prompt = "Don't have an account?"
    alternate_label = "Sign up"
    alternate_route = Route.SIGNUP

    async def _send(self, email: str, password: str) -> AuthResult:
        return await self.gateway.signin(email, password)


class SignUpForm(AuthForm):
    title = "Sign up"
    submit_label = "Signup"
    alternate_prompt = "Already have an account?"
    alternate_label = "Sign in"
    alternate_route = Route.SIGNIN

    async def _send(self, email: str, password: str) -> AuthResult:
        return await self.gateway.signup(email, password)
