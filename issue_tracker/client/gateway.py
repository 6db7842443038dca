"""
Auth gateway: credential submission handshake for sign-in and sign-up.

On success the token is written to the token store and the navigator moves to
the home route, once. On failure neither happens and the caller gets an
AuthFailure naming the reason.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from issue_tracker.client.navigation import Navigator, Route
from issue_tracker.client.operations import SIGNIN_MUTATION, SIGNUP_MUTATION
from issue_tracker.client.token_store import TokenStore
from issue_tracker.client.transport import GraphQLClient, GraphQLResponse, TransportError
from issue_tracker.core.logging import get_logger

logger = get_logger(__name__)


class AuthFailureReason(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    DUPLICATE_ACCOUNT = "duplicate_account"
    INVALID_INPUT = "invalid_input"
    SERVER_ERROR = "server_error"
    TRANSPORT_ERROR = "transport_error"


FAILURE_MESSAGES = {
    AuthFailureReason.INVALID_CREDENTIALS: "Incorrect email or password.",
    AuthFailureReason.DUPLICATE_ACCOUNT: "An account with this email already exists.",
    AuthFailureReason.INVALID_INPUT: "Please enter a valid email and password.",
    AuthFailureReason.SERVER_ERROR: "Something went wrong on the server. Please try again.",
    AuthFailureReason.TRANSPORT_ERROR: "Could not reach the server. Check your connection and try again.",
}


class AuthenticatedUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    email: str
    created_at: str = Field(alias="createdAt")
    token: str = Field(min_length=1)


class AuthSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: AuthenticatedUser

    ok: Literal[True] = True

    @property
    def token(self) -> str:
        return self.user.token


class AuthFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: AuthFailureReason
    message: str

    ok: Literal[False] = False

    @classmethod
    def of(cls, reason: AuthFailureReason, message: Optional[str] = None) -> "AuthFailure":
        return cls(reason=reason, message=message or FAILURE_MESSAGES[reason])


AuthResult = Union[AuthSuccess, AuthFailure]


class AuthGateway:
    def __init__(
        self,
        client: GraphQLClient,
        token_store: TokenStore,
        navigator: Navigator,
    ) -> None:
        self.client = client
        self.token_store = token_store
        self.navigator = navigator

    async def signin(self, email: str, password: str) -> AuthResult:
        return await self._submit(
            SIGNIN_MUTATION, "signin", email, password, AuthFailureReason.INVALID_CREDENTIALS
        )

    async def signup(self, email: str, password: str) -> AuthResult:
        return await self._submit(
            SIGNUP_MUTATION, "createUser", email, password, AuthFailureReason.DUPLICATE_ACCOUNT
        )

    def signout(self) -> None:
        self.token_store.clear()
        self.navigator.push(Route.SIGNIN)

    async def _submit(
        self,
        mutation: str,
        field: str,
        email: str,
        password: str,
        null_reason: AuthFailureReason,
    ) -> AuthResult:
        try:
            response = await self.client.execute(
                mutation, {"input": {"email": email, "password": password}}
            )
        except TransportError:
            return AuthFailure.of(AuthFailureReason.TRANSPORT_ERROR)

        failure = _failure_from_errors(response)
        if failure is not None:
            return failure

        payload = (response.data or {}).get(field)
        if payload is None:
            logger.info("auth_rejected", extra={"error_code": null_reason.value})
            return AuthFailure.of(null_reason)
        try:
            user = AuthenticatedUser.model_validate(payload)
        except ValidationError:
            logger.warning("auth_response_malformed")
            return AuthFailure.of(AuthFailureReason.SERVER_ERROR)

        self.token_store.set(user.token)
        self.navigator.push(Route.HOME)
        logger.info("auth_succeeded", extra={"user_id": user.id})
        return AuthSuccess(user=user)


def _failure_from_errors(response: GraphQLResponse) -> Optional[AuthFailure]:
    if response.ok:
        return None
    first = response.errors[0]
    if first.code == "BAD_USER_INPUT":
        return AuthFailure.of(AuthFailureReason.INVALID_INPUT)
    return AuthFailure.of(AuthFailureReason.SERVER_ERROR)
