"""
Unit tests: auth gateway handshake against a mocked GraphQL endpoint (respx).
"""
import json

import httpx
import pytest
import respx
from httpx import Response as HttpxResponse

from issue_tracker.client.gateway import AuthFailureReason, AuthGateway
from issue_tracker.client.navigation import Navigator, Route
from issue_tracker.client.token_store import MemoryTokenStore
from issue_tracker.client.transport import GraphQLClient

API_URL = "https://tracker.test/api/graphql"


def _user(token="tok123"):
    return {"id": "u-1", "email": "a@b.com", "createdAt": "2026-10-17T10:00:00+00:00", "token": token}


@pytest.fixture
def store():
    return MemoryTokenStore()


@pytest.fixture
def navigator():
    return Navigator()


@pytest.fixture
def gateway(store, navigator):
    return AuthGateway(GraphQLClient(API_URL, store), store, navigator)


@respx.mock
async def test_signin_scenario_stores_token_and_navigates_home_once(gateway, store, navigator):
    route = respx.post(API_URL).mock(return_value=HttpxResponse(200, json={"data": {"signin": _user()}}))

    result = await gateway.signin("a@b.com", "secret")

    assert result.ok
    assert result.token == "tok123"
    assert store.get() == "tok123"
    assert navigator.history == [Route.HOME]
    assert route.call_count == 1
    sent = json.loads(route.calls.last.request.content)
    assert "signin(input: $input)" in sent["query"]
    assert sent["variables"] == {"input": {"email": "a@b.com", "password": "secret"}}


@respx.mock
async def test_signup_uses_create_user(gateway, store):
    route = respx.post(API_URL).mock(
        return_value=HttpxResponse(200, json={"data": {"createUser": _user("fresh")}})
    )

    result = await gateway.signup("a@b.com", "secret")

    assert result.ok
    assert store.get() == "fresh"
    assert "createUser(input: $input)" in json.loads(route.calls.last.request.content)["query"]


@respx.mock
@pytest.mark.parametrize(
    "method,field,reason",
    [
        ("signin", "signin", AuthFailureReason.INVALID_CREDENTIALS),
        ("signup", "createUser", AuthFailureReason.DUPLICATE_ACCOUNT),
    ],
)
async def test_null_result_leaves_store_unchanged(gateway, store, navigator, method, field, reason):
    store.set("previous")
    respx.post(API_URL).mock(return_value=HttpxResponse(200, json={"data": {field: None}}))

    result = await getattr(gateway, method)("a@b.com", "bad")

    assert not result.ok
    assert result.reason is reason
    assert result.message
    assert store.get() == "previous"
    assert navigator.history == []


@respx.mock
async def test_bad_user_input_maps_to_invalid_input(gateway, store):
    respx.post(API_URL).mock(
        return_value=HttpxResponse(
            200,
            json={
                "data": None,
                "errors": [{"message": "Invalid sign-up input: email", "extensions": {"code": "BAD_USER_INPUT"}}],
            },
        )
    )

    result = await gateway.signup("nope", "secret")

    assert result.reason is AuthFailureReason.INVALID_INPUT
    assert store.get() is None


@respx.mock
async def test_uncoded_graphql_error_is_server_error(gateway, store):
    respx.post(API_URL).mock(
        return_value=HttpxResponse(200, json={"data": None, "errors": [{"message": "boom"}]})
    )

    result = await gateway.signin("a@b.com", "secret")

    assert result.reason is AuthFailureReason.SERVER_ERROR
    assert store.get() is None


@respx.mock
async def test_network_failure_is_transport_error(gateway, store, navigator):
    respx.post(API_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    result = await gateway.signin("a@b.com", "secret")

    assert result.reason is AuthFailureReason.TRANSPORT_ERROR
    assert store.get() is None
    assert navigator.history == []


@respx.mock
@pytest.mark.parametrize(
    "response",
    [HttpxResponse(502, text="Bad Gateway"), HttpxResponse(200, text="<html>oops</html>"), HttpxResponse(200, json=[1])],
)
async def test_non_graphql_response_is_transport_error(gateway, store, response):
    respx.post(API_URL).mock(return_value=response)

    result = await gateway.signin("a@b.com", "secret")

    assert result.reason is AuthFailureReason.TRANSPORT_ERROR
    assert store.get() is None


@respx.mock
async def test_result_without_token_is_server_error(gateway, store, navigator):
    respx.post(API_URL).mock(return_value=HttpxResponse(200, json={"data": {"signin": _user(token=None)}}))

    result = await gateway.signin("a@b.com", "secret")

    assert result.reason is AuthFailureReason.SERVER_ERROR
    assert store.get() is None
    assert navigator.history == []


@respx.mock
async def test_transport_sends_bearer_token_when_present(store):
    store.set("tok123")
    route = respx.post(API_URL).mock(return_value=HttpxResponse(200, json={"data": {"user": None}}))

    await GraphQLClient(API_URL, store).execute("query { user { id } }")

    assert route.calls.last.request.headers["Authorization"] == "Bearer tok123"


@respx.mock
async def test_transport_omits_authorization_without_token(store):
    route = respx.post(API_URL).mock(return_value=HttpxResponse(200, json={"data": {}}))

    await GraphQLClient(API_URL, store).execute("query { __typename }")

    assert "Authorization" not in route.calls.last.request.headers


def test_signout_clears_token_and_returns_to_signin(gateway, store, navigator):
    store.set("tok123")

    gateway.signout()

    assert store.get() is None
    assert navigator.current is Route.SIGNIN
