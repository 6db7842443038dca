"""
GraphQL-over-HTTP transport: POST {query, variables} as JSON to the API endpoint.
The bearer token is read from the token store on every request.
"""
from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field

from issue_tracker.client.token_store import TokenStore
from issue_tracker.core.logging import get_logger

logger = get_logger(__name__)


class TransportError(Exception):
    """Network failure, timeout, 5xx, or a body that is not a GraphQL response."""


class GraphQLErrorInfo(BaseModel):
    message: str
    code: Optional[str] = None


class GraphQLResponse(BaseModel):
    data: Optional[dict[str, Any]] = None
    errors: list[GraphQLErrorInfo] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "GraphQLResponse":
        errors = [
            GraphQLErrorInfo(
                message=str(e.get("message", "")),
                code=(e.get("extensions") or {}).get("code"),
            )
            for e in body.get("errors") or []
        ]
        return cls(data=body.get("data"), errors=errors)


class GraphQLClient:
    def __init__(
        self,
        url: str,
        token_store: TokenStore,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.token_store = token_store
        self.timeout = timeout
        # Injected transport (e.g. httpx.ASGITransport) for in-process use
        self.transport = transport

    @classmethod
    def from_settings(cls, token_store: TokenStore) -> "GraphQLClient":
        from issue_tracker.config import get_settings

        settings = get_settings()
        return cls(settings.api_url, token_store, timeout=settings.api_request_timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> GraphQLResponse:
        """
        Send one operation. Returns the parsed response, GraphQL errors included.
        Raises TransportError when no GraphQL response could be obtained.
        """
        payload = {"query": query, "variables": variables or {}}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(self.url, json=payload, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning("graphql_transport_failed", extra={"graphql_response": {"error": str(e)}})
            raise TransportError(str(e)) from e

        if resp.status_code >= 500:
            raise TransportError(f"Server error: {resp.status_code}")
        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError(f"Invalid response body (status {resp.status_code})") from e
        if not isinstance(body, dict) or ("data" not in body and "errors" not in body):
            raise TransportError(f"Not a GraphQL response (status {resp.status_code})")

        result = GraphQLResponse.from_body(body)
        if result.errors:
            logger.info(
                "graphql_errors",
                extra={"graphql_response": {"errors": [e.model_dump() for e in result.errors]}},
            )
        return result
