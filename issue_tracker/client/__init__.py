from issue_tracker.client.forms import SignInForm, SignUpForm, SubmitState
from issue_tracker.client.gateway import AuthFailure, AuthFailureReason, AuthGateway, AuthResult, AuthSuccess
from issue_tracker.client.issues import ApiError, IssuesClient, IssueView
from issue_tracker.client.navigation import Navigator, Route
from issue_tracker.client.token_store import FileTokenStore, MemoryTokenStore, TokenStore
from issue_tracker.client.transport import GraphQLClient, TransportError

__all__ = [
    "SignInForm",
    "SignUpForm",
    "SubmitState",
    "AuthFailure",
    "AuthFailureReason",
    "AuthGateway",
    "AuthResult",
    "AuthSuccess",
    "ApiError",
    "IssuesClient",
    "IssueView",
    "Navigator",
    "Route",
    "FileTokenStore",
    "MemoryTokenStore",
    "TokenStore",
    "GraphQLClient",
    "TransportError",
]
