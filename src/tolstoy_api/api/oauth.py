"""OAuth2 endpoints."""

from ._base import Endpoint

# The server answers login with a 302 to the provider's authorize URL
initiate_login = Endpoint(
    "GET", "/auth/{tool_id}/login", query_params=["user_id"], returns_location=True
)
handle_callback = Endpoint(
    "GET",
    "/auth/callback",
    query_params=["code", "state", "error", "error_description"],
    query_aliases={"error_description": "error_description"},
)

__all__ = [
    "initiate_login",
    "handle_callback",
]
