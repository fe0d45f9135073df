"""Tool authentication endpoints."""

from ._base import Endpoint
from ..models import AuthConfigResponse, CreateAuthConfigRequest

upsert_tool_auth = Endpoint(
    "POST", "/tools/{tool_id}/auth", AuthConfigResponse, CreateAuthConfigRequest
)
get_tool_auth = Endpoint("GET", "/tools/{tool_id}/auth", AuthConfigResponse)
delete_tool_auth = Endpoint("DELETE", "/tools/{tool_id}/auth")

__all__ = [
    "upsert_tool_auth",
    "get_tool_auth",
    "delete_tool_auth",
]
