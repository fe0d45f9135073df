"""Tool API endpoints."""

from ._base import Endpoint
from ..models import CreateToolRequest, Tool

create_tool = Endpoint("POST", "/tools", Tool, CreateToolRequest)
list_tools = Endpoint("GET", "/tools", Tool)
get_tool = Endpoint("GET", "/tools/{tool_id}", Tool)
update_tool = Endpoint("PUT", "/tools/{tool_id}", Tool)
delete_tool = Endpoint("DELETE", "/tools/{tool_id}")

__all__ = [
    "create_tool",
    "list_tools",
    "get_tool",
    "update_tool",
    "delete_tool",
]
