"""Action API endpoints."""

from ._base import Endpoint
from ..models import Action, ActionExecutionResponse, ExecuteActionRequest

create_action = Endpoint("POST", "/actions", Action)
list_actions = Endpoint("GET", "/actions", Action)
get_action = Endpoint("GET", "/actions/{action_id}", Action)
update_action = Endpoint("PUT", "/actions/{action_id}", Action)
delete_action = Endpoint("DELETE", "/actions/{action_id}")
execute_action = Endpoint(
    "POST", "/actions/{action_key}/execute", ActionExecutionResponse, ExecuteActionRequest
)
list_executions = Endpoint("GET", "/actions/executions")
list_action_executions = Endpoint("GET", "/actions/{action_key}/executions")
get_execution_status = Endpoint("GET", "/actions/executions/{execution_id}")
cancel_execution = Endpoint("POST", "/actions/executions/{execution_id}/cancel")
retry_execution = Endpoint("POST", "/actions/executions/{execution_id}/retry")

__all__ = [
    "create_action",
    "list_actions",
    "get_action",
    "update_action",
    "delete_action",
    "execute_action",
    "list_executions",
    "list_action_executions",
    "get_execution_status",
    "cancel_execution",
    "retry_execution",
]
