"""Contains all the data models used in inputs/outputs"""

from .action import Action
from .action_execution_response import ActionExecutionResponse
from .auth_config_response import AuthConfigResponse
from .auth_config_type import AuthConfigType
from .create_auth_config_request import CreateAuthConfigRequest
from .create_tool_request import CreateToolRequest
from .create_webhook_request import CreateWebhookRequest
from .execute_action_request import ExecuteActionRequest
from .execute_flow_request import ExecuteFlowRequest
from .flow import Flow
from .flow_execution_response import FlowExecutionResponse
from .health_status import HealthStatus
from .organization import Organization
from .tool import Tool
from .webhook import Webhook

__all__ = (
    "Action",
    "ActionExecutionResponse",
    "AuthConfigResponse",
    "AuthConfigType",
    "CreateAuthConfigRequest",
    "CreateToolRequest",
    "CreateWebhookRequest",
    "ExecuteActionRequest",
    "ExecuteFlowRequest",
    "Flow",
    "FlowExecutionResponse",
    "HealthStatus",
    "Organization",
    "Tool",
    "Webhook",
)
