"""Flow API endpoints."""

from ._base import Endpoint
from ..models import ExecuteFlowRequest, Flow, FlowExecutionResponse

# create/update take raw dict bodies, the flow schema is open-ended
create_flow = Endpoint("POST", "/flows", Flow)
list_flows = Endpoint("GET", "/flows", Flow)
get_flow = Endpoint("GET", "/flows/{flow_id}", Flow)
update_flow = Endpoint("PUT", "/flows/{flow_id}", Flow)
delete_flow = Endpoint("DELETE", "/flows/{flow_id}")
execute_flow = Endpoint(
    "POST", "/flows/{flow_id}/execute", FlowExecutionResponse, ExecuteFlowRequest
)
list_flow_executions = Endpoint("GET", "/flows/{flow_id}/executions", FlowExecutionResponse)
get_execution_status = Endpoint(
    "GET", "/flows/{flow_id}/executions/{execution_id}", FlowExecutionResponse
)
cancel_execution = Endpoint(
    "POST", "/flows/{flow_id}/executions/{execution_id}/cancel", FlowExecutionResponse
)
retry_execution = Endpoint(
    "POST", "/flows/{flow_id}/executions/{execution_id}/retry", FlowExecutionResponse
)
get_execution_metrics = Endpoint("GET", "/flows/{flow_id}/metrics")

__all__ = [
    "create_flow",
    "list_flows",
    "get_flow",
    "update_flow",
    "delete_flow",
    "execute_flow",
    "list_flow_executions",
    "get_execution_status",
    "cancel_execution",
    "retry_execution",
    "get_execution_metrics",
]
