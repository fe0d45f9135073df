# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

"""Async HTTP client for the Tolstoy workflow-automation API.

This package provides a thin wrapper around the generated tolstoy_api client
that attaches tenant headers to every request and exposes one helper per
commonly used endpoint.

Example:
    ```python
    from tolstoy_client import TolstoyClient

    async with TolstoyClient("https://api.tolstoy.io", "org-1", "user-1", "token") as client:
        flows = await client.list_flows()
        execution = await client.run_flow(flows[0].id, {"email": "user@example.com"})
        print(f"Status: {execution.status}")
    ```

For the low-level generated API client, use `tolstoy_api` directly or the
`raw` property of a client:
    ```python
    from tolstoy_api import Client
    from tolstoy_api.api import flows
    from tolstoy_api.models import Flow
    ```
"""

from tolstoy_api import UNSET, Response, UnexpectedStatus, Unset

# Re-export the generated types for convenience
from tolstoy_api.models import (
    Action,
    ActionExecutionResponse,
    AuthConfigResponse,
    AuthConfigType,
    CreateAuthConfigRequest,
    CreateToolRequest,
    CreateWebhookRequest,
    ExecuteActionRequest,
    ExecuteFlowRequest,
    Flow,
    FlowExecutionResponse,
    HealthStatus,
    Organization,
    Tool,
    Webhook,
)

from .client import TolstoyClient
from .config import ClientConfig, build_headers
from .exceptions import ConfigurationError, TolstoyClientError

__version__ = "0.1.0"

__all__ = [
    # Client
    "TolstoyClient",
    "ClientConfig",
    "build_headers",
    # Errors
    "ConfigurationError",
    "TolstoyClientError",
    "UnexpectedStatus",
    # Generated types
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
    "Response",
    "Tool",
    "UNSET",
    "Unset",
    "Webhook",
]
