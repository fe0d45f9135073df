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

"""Async facade over the generated Tolstoy API client.

Every helper forwards to exactly one endpoint of ``tolstoy_api`` and returns
its parsed result unchanged. Errors from the server or the network propagate
as raised by the generated layer; only construction can fail here, with
``ConfigurationError``.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
import yaml

from tolstoy_api import Client
from tolstoy_api.api import (
    actions,
    flows,
    health,
    oauth,
    organizations,
    tool_auth,
    tools,
    webhooks,
)
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

from .config import (
    ORG_ID_HEADER,
    USER_ID_HEADER,
    ClientConfig,
    build_headers,
    resolve_config,
)

logger = logging.getLogger(__name__)

STATUS_HEADER = "X-Status"


def _inputs_or_empty(inputs: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return {} if inputs is None else inputs


class TolstoyClient:
    """Client for the Tolstoy workflow-automation API.

    Accepts either a configuration object or the legacy positional form:

        ```python
        client = TolstoyClient(ClientConfig("https://api.tolstoy.io", org_id="org-1", token="t"))
        client = TolstoyClient({"baseURL": "https://api.tolstoy.io", "orgId": "org-1"})
        client = TolstoyClient("https://api.tolstoy.io", "org-1", "user-1", "t")
        ```

    Every request carries the tenant headers derived from the configuration
    (``x-org-id``, ``x-user-id``, ``Authorization: Bearer ...``).

    Example:
        ```python
        async with TolstoyClient.from_env() as client:
            execution = await client.run_flow("flow_abc123", {"email": "user@example.com"})
            status = await client.get_flow_execution("flow_abc123", execution.execution_id)

            # Routes without a helper go through the raw client
            response = await client.raw.get("/tools/secrets")
        ```
    """

    def __init__(
        self,
        config_or_base_url: ClientConfig | Mapping[str, Any] | str | None = None,
        org_id: str | None = None,
        user_id: str | None = None,
        token: str | None = None,
        *,
        timeout: float | None = None,
    ):
        """Initialize the Tolstoy client.

        Args:
            config_or_base_url: A ``ClientConfig``, a mapping of settings, or the base URL
            org_id: Organization ID (legacy positional form only)
            user_id: User ID (legacy positional form only)
            token: API token (legacy positional form only)
            timeout: Optional override of the configured request timeout in seconds

        Raises:
            ConfigurationError: If the base URL is missing or empty, or the
                arguments mix both construction forms
        """
        config = resolve_config(config_or_base_url, org_id, user_id, token)
        if timeout is not None:
            config = dataclasses.replace(config, timeout=timeout)

        self._config = config
        self._headers = build_headers(config)
        self._client = Client(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout),
            headers=self._headers,
            raise_on_unexpected_status=True,
        )
        logger.debug(
            "Created Tolstoy client for %s (org=%s, user=%s, authenticated=%s)",
            config.base_url,
            config.org_id,
            config.user_id,
            bool(config.token),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TolstoyClient:
        """Create a client from ``TOLSTOY_*`` environment variables."""
        return cls(ClientConfig.from_env(environ))

    @property
    def config(self) -> ClientConfig:
        """The normalized connection settings."""
        return self._config

    @property
    def base_url(self) -> str:
        return self._client.base_url

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the tenant headers attached to every request."""
        return dict(self._headers)

    @property
    def raw(self) -> Client:
        """Access the low-level generated API client.

        Use it for endpoints without a helper, either through the generated
        endpoint objects or the generic HTTP verbs. Tenant headers are already
        applied.

        Example:
            ```python
            from tolstoy_api.api import flows

            detailed = await flows.get_flow.asyncio_detailed(client=client.raw, flow_id="flow_1")
            secrets = await client.raw.get("/tools/secrets")
            ```
        """
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> TolstoyClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _load_flow(self, flow: str | Path | Mapping[str, Any]) -> dict[str, Any]:
        """Load a flow from file path or return as-is if already a mapping.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        if isinstance(flow, Mapping):
            return dict(flow)
        path = Path(flow)
        if not path.exists():
            raise FileNotFoundError(f"Flow file not found: {path}")
        with open(path) as f:
            return yaml.safe_load(f)

    # =========================================================================
    # Flow endpoints
    # =========================================================================

    async def create_flow(self, flow: str | Path | Mapping[str, Any]) -> Flow:
        """Create a flow.

        Args:
            flow: Flow definition, or path to a YAML/JSON file containing one
        """
        return await flows.create_flow.asyncio(client=self._client, body=self._load_flow(flow))

    async def list_flows(self) -> list[Flow]:
        return await flows.list_flows.asyncio(client=self._client)

    async def get_flow(self, flow_id: str) -> Flow:
        return await flows.get_flow.asyncio(client=self._client, flow_id=flow_id)

    async def update_flow(self, flow_id: str, changes: Mapping[str, Any]) -> Flow:
        return await flows.update_flow.asyncio(client=self._client, flow_id=flow_id, body=changes)

    async def delete_flow(self, flow_id: str) -> Any:
        return await flows.delete_flow.asyncio(client=self._client, flow_id=flow_id)

    async def run_flow(
        self,
        flow_id: str,
        inputs: Mapping[str, Any] | None,
        use_durable: bool = True,
    ) -> FlowExecutionResponse:
        """Execute a flow.

        Args:
            flow_id: The flow to execute
            inputs: Input variables for the execution
            use_durable: Run as a durable (queued) execution rather than inline

        Returns:
            FlowExecutionResponse with the execution ID and initial status
        """
        request = ExecuteFlowRequest(variables=_inputs_or_empty(inputs), use_durable=use_durable)
        return await flows.execute_flow.asyncio(client=self._client, flow_id=flow_id, body=request)

    async def run_flow_with_auth(
        self,
        flow_id: str,
        inputs: Mapping[str, Any] | None,
        use_durable: bool = True,
        *,
        org_id: str | None = None,
        user_id: str | None = None,
    ) -> FlowExecutionResponse:
        """Execute a flow on behalf of another organization or user.

        ``org_id`` and ``user_id``, when given, replace the client's own tenant
        headers for this call only, so user-scoped tool credentials resolve
        for that user.
        """
        overrides: dict[str, str] = {}
        if org_id:
            overrides[ORG_ID_HEADER] = org_id
        if user_id:
            overrides[USER_ID_HEADER] = user_id

        request = ExecuteFlowRequest(variables=_inputs_or_empty(inputs), use_durable=use_durable)
        return await flows.execute_flow.asyncio(
            client=self._client, flow_id=flow_id, body=request, headers=overrides
        )

    async def list_flow_executions(self, flow_id: str) -> list[FlowExecutionResponse]:
        return await flows.list_flow_executions.asyncio(client=self._client, flow_id=flow_id)

    async def get_flow_execution(self, flow_id: str, execution_id: str) -> FlowExecutionResponse:
        return await flows.get_execution_status.asyncio(
            client=self._client, flow_id=flow_id, execution_id=execution_id
        )

    async def cancel_flow_execution(self, flow_id: str, execution_id: str) -> FlowExecutionResponse:
        return await flows.cancel_execution.asyncio(
            client=self._client, flow_id=flow_id, execution_id=execution_id
        )

    async def retry_flow_execution(self, flow_id: str, execution_id: str) -> FlowExecutionResponse:
        return await flows.retry_execution.asyncio(
            client=self._client, flow_id=flow_id, execution_id=execution_id
        )

    async def get_flow_metrics(self, flow_id: str) -> dict[str, Any]:
        return await flows.get_execution_metrics.asyncio(client=self._client, flow_id=flow_id)

    # =========================================================================
    # Tool endpoints
    # =========================================================================

    async def create_tool(self, tool: CreateToolRequest | Mapping[str, Any]) -> Tool:
        return await tools.create_tool.asyncio(client=self._client, body=tool)

    async def list_tools(self) -> list[Tool]:
        return await tools.list_tools.asyncio(client=self._client)

    async def get_tool(self, tool_id: str) -> Tool:
        return await tools.get_tool.asyncio(client=self._client, tool_id=tool_id)

    async def update_tool(self, tool_id: str, changes: Mapping[str, Any]) -> Tool:
        return await tools.update_tool.asyncio(client=self._client, tool_id=tool_id, body=changes)

    async def delete_tool(self, tool_id: str) -> Any:
        return await tools.delete_tool.asyncio(client=self._client, tool_id=tool_id)

    # =========================================================================
    # Tool authentication endpoints
    # =========================================================================

    async def upsert_tool_auth(
        self,
        tool_id: str,
        auth_type: AuthConfigType | str,
        config: Mapping[str, Any],
    ) -> AuthConfigResponse:
        """Create or replace the authentication config of a tool.

        Args:
            tool_id: The tool ID
            auth_type: ``"apiKey"`` or ``"oauth2"``
            config: e.g. ``{"apiKey": "...", "header": "X-API-Key"}`` or
                ``{"clientId": "...", "clientSecret": "...", "redirectUri": "..."}``
        """
        request = CreateAuthConfigRequest(type_=AuthConfigType(auth_type), config=dict(config))
        return await tool_auth.upsert_tool_auth.asyncio(
            client=self._client, tool_id=tool_id, body=request
        )

    async def get_tool_auth(self, tool_id: str) -> AuthConfigResponse:
        return await tool_auth.get_tool_auth.asyncio(client=self._client, tool_id=tool_id)

    async def delete_tool_auth(self, tool_id: str) -> Any:
        return await tool_auth.delete_tool_auth.asyncio(client=self._client, tool_id=tool_id)

    # =========================================================================
    # OAuth endpoints
    # =========================================================================

    async def initiate_oauth(self, tool_id: str, user_id: str | None = None) -> str | None:
        """Start an OAuth2 login for a tool.

        Args:
            tool_id: The tool ID
            user_id: User to authorize; defaults to the client's user ID

        Returns:
            The provider authorization URL to send the user to
        """
        return await oauth.initiate_login.asyncio(
            client=self._client, tool_id=tool_id, user_id=user_id or self._config.user_id
        )

    async def handle_oauth_callback(
        self,
        code: str,
        state: str,
        *,
        error: str | None = None,
        error_description: str | None = None,
    ) -> Any:
        """Forward an OAuth2 provider callback to the platform.

        Returns:
            The callback page returned by the server
        """
        return await oauth.handle_callback.asyncio(
            client=self._client,
            code=code,
            state=state,
            error=error,
            error_description=error_description,
        )

    # =========================================================================
    # Action endpoints
    # =========================================================================

    async def create_action(self, action: Mapping[str, Any]) -> Action:
        return await actions.create_action.asyncio(client=self._client, body=action)

    async def list_actions(self) -> list[Action]:
        return await actions.list_actions.asyncio(client=self._client)

    async def get_action(self, action_id: str) -> Action:
        return await actions.get_action.asyncio(client=self._client, action_id=action_id)

    async def update_action(self, action_id: str, changes: Mapping[str, Any]) -> Action:
        return await actions.update_action.asyncio(
            client=self._client, action_id=action_id, body=changes
        )

    async def delete_action(self, action_id: str) -> Any:
        return await actions.delete_action.asyncio(client=self._client, action_id=action_id)

    async def execute_action(
        self, action_key: str, inputs: Mapping[str, Any] | None
    ) -> ActionExecutionResponse:
        """Execute a single action outside of any flow.

        Args:
            action_key: Key (or ID) of the action
            inputs: Inputs matching the action's input schema
        """
        request = ExecuteActionRequest(inputs=_inputs_or_empty(inputs))
        return await actions.execute_action.asyncio(
            client=self._client, action_key=action_key, body=request
        )

    async def list_action_executions(
        self, action_key: str | None = None, status: str | None = None
    ) -> Any:
        """List action executions.

        Args:
            action_key: Only executions of this action
            status: Only executions in this status, e.g. ``"completed"`` or ``"failed"``
        """
        headers = {STATUS_HEADER: status} if status else None
        if action_key is None:
            return await actions.list_executions.asyncio(client=self._client, headers=headers)
        return await actions.list_action_executions.asyncio(
            client=self._client, action_key=action_key, headers=headers
        )

    async def get_action_execution(self, execution_id: str) -> Any:
        return await actions.get_execution_status.asyncio(
            client=self._client, execution_id=execution_id
        )

    async def cancel_action_execution(self, execution_id: str) -> Any:
        return await actions.cancel_execution.asyncio(
            client=self._client, execution_id=execution_id
        )

    async def retry_action_execution(self, execution_id: str) -> Any:
        return await actions.retry_execution.asyncio(
            client=self._client, execution_id=execution_id
        )

    # =========================================================================
    # Webhook endpoints
    # =========================================================================

    async def create_webhook(self, webhook: CreateWebhookRequest | Mapping[str, Any]) -> Webhook:
        return await webhooks.create_webhook.asyncio(client=self._client, body=webhook)

    async def list_webhooks(self, event_type: str | None = None) -> list[Webhook]:
        """List webhooks, optionally only those subscribed to ``event_type``."""
        return await webhooks.list_webhooks.asyncio(client=self._client, event_type=event_type)

    async def list_webhook_event_types(self) -> dict[str, Any]:
        return await webhooks.get_event_types.asyncio(client=self._client)

    async def get_webhook(self, webhook_id: str) -> Webhook:
        return await webhooks.get_webhook.asyncio(client=self._client, webhook_id=webhook_id)

    async def update_webhook(self, webhook_id: str, changes: Mapping[str, Any]) -> Webhook:
        return await webhooks.update_webhook.asyncio(
            client=self._client, webhook_id=webhook_id, body=changes
        )

    async def delete_webhook(self, webhook_id: str) -> Any:
        return await webhooks.delete_webhook.asyncio(client=self._client, webhook_id=webhook_id)

    async def toggle_webhook(self, webhook_id: str) -> Webhook:
        return await webhooks.toggle_webhook.asyncio(client=self._client, webhook_id=webhook_id)

    async def test_webhook(self, webhook_id: str) -> Any:
        """Send a test event to a webhook."""
        return await webhooks.test_webhook.asyncio(client=self._client, webhook_id=webhook_id)

    # =========================================================================
    # Organization endpoints
    # =========================================================================

    async def list_organizations(self) -> list[Organization]:
        return await organizations.list_organizations.asyncio(client=self._client)

    async def get_organization(self, org_id: str) -> Organization:
        return await organizations.get_organization.asyncio(client=self._client, org_id=org_id)

    # =========================================================================
    # Health endpoints
    # =========================================================================

    async def health(self) -> HealthStatus:
        """Check server health."""
        return await health.get_status.asyncio(client=self._client)
