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

"""Tests for the declarative Endpoint layer of tolstoy_api."""

import json

import httpx
import pytest
import respx

from tolstoy_api import UNSET, Client, UnexpectedStatus
from tolstoy_api.api._base import Endpoint
from tolstoy_api.api import flows, webhooks
from tolstoy_api.models import AuthConfigType, ExecuteFlowRequest, Flow

BASE_URL = "http://localhost:3000"


@pytest.fixture
def api_client():
    return Client(BASE_URL, headers={"x-org-id": "org-1"})


@pytest.fixture
def mock_api():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock


class TestEndpointRequestBuilding:
    def test_path_params_are_quoted(self):
        endpoint = Endpoint("GET", "/flows/{flow_id}")
        assert endpoint._build_url(flow_id="a/b c") == "/flows/a%2Fb%20c"

    def test_query_params_camel_case(self):
        endpoint = Endpoint("GET", "/webhooks", query_params=["event_type"])
        assert endpoint._build_query(event_type="flow.completed") == {"eventType": "flow.completed"}

    def test_query_aliases_keep_name(self):
        endpoint = Endpoint(
            "GET",
            "/auth/callback",
            query_params=["error_description"],
            query_aliases={"error_description": "error_description"},
        )
        assert endpoint._build_query(error_description="denied") == {"error_description": "denied"}

    def test_query_skips_none_and_unset(self):
        endpoint = Endpoint("GET", "/x", query_params=["a", "b", "c"])
        assert endpoint._build_query(a=None, b=UNSET) == {}

    def test_query_enum_values(self):
        endpoint = Endpoint("GET", "/x", query_params=["auth_type"])
        assert endpoint._build_query(auth_type=AuthConfigType.OAUTH2) == {"authType": "oauth2"}

    def test_typed_body(self):
        endpoint = Endpoint("POST", "/flows/{flow_id}/execute")
        body = endpoint._prepare_body(ExecuteFlowRequest(variables={"a": 1}), {})
        assert body == {"variables": {"a": 1}, "useDurable": True}

    def test_mapping_body(self):
        endpoint = Endpoint("PUT", "/flows/{flow_id}")
        assert endpoint._prepare_body({"version": 2}, {"flow_id": "f"}) == {"version": 2}

    def test_leftover_kwargs_become_body(self):
        endpoint = Endpoint("POST", "/flows/{flow_id}/x", query_params=["dry_run"])
        body = endpoint._prepare_body(None, {"flow_id": "f", "dry_run": True, "name": "n"})
        assert body == {"name": "n"}

    def test_no_body(self):
        endpoint = Endpoint("GET", "/flows/{flow_id}")
        assert endpoint._prepare_body(None, {"flow_id": "f"}) is None

    def test_build_request_merges_headers(self):
        endpoint = Endpoint("POST", "/flows")
        request = endpoint._build_request({"name": "n"}, {"x-user-id": "u"}, {})
        assert request["headers"] == {"Content-Type": "application/json", "x-user-id": "u"}
        assert request["json"] == {"name": "n"}
        assert "params" not in request


class TestEndpointExecution:
    async def test_asyncio_parses_model(self, api_client, mock_api):
        route = mock_api.get("/flows/flow-1").mock(
            return_value=httpx.Response(200, json={"id": "flow-1", "version": 2, "extra": "x"})
        )

        flow = await flows.get_flow.asyncio(client=api_client, flow_id="flow-1")

        assert isinstance(flow, Flow)
        assert flow.version == 2
        assert flow["extra"] == "x"
        assert route.calls.last.request.headers["x-org-id"] == "org-1"

    async def test_asyncio_detailed_keeps_status_and_content(self, api_client, mock_api):
        mock_api.post("/flows/flow-1/execute").mock(
            return_value=httpx.Response(202, json={"executionId": "e1", "status": "queued"})
        )

        response = await flows.execute_flow.asyncio_detailed(
            client=api_client, flow_id="flow-1", body=ExecuteFlowRequest(variables={})
        )

        assert response.status_code == 202
        assert json.loads(response.content)["executionId"] == "e1"
        assert response.parsed.execution_id == "e1"

    async def test_unregistered_success_status_kept_as_int(self, api_client, mock_api):
        mock_api.get("/flows/flow-1").mock(
            return_value=httpx.Response(299, json={"id": "flow-1"})
        )

        response = await flows.get_flow.asyncio_detailed(client=api_client, flow_id="flow-1")

        assert response.status_code == 299
        assert response.parsed.id == "flow-1"

    async def test_unexpected_status_raised(self, api_client, mock_api):
        mock_api.get("/flows/flow-1").mock(
            return_value=httpx.Response(500, json={"message": "boom"})
        )

        with pytest.raises(UnexpectedStatus) as exc_info:
            await flows.get_flow.asyncio(client=api_client, flow_id="flow-1")

        assert exc_info.value.status_code == 500
        assert b"boom" in exc_info.value.content

    async def test_unexpected_status_suppressed_when_disabled(self, mock_api):
        lenient = Client(BASE_URL, raise_on_unexpected_status=False)
        mock_api.get("/flows/flow-1").mock(return_value=httpx.Response(404, json={}))

        response = await flows.get_flow.asyncio_detailed(client=lenient, flow_id="flow-1")

        assert response.status_code == 404
        assert response.parsed is None

    async def test_redirect_is_error_without_returns_location(self, api_client, mock_api):
        mock_api.get("/flows").mock(
            return_value=httpx.Response(302, headers={"Location": "https://elsewhere"})
        )

        with pytest.raises(UnexpectedStatus):
            await flows.list_flows.asyncio(client=api_client)

    async def test_text_body_returned_as_text(self, api_client, mock_api):
        mock_api.post("/webhooks/wh-1/test").mock(
            return_value=httpx.Response(200, text="delivered")
        )

        assert await webhooks.test_webhook.asyncio(client=api_client, webhook_id="wh-1") == (
            "delivered"
        )

    def test_sync_request(self, api_client, mock_api):
        route = mock_api.get("/webhooks").mock(
            return_value=httpx.Response(200, json=[{"id": "wh-1"}, {"id": "wh-2"}])
        )

        result = webhooks.list_webhooks.sync(client=api_client, event_type="flow.failed")

        assert [webhook.id for webhook in result] == ["wh-1", "wh-2"]
        assert route.calls.last.request.url.params["eventType"] == "flow.failed"
        api_client.close()


class TestClient:
    def test_base_url_trailing_slash_removed(self):
        assert Client(f"{BASE_URL}/").base_url == BASE_URL

    def test_headers_are_copied(self):
        headers = {"x-org-id": "org-1"}
        client = Client(BASE_URL, headers=headers)
        headers["x-org-id"] = "changed"
        assert client.headers == {"x-org-id": "org-1"}

    def test_headers_are_read_only(self):
        client = Client(BASE_URL, headers={"x-org-id": "org-1"})
        with pytest.raises(TypeError):
            client.headers["x-org-id"] = "changed"  # type: ignore[index]
        with pytest.raises(AttributeError):
            client.headers = {}  # type: ignore[misc]
        assert client.get_httpx_client().headers["x-org-id"] == "org-1"
        client.close()

    def test_httpx_clients_are_reused(self):
        client = Client(BASE_URL)
        assert client.get_httpx_client() is client.get_httpx_client()
        assert client.get_async_httpx_client() is client.get_async_httpx_client()
        client.close()

    async def test_aclose_resets_async_client(self):
        client = Client(BASE_URL)
        client.get_async_httpx_client()
        await client.aclose()
        assert client._async_client is None

    async def test_patch_verb(self, mock_api):
        client = Client(BASE_URL)
        route = mock_api.patch("/webhooks/wh-1/toggle").mock(return_value=httpx.Response(200))

        response = await client.patch("/webhooks/wh-1/toggle")

        assert response.status_code == 200
        assert route.called
        await client.aclose()
