"""Thin declarative API layer for HTTP endpoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from urllib.parse import quote

import httpx

from .. import errors
from ..client import Client
from ..types import UNSET, Response, Unset, to_status

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


@dataclass
class Endpoint(Generic[RequestT, ResponseT]):
    """Declarative endpoint definition.

    Usage:
        get_flow = Endpoint("GET", "/flows/{flow_id}", Flow)
        execute_flow = Endpoint("POST", "/flows/{flow_id}/execute",
                                FlowExecutionResponse, ExecuteFlowRequest)
        list_webhooks = Endpoint("GET", "/webhooks", Webhook, query_params=["event_type"])

    Keyword arguments matching a ``{placeholder}`` in the path fill the path,
    names listed in ``query_params`` go to the query string (snake_case is
    sent as camelCase unless ``query_aliases`` says otherwise), and whatever
    is left becomes the JSON body when no typed ``body`` is given.

    Successful responses are parsed into ``response_type`` (a JSON array
    becomes a list of it). Without a ``response_type`` the decoded JSON, or
    the text for non-JSON bodies, is returned. When ``returns_location`` is
    set, a redirect counts as success and its ``Location`` header is the
    parsed result.
    """

    method: str
    path: str
    response_type: type[ResponseT] | None = None
    request_type: type[RequestT] | None = None
    query_params: list[str] = field(default_factory=list)
    query_aliases: dict[str, str] = field(default_factory=dict)
    returns_location: bool = False

    def _is_path_param(self, key: str) -> bool:
        return f"{{{key}}}" in self.path

    def _build_url(self, **path_params: Any) -> str:
        """Build URL with path parameters."""
        url = self.path
        for key, value in path_params.items():
            url = url.replace(f"{{{key}}}", quote(str(value), safe=""))
        return url

    def _build_query(self, **query_params: Any) -> dict[str, Any]:
        """Build query parameters, excluding UNSET values."""
        params = {}
        for key in self.query_params:
            value = query_params.get(key, UNSET)
            if isinstance(value, Unset) or value is None:
                continue
            if hasattr(value, "value"):
                value = value.value
            api_key = self.query_aliases.get(key) or "".join(
                word.capitalize() if i > 0 else word for i, word in enumerate(key.split("_"))
            )
            params[api_key] = value
        return params

    def _prepare_body(self, body: RequestT | None, kwargs: dict[str, Any]) -> Any | None:
        """Prepare request body from typed body or raw kwargs."""
        if body is not None:
            if hasattr(body, "to_dict"):
                return body.to_dict()  # type: ignore
            if isinstance(body, Mapping):
                return dict(body)
            return body

        body_params = {
            k: v
            for k, v in kwargs.items()
            if k not in self.query_params and not self._is_path_param(k)
        }
        if body_params:
            return body_params

        return None

    def _build_request(
        self,
        body: RequestT | None,
        headers: Mapping[str, str] | None,
        kwargs: dict[str, Any],
    ) -> dict[str, Any]:
        path_params = {k: v for k, v in kwargs.items() if self._is_path_param(k)}
        query_params = {k: v for k, v in kwargs.items() if k in self.query_params}

        request_kwargs: dict[str, Any] = {
            "method": self.method,
            "url": self._build_url(**path_params),
        }

        if query_params:
            request_kwargs["params"] = self._build_query(**query_params)

        request_headers: dict[str, str] = {}
        body_json = self._prepare_body(body, kwargs)
        if body_json is not None:
            request_kwargs["json"] = body_json
            request_headers["Content-Type"] = "application/json"

        if headers:
            request_headers.update(headers)
        if request_headers:
            request_kwargs["headers"] = request_headers

        return request_kwargs

    def _is_success(self, response: httpx.Response) -> bool:
        if response.is_success:
            return True
        return self.returns_location and response.is_redirect

    def _parse_response(self, response: httpx.Response) -> Any:
        """Parse a successful response."""
        if self.returns_location and response.is_redirect:
            return response.headers.get("location")

        if not response.content:
            return None

        content_type = response.headers.get("content-type", "")
        if "json" not in content_type:
            return response.text

        data = response.json()
        if self.response_type is None:
            return data
        if isinstance(data, list):
            return [self.response_type.from_dict(item) for item in data]  # type: ignore
        return self.response_type.from_dict(data)  # type: ignore

    def _build_response(
        self, client: Client, url: str, response: httpx.Response
    ) -> Response[Any]:
        logger.debug("%s %s -> %s", self.method, url, response.status_code)

        if not self._is_success(response):
            if client.raise_on_unexpected_status:
                raise errors.UnexpectedStatus(response.status_code, response.content)
            parsed = None
        else:
            parsed = self._parse_response(response)

        return Response(
            status_code=to_status(response.status_code),
            content=response.content,
            headers=dict(response.headers),
            parsed=parsed,
        )

    def sync_detailed(
        self,
        *,
        client: Client,
        body: RequestT | None = None,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> Response[Any]:
        """Execute synchronous request with full response.

        Raises:
            errors.UnexpectedStatus: If the server returns a non-success status code
                and Client.raise_on_unexpected_status is True.
            httpx.TimeoutException: If the request takes longer than Client.timeout.
        """
        request_kwargs = self._build_request(body, headers, kwargs)
        response = client.get_httpx_client().request(**request_kwargs)
        return self._build_response(client, request_kwargs["url"], response)

    def sync(
        self,
        *,
        client: Client,
        body: RequestT | None = None,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Execute synchronous request, return parsed response."""
        return self.sync_detailed(client=client, body=body, headers=headers, **kwargs).parsed

    async def asyncio_detailed(
        self,
        *,
        client: Client,
        body: RequestT | None = None,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> Response[Any]:
        """Execute async request with full response.

        Raises:
            errors.UnexpectedStatus: If the server returns a non-success status code
                and Client.raise_on_unexpected_status is True.
            httpx.TimeoutException: If the request takes longer than Client.timeout.
        """
        request_kwargs = self._build_request(body, headers, kwargs)
        response = await client.get_async_httpx_client().request(**request_kwargs)
        return self._build_response(client, request_kwargs["url"], response)

    async def asyncio(
        self,
        *,
        client: Client,
        body: RequestT | None = None,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Execute async request, return parsed response."""
        response = await self.asyncio_detailed(client=client, body=body, headers=headers, **kwargs)
        return response.parsed
