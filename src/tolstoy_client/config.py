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

"""Connection settings and tenant headers for the Tolstoy client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ConfigurationError

DEFAULT_TIMEOUT = 30.0

ORG_ID_HEADER = "x-org-id"
USER_ID_HEADER = "x-user-id"
AUTHORIZATION_HEADER = "Authorization"

# Accepted spellings for each field when configuring from a mapping
_FIELD_ALIASES = {
    "base_url": ("base_url", "baseURL", "baseUrl"),
    "org_id": ("org_id", "orgId", "organizationId", "organization_id"),
    "user_id": ("user_id", "userId"),
    "token": ("token", "authToken", "auth_token", "api_key", "apiKey"),
    "timeout": ("timeout",),
}


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a Tolstoy client.

    Attributes:
        base_url: Base URL of the Tolstoy API (e.g., "https://api.tolstoy.io")
        org_id: Organization sent as ``x-org-id``
        user_id: User sent as ``x-user-id``
        token: API key or access token sent as a bearer token
        timeout: Request timeout in seconds
    """

    base_url: str
    org_id: str | None = None
    user_id: str | None = None
    token: str | None = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ConfigurationError("base_url is required")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> ClientConfig:
        """Build a config from a dict using snake_case or camelCase keys."""
        known = {alias for aliases in _FIELD_ALIASES.values() for alias in aliases}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if values.get(alias) is not None:
                    kwargs[name] = values[alias]
                    break

        if "base_url" not in kwargs:
            raise ConfigurationError("base_url is required")
        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``TOLSTOY_*`` environment variables.

        Reads ``TOLSTOY_API_URL`` (or ``API_BASE_URL``), ``TOLSTOY_ORG_ID``,
        ``TOLSTOY_USER_ID`` and ``TOLSTOY_API_KEY`` (or ``API_KEY``).

        Raises:
            ConfigurationError: If no API URL is set
        """
        env = os.environ if environ is None else environ
        base_url = env.get("TOLSTOY_API_URL") or env.get("API_BASE_URL")
        if not base_url:
            raise ConfigurationError(
                "TOLSTOY_API_URL (or API_BASE_URL) environment variable is not set"
            )
        return cls(
            base_url=base_url,
            org_id=env.get("TOLSTOY_ORG_ID") or None,
            user_id=env.get("TOLSTOY_USER_ID") or None,
            token=env.get("TOLSTOY_API_KEY") or env.get("API_KEY") or None,
        )


def build_headers(config: ClientConfig) -> dict[str, str]:
    """Derive the tenant headers sent with every request.

    Each header is present only when its setting is a non-empty string.
    """
    headers: dict[str, str] = {}
    if config.org_id:
        headers[ORG_ID_HEADER] = config.org_id
    if config.user_id:
        headers[USER_ID_HEADER] = config.user_id
    if config.token:
        headers[AUTHORIZATION_HEADER] = f"Bearer {config.token}"
    return headers


def resolve_config(
    config_or_base_url: ClientConfig | Mapping[str, Any] | str | None,
    org_id: str | None = None,
    user_id: str | None = None,
    token: str | None = None,
) -> ClientConfig:
    """Normalize either construction shape into a ``ClientConfig``.

    Args:
        config_or_base_url: A ``ClientConfig``, a mapping of settings, or the
            base URL of the legacy positional form
        org_id: Legacy positional organization ID
        user_id: Legacy positional user ID
        token: Legacy positional API token

    Raises:
        ConfigurationError: If the base URL is missing or empty, or if a config
            object is combined with positional credentials
    """
    legacy_args = (org_id, user_id, token)

    if isinstance(config_or_base_url, (ClientConfig, Mapping)):
        if any(arg is not None for arg in legacy_args):
            raise ConfigurationError(
                "Pass credentials either in the config object or positionally, not both"
            )
        if isinstance(config_or_base_url, ClientConfig):
            return config_or_base_url
        return ClientConfig.from_mapping(config_or_base_url)

    if config_or_base_url is None or isinstance(config_or_base_url, str):
        return ClientConfig(
            base_url=config_or_base_url or "",
            org_id=org_id,
            user_id=user_id,
            token=token,
        )

    raise ConfigurationError(
        f"Expected a ClientConfig, a mapping or a base URL, got {type(config_or_base_url).__name__}"
    )
