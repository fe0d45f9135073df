from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="CreateWebhookRequest")


@_attrs_define
class CreateWebhookRequest(AdditionalProperties):
    """
    Attributes:
        name (str): Webhook name (3 to 100 characters)
        url (str): Target URL, http or https
        event_types (list[str]): Events that trigger the webhook
        enabled (bool | Unset):
        secret (str | Unset): Signing secret, at least 16 characters
    """

    name: str
    url: str
    event_types: list[str]
    enabled: bool | Unset = UNSET
    secret: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "name": self.name,
                "url": self.url,
                "eventTypes": list(self.event_types),
            }
        )
        if not isinstance(self.enabled, Unset):
            field_dict["enabled"] = self.enabled
        if not isinstance(self.secret, Unset):
            field_dict["secret"] = self.secret

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        name = d.pop("name")

        url = d.pop("url")

        event_types = cast(list[str], d.pop("eventTypes"))

        enabled = d.pop("enabled", UNSET)

        secret = d.pop("secret", UNSET)

        create_webhook_request = cls(
            name=name,
            url=url,
            event_types=event_types,
            enabled=enabled,
            secret=secret,
        )

        create_webhook_request.additional_properties = d
        return create_webhook_request
