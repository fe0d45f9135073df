from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ._base import AdditionalProperties

T = TypeVar("T", bound="CreateToolRequest")


@_attrs_define
class CreateToolRequest(AdditionalProperties):
    """
    Attributes:
        name (str): Tool name Example: Slack Notifier.
        base_url (str): Base URL for the tool API Example: https://hooks.slack.com/services.
        auth_type (str): Authentication type (apiKey, oauth2, basic) Example: apiKey.
    """

    name: str
    base_url: str
    auth_type: str
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "name": self.name,
                "baseUrl": self.base_url,
                "authType": self.auth_type,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        name = d.pop("name")

        base_url = d.pop("baseUrl")

        auth_type = d.pop("authType")

        create_tool_request = cls(
            name=name,
            base_url=base_url,
            auth_type=auth_type,
        )

        create_tool_request.additional_properties = d
        return create_tool_request
