from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="Webhook")


@_attrs_define
class Webhook(AdditionalProperties):
    """
    Attributes:
        id (str):
        org_id (str | Unset):
        name (str | Unset):
        url (str | Unset):
        event_types (list[str] | Unset):
        enabled (bool | Unset):
        created_at (str | Unset):
        updated_at (str | Unset):
    """

    id: str
    org_id: str | Unset = UNSET
    name: str | Unset = UNSET
    url: str | Unset = UNSET
    event_types: list[str] | Unset = UNSET
    enabled: bool | Unset = UNSET
    created_at: str | Unset = UNSET
    updated_at: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict["id"] = self.id
        if not isinstance(self.org_id, Unset):
            field_dict["orgId"] = self.org_id
        if not isinstance(self.name, Unset):
            field_dict["name"] = self.name
        if not isinstance(self.url, Unset):
            field_dict["url"] = self.url
        if not isinstance(self.event_types, Unset):
            field_dict["eventTypes"] = self.event_types
        if not isinstance(self.enabled, Unset):
            field_dict["enabled"] = self.enabled
        if not isinstance(self.created_at, Unset):
            field_dict["createdAt"] = self.created_at
        if not isinstance(self.updated_at, Unset):
            field_dict["updatedAt"] = self.updated_at

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        webhook = cls(
            id=d.pop("id"),
            org_id=d.pop("orgId", UNSET),
            name=d.pop("name", UNSET),
            url=d.pop("url", UNSET),
            event_types=d.pop("eventTypes", UNSET),
            enabled=d.pop("enabled", UNSET),
            created_at=d.pop("createdAt", UNSET),
            updated_at=d.pop("updatedAt", UNSET),
        )

        webhook.additional_properties = d
        return webhook
