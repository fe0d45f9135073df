from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="Tool")


@_attrs_define
class Tool(AdditionalProperties):
    """An integration the platform can call from flows and actions

    Attributes:
        id (str):
        org_id (str | Unset):
        name (str | Unset):
        base_url (str | Unset):
        auth_type (str | Unset):
        created_at (str | Unset):
        updated_at (str | Unset):
    """

    id: str
    org_id: str | Unset = UNSET
    name: str | Unset = UNSET
    base_url: str | Unset = UNSET
    auth_type: str | Unset = UNSET
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
        if not isinstance(self.base_url, Unset):
            field_dict["baseUrl"] = self.base_url
        if not isinstance(self.auth_type, Unset):
            field_dict["authType"] = self.auth_type
        if not isinstance(self.created_at, Unset):
            field_dict["createdAt"] = self.created_at
        if not isinstance(self.updated_at, Unset):
            field_dict["updatedAt"] = self.updated_at

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        tool = cls(
            id=d.pop("id"),
            org_id=d.pop("orgId", UNSET),
            name=d.pop("name", UNSET),
            base_url=d.pop("baseUrl", UNSET),
            auth_type=d.pop("authType", UNSET),
            created_at=d.pop("createdAt", UNSET),
            updated_at=d.pop("updatedAt", UNSET),
        )

        tool.additional_properties = d
        return tool
