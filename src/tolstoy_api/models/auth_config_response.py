from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="AuthConfigResponse")


@_attrs_define
class AuthConfigResponse(AdditionalProperties):
    """Stored authentication configuration for a tool

    Attributes:
        id (str):
        org_id (str | Unset):
        tool_id (str | Unset):
        type_ (str | Unset): ``apiKey`` or ``oauth2``
        config (dict[str, Any] | Unset): Sensitive values may be masked
        created_at (str | Unset):
        updated_at (str | Unset):
    """

    id: str
    org_id: str | Unset = UNSET
    tool_id: str | Unset = UNSET
    type_: str | Unset = UNSET
    config: dict[str, Any] | Unset = UNSET
    created_at: str | Unset = UNSET
    updated_at: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict["id"] = self.id
        if not isinstance(self.org_id, Unset):
            field_dict["orgId"] = self.org_id
        if not isinstance(self.tool_id, Unset):
            field_dict["toolId"] = self.tool_id
        if not isinstance(self.type_, Unset):
            field_dict["type"] = self.type_
        if not isinstance(self.config, Unset):
            field_dict["config"] = self.config
        if not isinstance(self.created_at, Unset):
            field_dict["createdAt"] = self.created_at
        if not isinstance(self.updated_at, Unset):
            field_dict["updatedAt"] = self.updated_at

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        auth_config_response = cls(
            id=d.pop("id"),
            org_id=d.pop("orgId", UNSET),
            tool_id=d.pop("toolId", UNSET),
            type_=d.pop("type", UNSET),
            config=d.pop("config", UNSET),
            created_at=d.pop("createdAt", UNSET),
            updated_at=d.pop("updatedAt", UNSET),
        )

        auth_config_response.additional_properties = d
        return auth_config_response
