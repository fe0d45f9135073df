from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="Flow")


@_attrs_define
class Flow(AdditionalProperties):
    """A workflow definition stored for an organization

    Attributes:
        id (str): Flow identifier Example: flow_abc123.
        org_id (str | Unset):
        name (str | Unset):
        description (str | Unset):
        version (int | Unset):
        steps (list[dict[str, Any]] | Unset): Workflow steps definition
        settings (dict[str, Any] | Unset): Flow execution settings
        created_at (str | Unset):
        updated_at (str | Unset):
    """

    id: str
    org_id: str | Unset = UNSET
    name: str | Unset = UNSET
    description: str | Unset = UNSET
    version: int | Unset = UNSET
    steps: list[dict[str, Any]] | Unset = UNSET
    settings: dict[str, Any] | Unset = UNSET
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
        if not isinstance(self.description, Unset):
            field_dict["description"] = self.description
        if not isinstance(self.version, Unset):
            field_dict["version"] = self.version
        if not isinstance(self.steps, Unset):
            field_dict["steps"] = self.steps
        if not isinstance(self.settings, Unset):
            field_dict["settings"] = self.settings
        if not isinstance(self.created_at, Unset):
            field_dict["createdAt"] = self.created_at
        if not isinstance(self.updated_at, Unset):
            field_dict["updatedAt"] = self.updated_at

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        flow = cls(
            id=d.pop("id"),
            org_id=d.pop("orgId", UNSET),
            name=d.pop("name", UNSET),
            description=d.pop("description", UNSET),
            version=d.pop("version", UNSET),
            steps=d.pop("steps", UNSET),
            settings=d.pop("settings", UNSET),
            created_at=d.pop("createdAt", UNSET),
            updated_at=d.pop("updatedAt", UNSET),
        )

        flow.additional_properties = d
        return flow
