from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="Action")


@_attrs_define
class Action(AdditionalProperties):
    """A single call against a tool's API

    Attributes:
        id (str):
        key (str | Unset): Action key used to execute it Example: send_slack_message.
        name (str | Unset):
        tool_id (str | Unset):
        method (str | Unset): HTTP method Example: POST.
        endpoint (str | Unset): Path relative to the tool's base URL
        input_schema (list[dict[str, Any]] | Unset):
        execute_if (dict[str, Any] | str | Unset):
        created_at (str | Unset):
        updated_at (str | Unset):
    """

    id: str
    key: str | Unset = UNSET
    name: str | Unset = UNSET
    tool_id: str | Unset = UNSET
    method: str | Unset = UNSET
    endpoint: str | Unset = UNSET
    input_schema: list[dict[str, Any]] | Unset = UNSET
    execute_if: dict[str, Any] | str | Unset = UNSET
    created_at: str | Unset = UNSET
    updated_at: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict["id"] = self.id
        if not isinstance(self.key, Unset):
            field_dict["key"] = self.key
        if not isinstance(self.name, Unset):
            field_dict["name"] = self.name
        if not isinstance(self.tool_id, Unset):
            field_dict["toolId"] = self.tool_id
        if not isinstance(self.method, Unset):
            field_dict["method"] = self.method
        if not isinstance(self.endpoint, Unset):
            field_dict["endpoint"] = self.endpoint
        if not isinstance(self.input_schema, Unset):
            field_dict["inputSchema"] = self.input_schema
        if not isinstance(self.execute_if, Unset):
            field_dict["executeIf"] = self.execute_if
        if not isinstance(self.created_at, Unset):
            field_dict["createdAt"] = self.created_at
        if not isinstance(self.updated_at, Unset):
            field_dict["updatedAt"] = self.updated_at

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        action = cls(
            id=d.pop("id"),
            key=d.pop("key", UNSET),
            name=d.pop("name", UNSET),
            tool_id=d.pop("toolId", UNSET),
            method=d.pop("method", UNSET),
            endpoint=d.pop("endpoint", UNSET),
            input_schema=d.pop("inputSchema", UNSET),
            execute_if=d.pop("executeIf", UNSET),
            created_at=d.pop("createdAt", UNSET),
            updated_at=d.pop("updatedAt", UNSET),
        )

        action.additional_properties = d
        return action
