from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ._base import AdditionalProperties

T = TypeVar("T", bound="ExecuteActionRequest")


@_attrs_define
class ExecuteActionRequest(AdditionalProperties):
    """Action execution inputs

    Attributes:
        inputs (dict[str, Any]): Inputs matching the action's inputSchema
    """

    inputs: dict[str, Any]
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "inputs": self.inputs,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        inputs = d.pop("inputs")

        execute_action_request = cls(
            inputs=inputs,
        )

        execute_action_request.additional_properties = d
        return execute_action_request
