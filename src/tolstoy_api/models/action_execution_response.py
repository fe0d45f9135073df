from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="ActionExecutionResponse")


@_attrs_define
class ActionExecutionResponse(AdditionalProperties):
    """Result of executing a single action

    Attributes:
        success (bool | Unset):
        execution_id (str | Unset): Example: exec_abc123.
        duration (float | Unset): Duration in milliseconds
        data (Any | Unset): Action execution result
        outputs (dict[str, Any] | Unset): Additional output data from the action
    """

    success: bool | Unset = UNSET
    execution_id: str | Unset = UNSET
    duration: float | Unset = UNSET
    data: Any | Unset = UNSET
    outputs: dict[str, Any] | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        if not isinstance(self.success, Unset):
            field_dict["success"] = self.success
        if not isinstance(self.execution_id, Unset):
            field_dict["executionId"] = self.execution_id
        if not isinstance(self.duration, Unset):
            field_dict["duration"] = self.duration
        if not isinstance(self.data, Unset):
            field_dict["data"] = self.data
        if not isinstance(self.outputs, Unset):
            field_dict["outputs"] = self.outputs

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        action_execution_response = cls(
            success=d.pop("success", UNSET),
            execution_id=d.pop("executionId", UNSET),
            duration=d.pop("duration", UNSET),
            data=d.pop("data", UNSET),
            outputs=d.pop("outputs", UNSET),
        )

        action_execution_response.additional_properties = d
        return action_execution_response
