from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="FlowExecutionResponse")


@_attrs_define
class FlowExecutionResponse(AdditionalProperties):
    """State of a flow execution

    Durable runs report ``executionId``; direct (non-durable) runs report the
    execution log ``id``. Both are surfaced through ``execution_id``.

    Attributes:
        execution_id (str | Unset): Example: exec_abc123.
        status (str | Unset): Example: running.
        mode (str | Unset): Example: durable.
        flow_id (str | Unset):
        outputs (dict[str, Any] | Unset):
        error (Any | Unset):
    """

    execution_id: str | Unset = UNSET
    status: str | Unset = UNSET
    mode: str | Unset = UNSET
    flow_id: str | Unset = UNSET
    outputs: dict[str, Any] | Unset = UNSET
    error: Any | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        if not isinstance(self.execution_id, Unset):
            field_dict["executionId"] = self.execution_id
        if not isinstance(self.status, Unset):
            field_dict["status"] = self.status
        if not isinstance(self.mode, Unset):
            field_dict["mode"] = self.mode
        if not isinstance(self.flow_id, Unset):
            field_dict["flowId"] = self.flow_id
        if not isinstance(self.outputs, Unset):
            field_dict["outputs"] = self.outputs
        if not isinstance(self.error, Unset):
            field_dict["error"] = self.error

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        execution_id = d.pop("executionId", UNSET)
        if isinstance(execution_id, Unset) and "id" in d:
            execution_id = d.pop("id")

        flow_execution_response = cls(
            execution_id=execution_id,
            status=d.pop("status", UNSET),
            mode=d.pop("mode", UNSET),
            flow_id=d.pop("flowId", UNSET),
            outputs=d.pop("outputs", UNSET),
            error=d.pop("error", UNSET),
        )

        flow_execution_response.additional_properties = d
        return flow_execution_response
