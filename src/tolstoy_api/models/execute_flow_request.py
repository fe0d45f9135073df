from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="ExecuteFlowRequest")


@_attrs_define
class ExecuteFlowRequest(AdditionalProperties):
    """Execution configuration for a flow run

    Attributes:
        variables (dict[str, Any] | Unset): Input variables for the flow execution
        use_durable (bool | Unset): Whether to use durable (async) execution Default: True.
    """

    variables: dict[str, Any] | Unset = UNSET
    use_durable: bool | Unset = True
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        if not isinstance(self.variables, Unset):
            field_dict["variables"] = self.variables
        if not isinstance(self.use_durable, Unset):
            field_dict["useDurable"] = self.use_durable

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        variables = d.pop("variables", UNSET)

        use_durable = d.pop("useDurable", UNSET)

        execute_flow_request = cls(
            variables=variables,
            use_durable=use_durable,
        )

        execute_flow_request.additional_properties = d
        return execute_flow_request
