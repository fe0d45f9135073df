from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from ._base import AdditionalProperties

T = TypeVar("T", bound="HealthStatus")


@_attrs_define
class HealthStatus(AdditionalProperties):
    """Health check response

    Attributes:
        status (str): Service status
        timestamp (str | Unset): Time the check ran (ISO 8601)
        version (str | Unset): Service version
    """

    status: str
    timestamp: str | Unset = UNSET
    version: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict["status"] = self.status
        if not isinstance(self.timestamp, Unset):
            field_dict["timestamp"] = self.timestamp
        if not isinstance(self.version, Unset):
            field_dict["version"] = self.version

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        health_status = cls(
            status=d.pop("status"),
            timestamp=d.pop("timestamp", UNSET),
            version=d.pop("version", UNSET),
        )

        health_status.additional_properties = d
        return health_status
