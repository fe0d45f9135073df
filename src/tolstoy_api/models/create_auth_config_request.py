from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ._base import AdditionalProperties
from .auth_config_type import AuthConfigType

T = TypeVar("T", bound="CreateAuthConfigRequest")


@_attrs_define
class CreateAuthConfigRequest(AdditionalProperties):
    """
    Attributes:
        type_ (AuthConfigType): Type of authentication configuration
        config (dict[str, Any]): Authentication configuration, e.g. ``{"apiKey": ..., "header": "X-API-Key"}``
            or ``{"clientId": ..., "clientSecret": ..., "redirectUri": ...}``
    """

    type_: AuthConfigType
    config: dict[str, Any]
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "type": self.type_.value,
                "config": self.config,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        type_ = AuthConfigType(d.pop("type"))

        config = d.pop("config")

        create_auth_config_request = cls(
            type_=type_,
            config=config,
        )

        create_auth_config_request.additional_properties = d
        return create_auth_config_request
