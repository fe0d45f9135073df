"""Shared behaviour for generated models."""

from __future__ import annotations

from typing import Any


class AdditionalProperties:
    """Dict-style access to properties the schema does not declare.

    Models keep unknown response keys in ``additional_properties`` so that
    round-tripping a response through ``from_dict``/``to_dict`` is lossless.
    """

    additional_properties: dict[str, Any]

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
