"""Host tags taken from resource attributes."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ddotelmap.values import MismatchedTypeError, ValueType, value_type

__all__ = [
    "HOST_TAG_PREFIX",
    "HOST_TAG_MAPPING",
    "HostTagsError",
    "assert_string_value",
    "get_host_tags",
]

HOST_TAG_PREFIX = "datadog.host.tag."

HOST_TAG_MAPPING = {
    "deployment.environment": "env",
    "k8s.cluster.name": "cluster_name",
    "cloud.provider": "cloud_provider",
    "cloud.region": "region",
    "cloud.availability_zone": "zone",
    "deployment.environment.name": "env",
}


class HostTagsError(ValueError):
    """One or more host tag attributes could not be used."""

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(err) for err in self.errors))


def assert_string_value(name: str, value: Any) -> str:
    """Return the value if it is a string; raise MismatchedTypeError otherwise."""
    kind = value_type(value)
    if kind is not ValueType.STR:
        raise MismatchedTypeError(name, kind, ValueType.STR)
    return value


def get_host_tags(attrs: Mapping[str, Any]) -> list[str]:
    """Sorted host tags from user-defined and well-known attributes.

    Raises HostTagsError holding every problem found.
    """
    tags: list[str] = []
    errors: list[Exception] = []
    for key, value in attrs.items():
        if key.startswith(HOST_TAG_PREFIX):
            try:
                text = assert_string_value(key, value)
            except MismatchedTypeError as exc:
                errors.append(exc)
                continue
            if not text:
                errors.append(
                    ValueError(
                        f"attribute {json.dumps(key, ensure_ascii=False)} has empty string "
                        "value, expected non-empty string"
                    )
                )
                continue
            tags.append(f"{key[len(HOST_TAG_PREFIX):]}:{text}")
        elif key in HOST_TAG_MAPPING:
            try:
                text = assert_string_value(key, value)
            except MismatchedTypeError as exc:
                errors.append(exc)
                continue
            tags.append(f"{HOST_TAG_MAPPING[key]}:{text}")

    if errors:
        raise HostTagsError(errors)
    return sorted(tags)