"""GCP host information from resource attributes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ddotelmap.values import str_value

__all__ = ["HostInfo", "hostname_from_attrs", "host_info_from_attrs"]

_ATTRIBUTE_HOST_ID = "host.id"
_ATTRIBUTE_HOST_NAME = "host.name"
_ATTRIBUTE_HOST_TYPE = "host.type"
_ATTRIBUTE_CLOUD_ZONE = "cloud.availability_zone"
_ATTRIBUTE_CLOUD_ACCOUNT_ID = "cloud.account.id"


@dataclass
class HostInfo:
    """GCP host information."""

    host_aliases: list[str] = field(default_factory=list)
    gcp_tags: list[str] = field(default_factory=list)


def hostname_from_attrs(attrs: Mapping[str, Any]) -> str | None:
    """GCP integration hostname '<name>.<project>', or None if unavailable."""
    if _ATTRIBUTE_HOST_NAME not in attrs:
        return None
    name = str_value(attrs[_ATTRIBUTE_HOST_NAME])
    if name.count(".") >= 3:
        name = name.split(".", 1)[0]
    if _ATTRIBUTE_CLOUD_ACCOUNT_ID not in attrs:
        return None
    return f"{name}.{str_value(attrs[_ATTRIBUTE_CLOUD_ACCOUNT_ID])}"


def host_info_from_attrs(attrs: Mapping[str, Any]) -> HostInfo:
    """GCP host information following the semantic conventions."""
    tag_sources = (
        (_ATTRIBUTE_HOST_ID, "instance-id"),
        (_ATTRIBUTE_CLOUD_ZONE, "zone"),
        (_ATTRIBUTE_HOST_TYPE, "instance-type"),
        (_ATTRIBUTE_CLOUD_ACCOUNT_ID, "project"),
    )
    return HostInfo(
        gcp_tags=[
            f"{tag}:{str_value(attrs[key])}" for key, tag in tag_sources if key in attrs
        ]
    )