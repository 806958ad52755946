"""Azure host information from resource attributes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ddotelmap.values import str_value

__all__ = [
    "ATTRIBUTE_RESOURCE_GROUP_NAME",
    "HostInfo",
    "hostname_from_attrs",
    "cluster_name_from_attributes",
]

ATTRIBUTE_RESOURCE_GROUP_NAME = "azure.resourcegroup.name"

_ATTRIBUTE_HOST_ID = "host.id"
_ATTRIBUTE_HOST_NAME = "host.name"


@dataclass
class HostInfo:
    """Azure host information."""

    host_aliases: list[str] = field(default_factory=list)


def hostname_from_attrs(attrs: Mapping[str, Any]) -> str | None:
    """Azure hostname: the VM id if present, else the host name, else None."""
    if _ATTRIBUTE_HOST_ID in attrs:
        return str_value(attrs[_ATTRIBUTE_HOST_ID])
    if _ATTRIBUTE_HOST_NAME in attrs:
        return str_value(attrs[_ATTRIBUTE_HOST_NAME])
    return None


def cluster_name_from_attributes(attrs: Mapping[str, Any]) -> str | None:
    """Cluster name parsed from an AKS resource group name, or None."""
    if ATTRIBUTE_RESOURCE_GROUP_NAME not in attrs:
        return None
    parts = str_value(attrs[ATTRIBUTE_RESOURCE_GROUP_NAME]).split("_")
    if len(parts) < 4 or parts[0].lower() != "mc":
        return None
    return parts[-2]