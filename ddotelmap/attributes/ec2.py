"""AWS EC2 host information from resource attributes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ddotelmap.values import str_value

__all__ = [
    "DEFAULT_PREFIXES",
    "HostInfo",
    "is_default_hostname",
    "hostname_from_attrs",
    "host_info_from_attributes",
    "cluster_name_from_attributes",
]

DEFAULT_PREFIXES = ("ip-", "domu", "ec2amaz-")
EC2_TAG_PREFIX = "ec2.tag."
CLUSTER_TAG_PREFIX = EC2_TAG_PREFIX + "kubernetes.io/cluster/"

_ATTRIBUTE_HOST_ID = "host.id"
_ATTRIBUTE_HOST_NAME = "host.name"


@dataclass
class HostInfo:
    """EC2 host information."""

    instance_id: str = ""
    ec2_hostname: str = ""
    ec2_tags: list[str] = field(default_factory=list)


def is_default_hostname(hostname: str) -> bool:
    """Whether a hostname is an EC2 default hostname."""
    return hostname.startswith(DEFAULT_PREFIXES)


def hostname_from_attrs(attrs: Mapping[str, Any]) -> str | None:
    """The EC2 instance id as hostname, or None."""
    if _ATTRIBUTE_HOST_ID in attrs:
        return str_value(attrs[_ATTRIBUTE_HOST_ID])
    return None


def host_info_from_attributes(attrs: Mapping[str, Any]) -> HostInfo:
    """EC2 host information following the semantic conventions."""
    info = HostInfo()
    if _ATTRIBUTE_HOST_ID in attrs:
        info.instance_id = str_value(attrs[_ATTRIBUTE_HOST_ID])
    if _ATTRIBUTE_HOST_NAME in attrs:
        info.ec2_hostname = str_value(attrs[_ATTRIBUTE_HOST_NAME])
    info.ec2_tags = [
        f"{key[len(EC2_TAG_PREFIX):]}:{str_value(value)}"
        for key, value in attrs.items()
        if key.startswith(EC2_TAG_PREFIX)
    ]
    return info


def cluster_name_from_attributes(attrs: Mapping[str, Any]) -> str | None:
    """Cluster name taken from a kubernetes cluster EC2 tag key, or None."""
    cluster = None
    for key in attrs:
        if key.startswith(CLUSTER_TAG_PREFIX):
            cluster = key.split("/")[2]
    return cluster