"""Hostname and source detection from resource attributes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ddotelmap.attributes import azure, ec2, gcp
from ddotelmap.source import Kind, Source
from ddotelmap.values import as_string, str_value

__all__ = [
    "ATTRIBUTE_DATADOG_HOSTNAME",
    "ATTRIBUTE_K8S_NODE_NAME",
    "ATTRIBUTE_HOST",
    "get_cluster_name",
    "hostname_from_attributes",
    "k8s_hostname_from_attributes",
    "unsanitized_hostname_from_attributes",
    "source_from_attrs",
]

ATTRIBUTE_DATADOG_HOSTNAME = "datadog.host.name"
ATTRIBUTE_K8S_NODE_NAME = "k8s.node.name"
ATTRIBUTE_HOST = "host"

_ATTRIBUTE_K8S_CLUSTER_NAME = "k8s.cluster.name"
_ATTRIBUTE_CLOUD_PROVIDER = "cloud.provider"
_ATTRIBUTE_AWS_ECS_LAUNCHTYPE = "aws.ecs.launchtype"
_ATTRIBUTE_AWS_ECS_TASK_ARN = "aws.ecs.task.arn"
_ATTRIBUTE_HOST_ID = "host.id"
_ATTRIBUTE_HOST_NAME = "host.name"

_LAUNCHTYPE_FARGATE = "fargate"
_PROVIDER_AWS = "aws"
_PROVIDER_GCP = "gcp"
_PROVIDER_AZURE = "azure"

_INVALID_HOSTS = frozenset(
    {
        "0.0.0.0",
        "127.0.0.1",
        "localhost",
        "localhost.localdomain",
        "localhost6.localdomain6",
        "ip6-localhost",
    }
)


def _cloud_provider(attrs: Mapping[str, Any]) -> str | None:
    if _ATTRIBUTE_CLOUD_PROVIDER not in attrs:
        return None
    return str_value(attrs[_ATTRIBUTE_CLOUD_PROVIDER])


def _is_fargate(attrs: Mapping[str, Any]) -> bool:
    return (
        _ATTRIBUTE_AWS_ECS_LAUNCHTYPE in attrs
        and str_value(attrs[_ATTRIBUTE_AWS_ECS_LAUNCHTYPE]) == _LAUNCHTYPE_FARGATE
    )


def get_cluster_name(attrs: Mapping[str, Any]) -> str | None:
    """Kubernetes cluster name from conventions or cloud provider data, or None."""
    if _ATTRIBUTE_K8S_CLUSTER_NAME in attrs:
        return str_value(attrs[_ATTRIBUTE_K8S_CLUSTER_NAME])
    provider = _cloud_provider(attrs)
    if provider == _PROVIDER_AZURE:
        return azure.cluster_name_from_attributes(attrs)
    if provider == _PROVIDER_AWS:
        return ec2.cluster_name_from_attributes(attrs)
    return None


def hostname_from_attributes(attrs: Mapping[str, Any]) -> str | None:
    """A valid hostname from attributes, discarding localhost-like names."""
    candidate = unsanitized_hostname_from_attributes(attrs)
    if candidate is None or candidate in _INVALID_HOSTS:
        return None
    return candidate


def k8s_hostname_from_attributes(attrs: Mapping[str, Any]) -> str | None:
    """'<node>-<cluster>' if the cluster is known, else the node name, else None."""
    if ATTRIBUTE_K8S_NODE_NAME not in attrs:
        return None
    node = str_value(attrs[ATTRIBUTE_K8S_NODE_NAME])
    cluster = get_cluster_name(attrs)
    if cluster is not None:
        return f"{node}-{cluster}"
    return node


def unsanitized_hostname_from_attributes(attrs: Mapping[str, Any]) -> str | None:
    """Hostname from attributes without discarding invalid names.

    Checked in order: the literal 'host' attribute, the custom Datadog hostname,
    the cloud provider hostname, the Kubernetes node name, the host ID and the
    host name. ECS Fargate resources have no hostname.
    """
    if ATTRIBUTE_HOST in attrs:
        return as_string(attrs[ATTRIBUTE_HOST])
    if ATTRIBUTE_DATADOG_HOSTNAME in attrs:
        return str_value(attrs[ATTRIBUTE_DATADOG_HOSTNAME])
    if _is_fargate(attrs):
        return None

    provider = _cloud_provider(attrs)
    if provider == _PROVIDER_AWS:
        return ec2.hostname_from_attrs(attrs)
    if provider == _PROVIDER_GCP:
        return gcp.hostname_from_attrs(attrs)
    if provider == _PROVIDER_AZURE:
        return azure.hostname_from_attrs(attrs)

    k8s_name = k8s_hostname_from_attributes(attrs)
    if k8s_name is not None:
        return k8s_name
    if _ATTRIBUTE_HOST_ID in attrs:
        return str_value(attrs[_ATTRIBUTE_HOST_ID])
    if _ATTRIBUTE_HOST_NAME in attrs:
        return str_value(attrs[_ATTRIBUTE_HOST_NAME])
    return None


def source_from_attrs(attrs: Mapping[str, Any]) -> Source | None:
    """The telemetry source identified by the attributes, or None."""
    if _is_fargate(attrs) and _ATTRIBUTE_AWS_ECS_TASK_ARN in attrs:
        return Source(Kind.AWS_ECS_FARGATE, str_value(attrs[_ATTRIBUTE_AWS_ECS_TASK_ARN]))
    host = hostname_from_attributes(attrs)
    if host is not None:
        return Source(Kind.HOSTNAME, host)
    return None