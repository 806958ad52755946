"""Conversion of resource attributes into Datadog tags."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ddotelmap.attributes.process import (
    ATTRIBUTE_PROCESS_COMMAND,
    ATTRIBUTE_PROCESS_COMMAND_LINE,
    ATTRIBUTE_PROCESS_EXECUTABLE_NAME,
    ATTRIBUTE_PROCESS_EXECUTABLE_PATH,
    ATTRIBUTE_PROCESS_OWNER,
    ATTRIBUTE_PROCESS_PID,
    ProcessAttributes,
)
from ddotelmap.attributes.system import ATTRIBUTE_OS_TYPE, SystemAttributes
from ddotelmap.values import as_string, str_value

__all__ = [
    "CUSTOM_CONTAINER_TAG_PREFIX",
    "CONTAINER_MAPPINGS",
    "tags_from_attributes",
    "origin_id_from_attributes",
    "container_tags_from_resource_attributes",
    "container_tag_from_attributes",
]

CUSTOM_CONTAINER_TAG_PREFIX = "datadog.container.tag."

_ATTRIBUTE_CONTAINER_ID = "container.id"
_ATTRIBUTE_K8S_POD_UID = "k8s.pod.uid"

_CORE_MAPPING = {
    "deployment.environment": "env",
    "service.name": "service",
    "service.version": "version",
    "deployment.environment.name": "env",
}

CONTAINER_MAPPINGS = {
    # Containers
    "container.id": "container_id",
    "container.name": "container_name",
    "container.image.name": "image_name",
    "container.image.tag": "image_tag",
    "container.runtime": "runtime",
    # Cloud
    "cloud.provider": "cloud_provider",
    "cloud.region": "region",
    "cloud.availability_zone": "zone",
    # ECS
    "aws.ecs.task.family": "task_family",
    "aws.ecs.task.arn": "task_arn",
    "aws.ecs.cluster.arn": "ecs_cluster_name",
    "aws.ecs.task.revision": "task_version",
    "aws.ecs.container.arn": "ecs_container_name",
    # Kubernetes
    "k8s.container.name": "kube_container_name",
    "k8s.cluster.name": "kube_cluster_name",
    "k8s.deployment.name": "kube_deployment",
    "k8s.replicaset.name": "kube_replica_set",
    "k8s.statefulset.name": "kube_stateful_set",
    "k8s.daemonset.name": "kube_daemon_set",
    "k8s.job.name": "kube_job",
    "k8s.cronjob.name": "kube_cronjob",
    "k8s.namespace.name": "kube_namespace",
    "k8s.pod.name": "pod_name",
}

_KUBERNETES_MAPPING = {
    "tags.datadoghq.com/env": "env",
    "tags.datadoghq.com/service": "service",
    "tags.datadoghq.com/version": "version",
    "app.kubernetes.io/name": "kube_app_name",
    "app.kubernetes.io/instance": "kube_app_instance",
    "app.kubernetes.io/version": "kube_app_version",
    "app.kuberenetes.io/component": "kube_app_component",
    "app.kubernetes.io/part-of": "kube_app_part_of",
    "app.kubernetes.io/managed-by": "kube_app_managed_by",
}

_KUBERNETES_DD_TAGS = frozenset(
    {
        "architecture",
        "availability-zone",
        "chronos_job",
        "chronos_job_owner",
        "cluster_name",
        "container_id",
        "container_name",
        "dd_remote_config_id",
        "dd_remote_config_rev",
        "display_container_name",
        "docker_image",
        "ecs_cluster_name",
        "ecs_container_name",
        "eks_fargate_node",
        "env",
        "git.commit.sha",
        "git.repository_url",
        "image_id",
        "image_name",
        "image_tag",
        "kube_app_component",
        "kube_app_instance",
        "kube_app_managed_by",
        "kube_app_name",
        "kube_app_part_of",
        "kube_app_version",
        "kube_container_name",
        "kube_cronjob",
        "kube_daemon_set",
        "kube_deployment",
        "kube_job",
        "kube_namespace",
        "kube_ownerref_kind",
        "kube_ownerref_name",
        "kube_priority_class",
        "kube_qos",
        "kube_replica_set",
        "kube_replication_controller",
        "kube_service",
        "kube_stateful_set",
        "language",
        "marathon_app",
        "mesos_task",
        "nomad_dc",
        "nomad_group",
        "nomad_job",
        "nomad_namespace",
        "nomad_task",
        "oshift_deployment",
        "oshift_deployment_config",
        "os_name",
        "os_version",
        "persistentvolumeclaim",
        "pod_name",
        "pod_phase",
        "rancher_container",
        "rancher_service",
        "rancher_stack",
        "region",
        "service",
        "short_image",
        "swarm_namespace",
        "swarm_service",
        "task_name",
        "task_family",
        "task_version",
        "task_arn",
        "version",
    }
)

_PROCESS_FIELDS = {
    ATTRIBUTE_PROCESS_EXECUTABLE_NAME: "executable_name",
    ATTRIBUTE_PROCESS_EXECUTABLE_PATH: "executable_path",
    ATTRIBUTE_PROCESS_COMMAND: "command",
    ATTRIBUTE_PROCESS_COMMAND_LINE: "command_line",
    ATTRIBUTE_PROCESS_OWNER: "owner",
}


def _int_value(value: Any) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def tags_from_attributes(attrs: Mapping[str, Any]) -> list[str]:
    """Convert a selected set of attributes to a list of tags."""
    tags: list[str] = []
    process = ProcessAttributes()
    system = SystemAttributes()

    for key, value in attrs.items():
        text = str_value(value)
        if key in _PROCESS_FIELDS:
            setattr(process, _PROCESS_FIELDS[key], text)
        elif key == ATTRIBUTE_PROCESS_PID:
            process.pid = _int_value(value)
        elif key == ATTRIBUTE_OS_TYPE:
            system.os_type = text

        core_key = _CORE_MAPPING.get(key)
        if core_key is not None and text:
            tags.append(f"{core_key}:{text}")

        kube_key = _KUBERNETES_MAPPING.get(key)
        if kube_key is not None and text:
            tags.append(f"{kube_key}:{text}")

        if key in _KUBERNETES_DD_TAGS:
            tags.append(f"{key}:{text}")

    tags.extend(
        f"{key}:{val}" for key, val in container_tags_from_resource_attributes(attrs).items()
    )
    tags.extend(process.extract_tags())
    tags.extend(system.extract_tags())
    return tags


def origin_id_from_attributes(attrs: Mapping[str, Any]) -> str:
    """Origin ID: container ID preferred over pod UID; empty if neither is set."""
    if _ATTRIBUTE_CONTAINER_ID in attrs:
        return "container_id://" + as_string(attrs[_ATTRIBUTE_CONTAINER_ID])
    if _ATTRIBUTE_K8S_POD_UID in attrs:
        return "kubernetes_pod_uid://" + as_string(attrs[_ATTRIBUTE_K8S_POD_UID])
    return ""


def container_tags_from_resource_attributes(attrs: Mapping[str, Any]) -> dict[str, str]:
    """Container tags from semantic conventions and custom prefixed attributes.

    Semantic conventions take precedence over custom attributes; non-string
    and empty values are ignored.
    """
    ddtags: dict[str, str] = {}
    for key, value in attrs.items():
        text = str_value(value)
        datadog_key = CONTAINER_MAPPINGS.get(key)
        if datadog_key is not None and text:
            ddtags[datadog_key] = text
        if key.startswith(CUSTOM_CONTAINER_TAG_PREFIX):
            custom_key = key[len(CUSTOM_CONTAINER_TAG_PREFIX):]
            if custom_key and text and custom_key not in ddtags:
                ddtags[custom_key] = text
    return ddtags


def container_tag_from_attributes(attr: Mapping[str, str]) -> dict[str, str]:
    """Container tags from a plain string mapping using semantic conventions only."""
    return {
        CONTAINER_MAPPINGS[key]: val for key, val in attr.items() if key in CONTAINER_MAPPINGS
    }