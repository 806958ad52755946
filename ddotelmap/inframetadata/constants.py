"""Attribute names, gohai field names and their mappings used by the host map."""

from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "ATTRIBUTE_KERNEL_NAME",
    "ATTRIBUTE_KERNEL_RELEASE",
    "ATTRIBUTE_KERNEL_VERSION",
    "ATTRIBUTE_OS_DESCRIPTION",
    "ATTRIBUTE_OS_TYPE",
    "ATTRIBUTE_HOST_ARCH",
    "ATTRIBUTE_HOST_ID",
    "ATTRIBUTE_HOST_NAME",
    "ATTRIBUTE_CLOUD_PROVIDER",
    "CLOUD_PROVIDER_AWS",
    "FIELD_PLATFORM_HOSTNAME",
    "FIELD_PLATFORM_OS",
    "FIELD_PLATFORM_GOOS",
    "FIELD_PLATFORM_GOOARCH",
    "FIELD_PLATFORM_PROCESSOR",
    "FIELD_PLATFORM_MACHINE",
    "FIELD_PLATFORM_HARDWARE_PLATFORM",
    "FIELD_PLATFORM_KERNEL_NAME",
    "FIELD_PLATFORM_KERNEL_RELEASE",
    "FIELD_PLATFORM_KERNEL_VERSION",
    "PLATFORM_ATTRIBUTES_MAP",
    "ATTRIBUTE_HOST_CPU_VENDOR_ID",
    "ATTRIBUTE_HOST_CPU_MODEL_NAME",
    "ATTRIBUTE_HOST_CPU_FAMILY",
    "ATTRIBUTE_HOST_CPU_MODEL_ID",
    "ATTRIBUTE_HOST_CPU_STEPPING",
    "ATTRIBUTE_HOST_CPU_CACHE_L2_SIZE",
    "METRIC_SYSTEM_CPU_PHYSICAL_COUNT",
    "METRIC_SYSTEM_CPU_LOGICAL_COUNT",
    "METRIC_SYSTEM_CPU_FREQUENCY",
    "METRIC_SYSTEM_MEMORY_LIMIT",
    "FIELD_CPU_VENDOR_ID",
    "FIELD_CPU_MODEL_NAME",
    "FIELD_CPU_CACHE_SIZE",
    "FIELD_CPU_FAMILY",
    "FIELD_CPU_MODEL",
    "FIELD_CPU_STEPPING",
    "FIELD_CPU_CORES",
    "FIELD_CPU_LOGICAL_PROCESSORS",
    "FIELD_CPU_MHZ",
    "CPU_ATTRIBUTES_MAP",
    "CPU_METRICS_MAP",
    "TRACKED_METRICS",
    "ATTRIBUTE_HOST_IP",
    "ATTRIBUTE_HOST_MAC",
    "FIELD_NETWORK_IP_ADDRESS_IPV4",
    "FIELD_NETWORK_IP_ADDRESS_IPV6",
    "FIELD_NETWORK_MAC_ADDRESS",
]

# Platform related resource attributes (not yet part of the specification).
ATTRIBUTE_KERNEL_NAME = "os.kernel.name"
ATTRIBUTE_KERNEL_RELEASE = "os.kernel.release"
ATTRIBUTE_KERNEL_VERSION = "os.kernel.version"

# Semantic convention attributes.
ATTRIBUTE_OS_DESCRIPTION = "os.description"
ATTRIBUTE_OS_TYPE = "os.type"
ATTRIBUTE_HOST_ARCH = "host.arch"
ATTRIBUTE_HOST_ID = "host.id"
ATTRIBUTE_HOST_NAME = "host.name"
ATTRIBUTE_CLOUD_PROVIDER = "cloud.provider"
CLOUD_PROVIDER_AWS = "aws"

# Fields in the gohai payload's platform section.
FIELD_PLATFORM_HOSTNAME = "hostname"
FIELD_PLATFORM_OS = "os"
FIELD_PLATFORM_GOOS = "GOOS"
FIELD_PLATFORM_GOOARCH = "GOOARCH"
FIELD_PLATFORM_PROCESSOR = "processor"
FIELD_PLATFORM_MACHINE = "machine"
FIELD_PLATFORM_HARDWARE_PLATFORM = "hardware_platform"
FIELD_PLATFORM_KERNEL_NAME = "kernel_name"
FIELD_PLATFORM_KERNEL_RELEASE = "kernel_release"
FIELD_PLATFORM_KERNEL_VERSION = "kernel_version"

PLATFORM_ATTRIBUTES_MAP: dict[str, str] = {
    FIELD_PLATFORM_OS: ATTRIBUTE_OS_DESCRIPTION,
    FIELD_PLATFORM_GOOS: ATTRIBUTE_OS_TYPE,
    FIELD_PLATFORM_GOOARCH: ATTRIBUTE_HOST_ARCH,
    FIELD_PLATFORM_PROCESSOR: ATTRIBUTE_HOST_ARCH,
    FIELD_PLATFORM_MACHINE: ATTRIBUTE_HOST_ARCH,
    FIELD_PLATFORM_HARDWARE_PLATFORM: ATTRIBUTE_HOST_ARCH,
    FIELD_PLATFORM_KERNEL_NAME: ATTRIBUTE_KERNEL_NAME,
    FIELD_PLATFORM_KERNEL_RELEASE: ATTRIBUTE_KERNEL_RELEASE,
    FIELD_PLATFORM_KERNEL_VERSION: ATTRIBUTE_KERNEL_VERSION,
}

# CPU related resource attributes.
ATTRIBUTE_HOST_CPU_VENDOR_ID = "host.cpu.vendor.id"
ATTRIBUTE_HOST_CPU_MODEL_NAME = "host.cpu.model.name"
ATTRIBUTE_HOST_CPU_FAMILY = "host.cpu.family"
ATTRIBUTE_HOST_CPU_MODEL_ID = "host.cpu.model.id"
ATTRIBUTE_HOST_CPU_STEPPING = "host.cpu.stepping"
ATTRIBUTE_HOST_CPU_CACHE_L2_SIZE = "host.cpu.cache.l2.size"

# CPU and memory related metrics.
METRIC_SYSTEM_CPU_PHYSICAL_COUNT = "system.cpu.physical.count"
METRIC_SYSTEM_CPU_LOGICAL_COUNT = "system.cpu.logical.count"
METRIC_SYSTEM_CPU_FREQUENCY = "system.cpu.frequency"
METRIC_SYSTEM_MEMORY_LIMIT = "system.memory.limit"

# Fields in the gohai payload's CPU section.
FIELD_CPU_VENDOR_ID = "vendor_id"
FIELD_CPU_MODEL_NAME = "model_name"
FIELD_CPU_CACHE_SIZE = "cache_size"
FIELD_CPU_FAMILY = "family"
FIELD_CPU_MODEL = "model"
FIELD_CPU_STEPPING = "stepping"
FIELD_CPU_CORES = "cpu_cores"
FIELD_CPU_LOGICAL_PROCESSORS = "cpu_logical_processors"
FIELD_CPU_MHZ = "mhz"

CPU_ATTRIBUTES_MAP: dict[str, str] = {
    FIELD_CPU_VENDOR_ID: ATTRIBUTE_HOST_CPU_VENDOR_ID,
    FIELD_CPU_MODEL_NAME: ATTRIBUTE_HOST_CPU_MODEL_NAME,
    FIELD_CPU_CACHE_SIZE: ATTRIBUTE_HOST_CPU_CACHE_L2_SIZE,
    FIELD_CPU_FAMILY: ATTRIBUTE_HOST_CPU_FAMILY,
    FIELD_CPU_MODEL: ATTRIBUTE_HOST_CPU_MODEL_ID,
    FIELD_CPU_STEPPING: ATTRIBUTE_HOST_CPU_STEPPING,
}


class _CpuMetric(NamedTuple):
    field_name: str
    conversion_factor: float | None = None


CPU_METRICS_MAP: dict[str, _CpuMetric] = {
    METRIC_SYSTEM_CPU_PHYSICAL_COUNT: _CpuMetric(FIELD_CPU_CORES),
    METRIC_SYSTEM_CPU_LOGICAL_COUNT: _CpuMetric(FIELD_CPU_LOGICAL_PROCESSORS),
    METRIC_SYSTEM_CPU_FREQUENCY: _CpuMetric(FIELD_CPU_MHZ, 1e-6),
}

TRACKED_METRICS: frozenset[str] = frozenset(
    {
        METRIC_SYSTEM_CPU_PHYSICAL_COUNT,
        METRIC_SYSTEM_CPU_LOGICAL_COUNT,
        METRIC_SYSTEM_CPU_FREQUENCY,
        METRIC_SYSTEM_MEMORY_LIMIT,
    }
)

# Network related resource attributes.
ATTRIBUTE_HOST_IP = "host.ip"
ATTRIBUTE_HOST_MAC = "host.mac"

# Fields in the gohai payload's network section.
FIELD_NETWORK_IP_ADDRESS_IPV4 = "ipaddress"
FIELD_NETWORK_IP_ADDRESS_IPV6 = "ipaddressv6"
FIELD_NETWORK_MAC_ADDRESS = "macaddress"