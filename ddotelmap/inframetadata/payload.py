"""The host metadata payload shown in the infrastructure list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ddotelmap.inframetadata import gohai
from ddotelmap.inframetadata.gohai import GohaiPayload, ProcessesPayload, _marshal, _sorted

__all__ = ["HostMetadata", "HostTags", "Meta", "new_empty"]


@dataclass
class HostTags:
    """Host tags: configured tags and GCP tags."""

    otel: list[str] = field(default_factory=list)
    gcp: list[str] = field(default_factory=list)

    def _to_raw(self) -> dict[str, Any]:
        raw: dict[str, Any] = {}
        if self.otel:
            raw["otel"] = list(self.otel)
        if self.gcp:
            raw["google cloud platform"] = list(self.gcp)
        return raw


@dataclass
class Meta:
    """Host identification and aliases."""

    instance_id: str = ""
    ec2_hostname: str = ""
    hostname: str = ""
    socket_hostname: str = ""
    socket_fqdn: str = ""
    host_aliases: list[str] = field(default_factory=list)

    def _to_raw(self) -> dict[str, Any]:
        raw: dict[str, Any] = {}
        if self.instance_id:
            raw["instance-id"] = self.instance_id
        if self.ec2_hostname:
            raw["ec2-hostname"] = self.ec2_hostname
        raw["hostname"] = self.hostname
        if self.socket_hostname:
            raw["socket-hostname"] = self.socket_hostname
        if self.socket_fqdn:
            raw["socket-fqdn"] = self.socket_fqdn
        if self.host_aliases:
            raw["host_aliases"] = list(self.host_aliases)
        return raw


def _processes_to_raw(processes: ProcessesPayload | None) -> dict[str, Any] | None:
    if processes is None:
        return None
    return {"processes": _sorted(processes.processes), "meta": _sorted(processes.meta)}


@dataclass
class HostMetadata:
    """Host metadata: aliases, tags, system inventory and processes."""

    meta: Meta | None = None
    internal_hostname: str = ""
    version: str = ""
    flavor: str = ""
    tags: HostTags | None = None
    payload: GohaiPayload = field(default_factory=GohaiPayload)
    processes: ProcessesPayload | None = None

    def to_dict(self) -> dict[str, Any]:
        """The payload as JSON-ready data, with wire field names."""
        return {
            "meta": None if self.meta is None else self.meta._to_raw(),
            "internalHostname": self.internal_hostname,
            "otel_version": self.version,
            "agent-flavor": self.flavor,
            "host-tags": None if self.tags is None else self.tags._to_raw(),
            **self.payload.to_dict(),
            "resources": _processes_to_raw(self.processes),
        }

    def to_json(self) -> str:
        """The payload serialised as compact JSON."""
        return _marshal(self.to_dict())


def new_empty() -> HostMetadata:
    """Host metadata with empty sections and zero-valued fields."""
    return HostMetadata(
        meta=Meta(),
        tags=HostTags(),
        payload=gohai.new_empty(),
        processes=ProcessesPayload(),
    )