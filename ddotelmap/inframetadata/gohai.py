"""The gohai system inventory payload.

In the v5 payload format the value of the "gohai" field is itself a
JSON-formatted string, so the inventory is serialised twice.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["Gohai", "GohaiPayload", "ProcessesPayload", "new_empty"]

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _sorted(obj: Any) -> Any:
    """Sort mapping keys recursively, as maps are serialised in key order."""
    if isinstance(obj, Mapping):
        return {key: _sorted(obj[key]) for key in sorted(obj)}
    if isinstance(obj, (list, tuple)):
        return [_sorted(item) for item in obj]
    return obj


def _marshal(obj: Any) -> str:
    """Compact JSON with HTML-sensitive characters escaped."""
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def _str_map(data: Any, name: str) -> dict[str, str] | None:
    if data is None:
        return None
    if not isinstance(data, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(f"gohai field {name!r} must be an object of strings")
    return dict(data)


def _any_map(data: Any, name: str) -> dict[str, Any] | None:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ValueError(f"gohai field {name!r} must be an object")
    return dict(data)


@dataclass
class Gohai:
    """System inventory: CPU, filesystems, memory, network and platform."""

    cpu: dict[str, str] | None = None
    filesystem: list[Any] | None = None
    memory: dict[str, str] | None = None
    network: dict[str, Any] | None = None
    platform: dict[str, str] | None = None

    def _to_raw(self) -> dict[str, Any]:
        return {
            "cpu": _sorted(self.cpu),
            "filesystem": _sorted(self.filesystem),
            "memory": _sorted(self.memory),
            "network": _sorted(self.network),
            "platform": _sorted(self.platform),
        }

    @classmethod
    def _from_raw(cls, data: Any) -> Gohai:
        if not isinstance(data, Mapping):
            raise ValueError("gohai payload must be a JSON object")
        filesystem = data.get("filesystem")
        if filesystem is not None and not isinstance(filesystem, list):
            raise ValueError("gohai field 'filesystem' must be an array")
        return cls(
            cpu=_str_map(data.get("cpu"), "cpu"),
            filesystem=filesystem,
            memory=_str_map(data.get("memory"), "memory"),
            network=_any_map(data.get("network"), "network"),
            platform=_str_map(data.get("platform"), "platform"),
        )


@dataclass
class GohaiPayload:
    """Wrapper whose 'gohai' field serialises as a JSON-formatted string."""

    gohai: Gohai | None = None

    def _inventory(self) -> Gohai:
        if self.gohai is None:
            self.gohai = Gohai()
        return self.gohai

    def platform(self) -> dict[str, str]:
        """The 'platform' map, created if missing."""
        inventory = self._inventory()
        if inventory.platform is None:
            inventory.platform = {}
        return inventory.platform

    def cpu(self) -> dict[str, str]:
        """The 'cpu' map, created if missing."""
        inventory = self._inventory()
        if inventory.cpu is None:
            inventory.cpu = {}
        return inventory.cpu

    def network(self) -> dict[str, Any]:
        """The 'network' map, created if missing."""
        inventory = self._inventory()
        if inventory.network is None:
            inventory.network = {}
        return inventory.network

    def to_dict(self) -> dict[str, str]:
        """{'gohai': <inventory serialised as a JSON string>}."""
        inner = None if self.gohai is None else self.gohai._to_raw()
        return {"gohai": _marshal(inner)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GohaiPayload:
        """Parse a payload whose 'gohai' field is a JSON-formatted string."""
        if "gohai" not in data:
            return cls()
        encoded = data["gohai"]
        if not isinstance(encoded, str):
            raise ValueError("'gohai' must be a JSON-formatted string")
        try:
            inner = json.loads(encoded)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid gohai JSON: {exc}") from exc
        if inner is None:
            return cls()
        return cls(Gohai._from_raw(inner))


@dataclass
class ProcessesPayload:
    """Process inventory, sent under the 'resources' key."""

    processes: dict[str, Any] | None = None
    meta: dict[str, str] | None = None


def new_empty() -> GohaiPayload:
    """A gohai payload with every section present and empty."""
    return GohaiPayload(Gohai(cpu={}, filesystem=[], memory={}, network={}, platform={}))