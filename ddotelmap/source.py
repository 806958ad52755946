"""Telemetry signal sources."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["Kind", "Source"]


class Kind(str, enum.Enum):
    """Kind of telemetry source."""

    INVALID = ""
    HOSTNAME = "host"
    AWS_ECS_FARGATE = "task_arn"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Source:
    """A telemetry source: its kind and the identifier that determines it."""

    kind: Kind = Kind.INVALID
    identifier: str = ""

    def tag(self) -> str:
        """Tag associated to the source."""
        return f"{self.kind.value}:{self.identifier}"