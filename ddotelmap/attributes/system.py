"""System attributes and their tags."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SystemAttributes"]

ATTRIBUTE_OS_TYPE = "os.type"


@dataclass
class SystemAttributes:
    """System-related resource attributes."""

    os_type: str = ""

    def extract_tags(self) -> list[str]:
        """The OS type tag, if the OS type is known."""
        return [f"{ATTRIBUTE_OS_TYPE}:{self.os_type}"] if self.os_type else []