"""Process attributes and the tag that identifies a process."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ProcessAttributes"]

ATTRIBUTE_PROCESS_EXECUTABLE_NAME = "process.executable.name"
ATTRIBUTE_PROCESS_EXECUTABLE_PATH = "process.executable.path"
ATTRIBUTE_PROCESS_COMMAND = "process.command"
ATTRIBUTE_PROCESS_COMMAND_LINE = "process.command_line"
ATTRIBUTE_PROCESS_PID = "process.pid"
ATTRIBUTE_PROCESS_OWNER = "process.owner"


@dataclass
class ProcessAttributes:
    """Process-related resource attributes."""

    executable_name: str = ""
    executable_path: str = ""
    command: str = ""
    command_line: str = ""
    pid: int = 0
    owner: str = ""

    def extract_tags(self) -> list[str]:
        """A single tag from the first available identifying attribute, if any."""
        candidates = (
            (ATTRIBUTE_PROCESS_EXECUTABLE_NAME, self.executable_name),
            (ATTRIBUTE_PROCESS_EXECUTABLE_PATH, self.executable_path),
            (ATTRIBUTE_PROCESS_COMMAND, self.command),
            (ATTRIBUTE_PROCESS_COMMAND_LINE, self.command_line),
        )
        for key, value in candidates:
            if value:
                return [f"{key}:{value}"]
        return []