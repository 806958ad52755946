"""Copyright notice overrides for dependencies, loaded from a YAML file."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field

import yaml

__all__ = ["OVERRIDE_FILE_PATH", "OverrideError", "CopyrightOverride"]

OVERRIDE_FILE_PATH = ".copyright-overrides.yml"


class OverrideError(Exception):
    """The overrides file could not be read or parsed."""


def _bad(pattern: str) -> ValueError:
    return ValueError(f"syntax error in pattern {pattern!r}")


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    if i >= len(pattern) or pattern[i] in "-]":
        raise _bad(pattern)
    if pattern[i] == "\\":
        i += 1
        if i >= len(pattern):
            raise _bad(pattern)
    return pattern[i], i + 1


@functools.lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern[str]:
    """Translate a path glob ('*' and '?' never match '/') into a regex."""
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            out.append("[^/]*")
            i += 1
        elif char == "?":
            out.append("[^/]")
            i += 1
        elif char == "\\":
            if i + 1 >= n:
                raise _bad(pattern)
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif char == "[":
            i += 1
            negate = i < n and pattern[i] == "^"
            if negate:
                i += 1
            body: list[str] = []
            count = 0
            while True:
                if i >= n:
                    raise _bad(pattern)
                if pattern[i] == "]" and count > 0:
                    i += 1
                    break
                low, i = _class_char(pattern, i)
                high = low
                if i < n and pattern[i] == "-":
                    high, i = _class_char(pattern, i + 1)
                count += 1
                if low == high:
                    body.append(re.escape(low))
                elif low < high:
                    body.append(f"{re.escape(low)}-{re.escape(high)}")
            if body:
                out.append(f"[{'^' if negate else ''}{''.join(body)}]")
            else:
                out.append("(?s:.)" if negate else "(?!)")
        else:
            out.append(re.escape(char))
            i += 1
    return re.compile(r"\A" + "".join(out) + r"\Z", re.DOTALL)


@dataclass
class CopyrightOverride:
    """Copyright notices keyed by dependency path patterns."""

    dependencies: dict[str, str] = field(default_factory=dict)

    def copyright_notice(self, dependency: str) -> list[str] | None:
        """The notice of the first pattern matching the dependency, or None.

        Raises ValueError for a malformed pattern.
        """
        for pattern, notice in self.dependencies.items():
            if _compile(pattern).match(dependency):
                return [notice]
        return None

    @classmethod
    def from_file(cls, path: str) -> CopyrightOverride:
        """Load overrides from a YAML mapping of patterns to notices."""
        try:
            with open(path, encoding="utf-8") as handle:
                data = handle.read()
        except OSError as exc:
            raise OverrideError(f'failed to read "{path}": {exc}') from exc
        try:
            loaded = yaml.load(data, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise OverrideError(f'failed to unmarshal "{path}": {exc}') from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in loaded.items()
        ):
            raise OverrideError(f'failed to unmarshal "{path}": expected a mapping of strings')
        return cls(dict(loaded))