"""Finding copyright notices of vendored dependencies."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ddotelmap.licenses.override import CopyrightOverride

__all__ = [
    "COPYRIGHT_LOCATIONS",
    "AUTHOR_LOCATIONS",
    "find_copyright_notices",
    "map_lines",
    "get_copyright_notice",
    "get_authors",
]

COPYRIGHT_LOCATIONS = (
    "LICENSE",
    "license.md",
    "LICENSE.md",
    "LICENSE.txt",
    "License.txt",
    "COPYING",
    "NOTICE",
    "README",
    "README.md",
    "README.mdown",
    "README.markdown",
    "COPYRIGHT",
    "COPYRIGHT.txt",
)

AUTHOR_LOCATIONS = (
    "AUTHORS",
    "AUTHORS.md",
    "CONTRIBUTORS",
)

_FLAGS = re.IGNORECASE | re.ASCII

_COPYRIGHT_HEADER = re.compile(
    r"copyright\s+(?:©|\(c\)\s+)?(?:(?:[0-9 ,-]|present)+\s+)?(?:by\s+)?(.*)", _FLAGS
)

_COPYRIGHT_IGNORE = (
    re.compile(r"copyright(:? and license)?$", _FLAGS),
    re.compile(r"copyright (:?holder|owner|notice|license|statement)", _FLAGS),
    re.compile(r"Copyright & License -", re.ASCII),
    re.compile(r"copyright .yyyy. .name of copyright owner.", _FLAGS),
)


def find_copyright_notices(
    origin: str, overrides: CopyrightOverride | None = None, vendor_dir: str = "vendor"
) -> list[str]:
    """Copyright notices of a dependency given by its full path.

    An override wins outright; otherwise the notices of every parent path
    come first, followed by those found in the dependency's own files.
    """
    if overrides is not None:
        notices = overrides.copyright_notice(origin)
        if notices is not None:
            return notices

    headers: list[str] = []
    if "/" in origin:
        headers.extend(find_copyright_notices(origin[: origin.rindex("/")], overrides, vendor_dir))

    pkg_dir = os.path.join(vendor_dir, origin)
    for filename in COPYRIGHT_LOCATIONS:
        headers.extend(map_lines(os.path.join(pkg_dir, filename), get_copyright_notice))
    for filename in AUTHOR_LOCATIONS:
        headers.extend(map_lines(os.path.join(pkg_dir, filename), get_authors))
    return headers


def map_lines(full_path: str, fn: Callable[[str], str | None]) -> list[str]:
    """Map the lines of a file, dropping those for which fn returns None.

    A missing file yields no lines; other read errors are raised as OSError.
    """
    try:
        with open(full_path, encoding="utf-8", errors="replace", newline="") as handle:
            notices = []
            for raw in handle:
                line = raw[:-1] if raw.endswith("\n") else raw
                if line.endswith("\r"):
                    line = line[:-1]
                mapped = fn(line)
                if mapped is not None:
                    notices.append(mapped)
            return notices
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise OSError(f'failed to read "{full_path}": {exc}') from exc


def get_copyright_notice(line: str) -> str | None:
    """The copyright notice on a line of a LICENSE-like file, if any."""
    match = _COPYRIGHT_HEADER.search(line)
    if match is None:
        return None
    notice = match.group(0)
    if any(pattern.search(notice) for pattern in _COPYRIGHT_IGNORE):
        return None
    return notice.strip().removesuffix(".")


def get_authors(line: str) -> str | None:
    """The author on a line of an AUTHORS-like file, skipping blanks and comments."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    return line