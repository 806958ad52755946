"""Generation of the third-party licenses CSV file."""

from __future__ import annotations

import argparse
import contextlib
import csv
import os
import shutil
import subprocess
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field

from ddotelmap.licenses.findheader import find_copyright_notices
from ddotelmap.licenses.override import OVERRIDE_FILE_PATH, CopyrightOverride, OverrideError

__all__ = [
    "LICENSES_CSV",
    "MODULES",
    "Package",
    "parse_wwhrd_output",
    "find_dependencies_of",
    "main",
]

LICENSES_CSV = "LICENSE-3rdparty.csv"

MODULES = (
    "pkg/quantile",
    "pkg/otlp/attributes",
    "pkg/otlp/metrics",
    "pkg/internal/sketchtest",
    "pkg/inframetadata",
    "pkg/inframetadata/gohai/internal/gohaitest",
)

_HEADER = ("Component", "Origin", "License", "Copyright")
_FOUND_LICENSE = 'msg="Found License"'


@dataclass
class Package:
    """A dependency of a module with its license and copyright notices."""

    component: str = ""
    origin: str = ""
    license: str = ""
    copyright_notices: list[str] = field(default_factory=list)

    def record(self) -> list[str]:
        """The CSV record for this package."""
        return [self.component, self.origin, self.license, " | ".join(self.copyright_notices)]


def parse_wwhrd_output(output: str, module: str, overrides: CopyrightOverride | None) -> list[Package]:
    """Packages listed in the license tool's output, sorted by origin.

    Copyright notices are looked up under ./vendor. Raises LookupError when
    a package has none.
    """
    packages = []
    for line in output.splitlines():
        index = line.find(_FOUND_LICENSE)
        if index == -1:
            continue
        package = Package(component=module)
        for part in line[index + len(_FOUND_LICENSE):].split(" "):
            if part.startswith("license="):
                package.license = part[len("license="):]
            elif part.startswith("package="):
                package.origin = part[len("package="):]
        package.copyright_notices = find_copyright_notices(package.origin, overrides)
        if not package.copyright_notices:
            raise LookupError(f'could not find copyright notice for "{package.origin}"')
        packages.append(package)
    return sorted(packages, key=lambda p: p.origin)


@contextlib.contextmanager
def _working_directory(path: str) -> Iterator[None]:
    previous = os.getcwd()
    try:
        os.chdir(path)
    except OSError as exc:
        raise OSError(f'failed to change directory to "{path}": {exc}') from exc
    try:
        yield
    finally:
        os.chdir(previous)


def _run(command: list[str]) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(command, capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError(f"failed to run '{' '.join(command[:2])}': {exc}") from exc


def find_dependencies_of(module: str, overrides: CopyrightOverride | None) -> list[Package]:
    """Dependencies of a module given by its directory, with licenses and notices."""
    with _working_directory(module):
        # The license tool needs vendored dependencies.
        _run(["go", "mod", "vendor"])
        try:
            result = _run(["wwhrd", "list", "--no-color"])
            return parse_wwhrd_output(result.stderr, module, overrides)
        finally:
            if os.path.exists("vendor"):
                shutil.rmtree("vendor")


def main(argv: list[str] | None = None) -> int:
    """Write the third-party licenses CSV for every module of the repository."""
    parser = argparse.ArgumentParser(
        prog="generate-license-file",
        description="Write the third-party licenses CSV file.",
    )
    parser.add_argument("--output", default=LICENSES_CSV, help="CSV file to write")
    parser.add_argument("--overrides", default=OVERRIDE_FILE_PATH, help="copyright overrides file")
    args = parser.parse_args(argv)

    try:
        overrides = CopyrightOverride.from_file(args.overrides)
    except OverrideError as exc:
        print(f"Failed to load overrides: {exc}", file=sys.stderr)
        return 1

    try:
        with open(args.output, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(_HEADER)
            for module in MODULES:
                for package in find_dependencies_of(module, overrides):
                    writer.writerow(package.record())
    except (OSError, RuntimeError, LookupError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())