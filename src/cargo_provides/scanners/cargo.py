"""Scanner for Cargo lock files.

This module parses Cargo.lock files and extracts the ``[[package]]`` entries
as PackageRecord objects, preserving their order in the file.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from cargo_provides.models import PackageRecord
from cargo_provides.scanners.base import BaseScanner

logger = logging.getLogger(__name__)

LOCKFILE_NAME = "Cargo.lock"


def find_lockfile(directory: Path) -> Path:
    """Return the expected Cargo.lock path inside a directory.

    Args:
        directory: Project working directory.

    Returns:
        Path to ``<directory>/Cargo.lock``; it may not exist.
    """
    return directory / LOCKFILE_NAME


def _optional_str(pkg: dict[str, Any], key: str, path: Path) -> Optional[str]:
    value = pkg.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Package field '{key}' must be a string in {path}")
    return value


class CargoLockScanner(BaseScanner):
    """Scanner for Cargo lock files.

    Parses Cargo.lock (TOML format) and extracts name, version, dependencies,
    source and checksum from each ``[[package]]`` section.
    """

    def scan(self) -> list[PackageRecord]:
        """Scan the Cargo.lock file and extract package records.

        Returns:
            List of PackageRecord objects in lockfile order.

        Raises:
            FileNotFoundError: If the lockfile does not exist.
            ValueError: If the file is not valid TOML, does not contain a
                ``package`` array, or a package entry has the wrong shape.
        """
        if self.source_path is None:
            raise ValueError("source_path must be set before calling scan()")

        if not self.source_path.exists():
            raise FileNotFoundError(f"lockfile {self.source_path} not found")

        logger.debug("found %s", self.source_path)

        try:
            with open(self.source_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {self.source_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Unable to read {self.source_path}: {e}") from e

        package_list = data.get("package")
        if not isinstance(package_list, list):
            raise ValueError(
                f"Lockfile {self.source_path} has no [[package]] array"
            )

        packages: list[PackageRecord] = []
        for pkg in package_list:
            packages.append(self._parse_package(pkg))

        return packages

    def _parse_package(self, pkg: Any) -> PackageRecord:
        path = self.source_path
        if not isinstance(pkg, dict):
            raise ValueError(f"Malformed [[package]] entry in {path}")

        # Validate required fields
        for key in ("name", "version"):
            if key not in pkg:
                raise ValueError(
                    f"Package missing required field '{key}' in {path}"
                )
            if not isinstance(pkg[key], str):
                raise ValueError(f"Package field '{key}' must be a string in {path}")

        dependencies = pkg.get("dependencies")
        if dependencies is not None:
            if not isinstance(dependencies, list) or not all(
                isinstance(dep, str) for dep in dependencies
            ):
                raise ValueError(
                    f"Package field 'dependencies' must be a list of strings in {path}"
                )
            dependencies = tuple(dependencies)

        return PackageRecord(
            name=pkg["name"],
            version=pkg["version"],
            dependencies=dependencies,
            source=_optional_str(pkg, "source", path),
            checksum=_optional_str(pkg, "checksum", path),
        )

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given file.

        Args:
            path: Path to check.

        Returns:
            True if the file is named exactly "Cargo.lock", False otherwise.
        """
        return path.name == LOCKFILE_NAME

    @property
    def source_name(self) -> str:
        """Return the string "Cargo.lock"."""
        return LOCKFILE_NAME
