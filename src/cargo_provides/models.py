"""Core data models for cargo_provides.

This module defines the records read from a Cargo lockfile and from the
per-crate manifests found in a vendor directory.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PackageRecord:
    """Immutable record of one ``[[package]]`` entry in a Cargo.lock file.

    Frozen for hashability so records can be used as dictionary keys.

    Attributes:
        name: Crate name (e.g., "serde").
        version: Resolved version string (e.g., "1.0.0-beta-2").
        dependencies: Optional dependency list as written in the lockfile.
        source: Optional source identifier (e.g., a registry URL).
        checksum: Optional crate checksum.
    """

    name: str
    version: str
    dependencies: Optional[tuple[str, ...]] = None
    source: Optional[str] = None
    checksum: Optional[str] = None


@dataclass(frozen=True)
class ManifestLicenseInfo:
    """License fields read from a vendored crate's Cargo.toml.

    A well-formed manifest sets exactly one of the two fields, but both
    being absent is accepted.

    Attributes:
        license: SPDX-style license expression, possibly using "/" as OR.
        license_file: Path to a license file, relative to the crate directory.
    """

    license: Optional[str] = None
    license_file: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Return True if the manifest declares no license information."""
        return self.license is None and self.license_file is None
