"""Vendor manifest resolver for crate license metadata.

Reads ``<vendor>/<crate>/Cargo.toml`` and turns its ``license`` field into a
normalized expression. A missing manifest or a manifest without a usable
license field is reported for manual review; a manifest that cannot be read
or parsed stops the run.
"""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from cargo_provides.models import ManifestLicenseInfo, PackageRecord
from cargo_provides.resolvers.base import BaseResolver
from cargo_provides.resolvers.spdx import normalize_license_expression

logger = logging.getLogger(__name__)

MANIFEST_NAME = "Cargo.toml"


def read_manifest(manifest_path: Path) -> ManifestLicenseInfo:
    """Read the license fields from a crate manifest.

    Args:
        manifest_path: Path to an existing Cargo.toml.

    Returns:
        ManifestLicenseInfo with the ``license`` and ``license-file`` values.

    Raises:
        ValueError: If the file cannot be read, is not valid TOML, lacks a
            ``[package]`` table, or the license fields are not strings.
    """
    try:
        with open(manifest_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Unable to parse {manifest_path}, invalid: {e}") from e
    except OSError as e:
        raise ValueError(f"Unable to open {manifest_path} for reading: {e}") from e

    package = data.get("package")
    if not isinstance(package, dict):
        raise ValueError(f"Unable to parse {manifest_path}, no [package] table")

    fields = {}
    for key in ("license", "license-file"):
        value = package.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(
                f"Unable to parse {manifest_path}, '{key}' must be a string"
            )
        fields[key] = value

    return ManifestLicenseInfo(
        license=fields["license"],
        license_file=fields["license-file"],
    )


class VendorManifestResolver(BaseResolver):
    """Resolver that reads licenses from a vendor directory.

    Each crate is expected at ``<vendor_dir>/<name>/Cargo.toml``, the layout
    produced by ``cargo vendor``.

    Attributes:
        vendor_dir: Root of the vendor directory.
    """

    def __init__(self, vendor_dir: Path) -> None:
        self.vendor_dir = vendor_dir

    @property
    def name(self) -> str:
        return "vendor"

    def manifest_path(self, package: PackageRecord) -> Path:
        """Return the manifest path for a package in the vendor directory."""
        return self.vendor_dir / package.name / MANIFEST_NAME

    def resolve(self, package: PackageRecord) -> Optional[str]:
        """Resolve the license of a vendored crate.

        Args:
            package: Package record to resolve.

        Returns:
            Normalized license expression, or None when the manifest is
            missing or has no ``license`` field.

        Raises:
            ValueError: If the manifest exists but cannot be read or parsed.
        """
        manifest_path = self.manifest_path(package)
        logger.debug("checking license in ... %s", manifest_path)

        if not manifest_path.exists():
            logger.warning(
                "Unable to check license from %s. You may need to check this manually",
                manifest_path,
            )
            return None

        info = read_manifest(manifest_path)
        logger.debug("Parsed manifest - %s", info)

        if info.license is not None:
            return normalize_license_expression(info.license)

        if info.is_empty:
            logger.warning(
                "Unable to determine license for %s. You must manually investigate!",
                manifest_path,
            )
            return None

        license_file = manifest_path.parent / info.license_file
        logger.warning(
            "Unable to find license in %s. You may need to check %s for details.",
            manifest_path,
            license_file,
        )
        return None
