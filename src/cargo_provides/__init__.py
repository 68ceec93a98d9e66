"""Cargo Provides - RPM bundled-crate Provides and License generator.

This package reads a Cargo.lock file and a vendor directory and emits the
``Provides: bundled(crate(...))`` lines and aggregate ``License:`` tag used
in RPM spec files.
"""

__version__ = "0.1.0"

from cargo_provides.models import (
    ManifestLicenseInfo,
    PackageRecord,
)

__all__ = [
    "__version__",
    "ManifestLicenseInfo",
    "PackageRecord",
]
