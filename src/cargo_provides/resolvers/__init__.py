"""License resolvers for vendored crates.

This module provides the vendor-directory resolver and the license
expression normalization it applies.
"""

from cargo_provides.resolvers.base import BaseResolver
from cargo_provides.resolvers.manifest import VendorManifestResolver, read_manifest
from cargo_provides.resolvers.spdx import normalize_license_expression

__all__ = [
    "BaseResolver",
    "VendorManifestResolver",
    "normalize_license_expression",
    "read_manifest",
]
