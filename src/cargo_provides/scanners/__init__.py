"""Lockfile scanners.

This module provides the scanner that extracts package records from a
Cargo.lock file.
"""

from cargo_provides.scanners.base import BaseScanner
from cargo_provides.scanners.cargo import LOCKFILE_NAME, CargoLockScanner, find_lockfile

__all__ = [
    "BaseScanner",
    "CargoLockScanner",
    "LOCKFILE_NAME",
    "find_lockfile",
]
