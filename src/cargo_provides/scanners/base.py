"""Base interface for lockfile scanners.

Scanners turn a dependency lockfile into an ordered list of package records.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from cargo_provides.models import PackageRecord


class BaseScanner(ABC):
    """Abstract base class for lockfile scanners.

    Attributes:
        source_path: Optional path to the file being scanned.
    """

    def __init__(self, source_path: Optional[Path] = None) -> None:
        """Initialize the scanner.

        Args:
            source_path: Optional path to the lockfile.
        """
        self.source_path = source_path

    @abstractmethod
    def scan(self) -> list[PackageRecord]:
        """Scan the source and extract package records in file order.

        Returns:
            List of PackageRecord objects.

        Raises:
            FileNotFoundError: If the source file does not exist.
            ValueError: If the source format is invalid.
        """
        ...

    @classmethod
    @abstractmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given file.

        Args:
            path: Path to check.

        Returns:
            True if this scanner can process the file, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the lockfile name this scanner reads, like "Cargo.lock"."""
        ...
