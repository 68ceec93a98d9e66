"""Base interface for license resolvers.

Resolvers determine the license of a locked package from some local source,
such as the crate manifests in a vendor directory.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from cargo_provides.models import PackageRecord


class BaseResolver(ABC):
    """Abstract base class for license resolvers."""

    @abstractmethod
    def resolve(self, package: PackageRecord) -> Optional[str]:
        """Resolve the normalized license expression for a package.

        Args:
            package: Package record to resolve.

        Returns:
            Normalized license expression, or None if it could not be
            determined.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resolver name for logging/debugging."""
        ...

    def resolve_batch(self, packages: Iterable[PackageRecord]) -> list[str]:
        """Resolve several packages into a sorted, deduplicated license set.

        Packages whose license cannot be determined are left out.

        Args:
            packages: Package records to resolve.

        Returns:
            Sorted list of distinct normalized license expressions.
        """
        licenses = set()
        for package in packages:
            license_expr = self.resolve(package)
            if license_expr is not None:
                licenses.add(license_expr)
        return sorted(licenses)
