"""Base interface for output reporters.

Reporters generate the text that goes into a packaging spec file from the
locked packages and their resolved licenses.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from cargo_provides.models import PackageRecord


class BaseReporter(ABC):
    """Abstract base class for output reporters."""

    @abstractmethod
    def render(
        self,
        packages: list[PackageRecord],
        licenses: Optional[list[str]] = None,
    ) -> str:
        """Render packages and licenses to formatted output.

        Args:
            packages: Package records in lockfile order.
            licenses: Optional sorted license set; None skips license output.

        Returns:
            Rendered output as a string.
        """
        ...

    def render_lines(
        self,
        packages: list[PackageRecord],
        licenses: Optional[list[str]] = None,
    ) -> list[str]:
        """Render output and split it into lines without line endings."""
        return self.render(packages, licenses).splitlines()

    def write(
        self,
        packages: list[PackageRecord],
        output_path: Path,
        licenses: Optional[list[str]] = None,
    ) -> None:
        """Render and write output to a file.

        Args:
            packages: Package records in lockfile order.
            output_path: Path to write the output file.
            licenses: Optional sorted license set.
        """
        content = self.render(packages, licenses)
        output_path.write_text(content, encoding="utf-8")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name, like "rpm"."""
        ...
