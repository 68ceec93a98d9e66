"""Output reporters for generating spec file fragments.

This module provides reporters for rendering locked packages and their
resolved licenses to packaging formats.
"""

from cargo_provides.reporters.base import BaseReporter
from cargo_provides.reporters.rpm import RpmReporter

__all__ = ["BaseReporter", "RpmReporter"]
