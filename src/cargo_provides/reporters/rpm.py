"""RPM reporter for bundled crate Provides and License lines.

This module renders ``Provides: bundled(crate(...))`` lines and the
aggregate ``License:`` tag using a Jinja2 template.
"""

from importlib.resources import files
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, Template

from cargo_provides.models import PackageRecord
from cargo_provides.reporters.base import BaseReporter
from cargo_provides.versions import normalize_rpm_version


def _make_environment(**kwargs) -> Environment:
    env = Environment(autoescape=False, **kwargs)
    env.filters["rpm_version"] = normalize_rpm_version
    return env


class RpmReporter(BaseReporter):
    """Reporter that generates RPM spec file fragments.

    One Provides line is emitted per package in lockfile order. When a
    license set is given, a single License line follows. Every license in
    that line is followed by " AND ", including the last one, and an empty
    set renders as "License: ".

    Attributes:
        template: The Jinja2 template to use for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the RPM reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the default bundled template.
        """
        if template_path:
            env = _make_environment(loader=FileSystemLoader(template_path.parent))
            self.template = env.get_template(template_path.name)
        else:
            self.template = self._load_default_template()

    def _load_default_template(self) -> Template:
        template_content = (
            files("cargo_provides.templates")
            .joinpath("provides.spec.j2")
            .read_text(encoding="utf-8")
        )
        return _make_environment().from_string(template_content)

    def render(
        self,
        packages: list[PackageRecord],
        licenses: Optional[list[str]] = None,
    ) -> str:
        """Render Provides lines and, if licenses is set, the License line.

        Args:
            packages: Package records in lockfile order.
            licenses: Sorted, deduplicated license expressions, or None to
                omit the License line.

        Returns:
            Newline-terminated lines for the spec file.
        """
        return self.template.render(packages=packages, licenses=licenses)

    @property
    def format_name(self) -> str:
        return "rpm"
