"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Optional

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_project() -> Path:
    """Return the sample project with a Cargo.lock and a vendor directory."""
    return FIXTURES_DIR / "project"


@pytest.fixture
def write_lockfile(tmp_path: Path) -> Callable[[list[dict[str, str]]], Path]:
    """Return a helper that writes a Cargo.lock into tmp_path.

    The helper takes a list of {"name": ..., "version": ...} entries and
    returns the directory holding the lockfile.
    """

    def _write(packages: list[dict[str, str]]) -> Path:
        lines = ["version = 3", ""]
        for pkg in packages:
            lines.append("[[package]]")
            for key, value in pkg.items():
                lines.append(f'{key} = "{value}"')
            lines.append("")
        (tmp_path / "Cargo.lock").write_text("\n".join(lines))
        return tmp_path

    return _write


@pytest.fixture
def write_manifest(
    tmp_path: Path,
) -> Callable[..., Path]:
    """Return a helper that writes vendor/<name>/Cargo.toml under tmp_path.

    Returns the vendor directory.
    """
    vendor_dir = tmp_path / "vendor"

    def _write(
        name: str,
        license: Optional[str] = None,
        license_file: Optional[str] = None,
    ) -> Path:
        crate_dir = vendor_dir / name
        crate_dir.mkdir(parents=True, exist_ok=True)
        lines = ["[package]", f'name = "{name}"', 'version = "1.0.0"']
        if license is not None:
            lines.append(f'license = "{license}"')
        if license_file is not None:
            lines.append(f'license-file = "{license_file}"')
        (crate_dir / "Cargo.toml").write_text("\n".join(lines) + "\n")
        return vendor_dir

    return _write
