"""Command-line interface for cargo_provides.

Provides two entry points: ``cargo-vendor-provides`` prints the bundled
crate Provides lines together with a License tag resolved from a vendor
directory, and ``cargo-lock-provides`` prints only the Provides lines.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from cargo_provides.models import PackageRecord
from cargo_provides.reporters import RpmReporter
from cargo_provides.resolvers import VendorManifestResolver
from cargo_provides.scanners import CargoLockScanner, find_lockfile

app = typer.Typer(
    name="cargo-vendor-provides",
    help="Generate RPM bundled crate Provides and License lines from Cargo.lock.",
    add_completion=False,
)

provides_app = typer.Typer(
    name="cargo-lock-provides",
    help="Generate RPM bundled crate Provides lines from Cargo.lock.",
    add_completion=False,
)

err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("cargo_provides")

EXIT_MISSING_LOCKFILE = 1
EXIT_MALFORMED_INPUT = 2


def _setup_logging(debug: bool) -> None:
    """Configure logging level based on the debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.getLogger("cargo_provides").setLevel(level)


def _load_packages(workdir: Path) -> list[PackageRecord]:
    """Load the package records from ``<workdir>/Cargo.lock``.

    Raises:
        FileNotFoundError: If the lockfile does not exist.
        ValueError: If the lockfile is malformed.
    """
    packages = CargoLockScanner(find_lockfile(workdir)).scan()
    for pkg in packages:
        logger.debug("pkg -> %s", pkg)
    return packages


def _scan_and_resolve(
    workdir: Path, vendordir: Path
) -> tuple[list[PackageRecord], list[str]]:
    """Scan the lockfile and resolve licenses from the vendor directory.

    Args:
        workdir: Directory containing Cargo.lock.
        vendordir: Directory containing the vendored crates.

    Returns:
        Tuple of (package records in lockfile order, sorted license set).

    Raises:
        FileNotFoundError: If the lockfile does not exist.
        ValueError: If the lockfile or a crate manifest is malformed.
    """
    packages = _load_packages(workdir)

    if not vendordir.exists():
        logger.error("could not find vendor dir - %s", vendordir)
        return packages, []

    logger.debug("found %s", vendordir)
    licenses = VendorManifestResolver(vendordir).resolve_batch(packages)
    return packages, licenses


def _emit(text: str) -> None:
    # typer.echo keeps trailing whitespace; the License line ends with " AND ".
    typer.echo(text, nl=False)


def _fail(message: str, code: int) -> typer.Exit:
    err_console.print(
        f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True
    )
    return typer.Exit(code=code)


@app.command()
def vendor_provides(
    dummy: Annotated[
        Path,
        typer.Argument(
            help="Unused placeholder path, accepted for compatibility",
            show_default=False,
        ),
    ],
    workdir: Annotated[
        Optional[Path],
        typer.Argument(help="The directory containing the Cargo.lock"),
    ] = None,
    vendordir: Annotated[
        Optional[Path],
        typer.Argument(help="The path to the associated vendor directory"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Enable debug output on stderr"),
    ] = False,
) -> None:
    """Print Provides lines and the aggregate License tag.

    Licenses are read from ``<vendordir>/<crate>/Cargo.toml`` for every
    package in the lockfile. Crates whose license cannot be determined are
    reported on stderr and left out of the License tag.

    Exit codes:
        0 - Success
        1 - Cargo.lock not found
        2 - Cargo.lock or a crate manifest is malformed
    """
    _setup_logging(debug)

    path = workdir if workdir is not None else Path.cwd()
    vendor_path = vendordir if vendordir is not None else path / "vendor"
    logger.debug("working dir %s", path)
    logger.debug("vendor dir %s", vendor_path)

    try:
        packages, licenses = _scan_and_resolve(path, vendor_path)
    except FileNotFoundError as e:
        raise _fail(str(e), EXIT_MISSING_LOCKFILE)
    except ValueError as e:
        raise _fail(str(e), EXIT_MALFORMED_INPUT)

    _emit(RpmReporter().render(packages, licenses))
    logger.debug("Success!")


@provides_app.command()
def lock_provides(
    inputdir: Annotated[
        Optional[Path],
        typer.Argument(help="The directory containing the Cargo.lock"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Enable debug output on stderr"),
    ] = False,
) -> None:
    """Print Provides lines for every package in Cargo.lock.

    Exit codes:
        0 - Success
        1 - Cargo.lock not found
        2 - Cargo.lock is malformed
    """
    _setup_logging(debug)

    path = inputdir if inputdir is not None else Path.cwd()
    logger.debug("working dir %s", path)

    try:
        packages = _load_packages(path)
    except FileNotFoundError as e:
        raise _fail(str(e), EXIT_MISSING_LOCKFILE)
    except ValueError as e:
        raise _fail(str(e), EXIT_MALFORMED_INPUT)

    _emit(RpmReporter().render(packages))
    logger.debug("Success!")


if __name__ == "__main__":
    app()
