"""RPM-safe rendering of crate version strings."""

import logging

logger = logging.getLogger(__name__)


def normalize_rpm_version(version: str) -> str:
    """Rewrite all but the rightmost hyphen of a version to underscores.

    RPM treats "-" as the version-release separator, so a crate version such
    as "1.0.0-beta-2" cannot be used verbatim. The rightmost hyphen is kept
    and every earlier one becomes "_". The rule is purely positional; the
    string is not validated as semver.

    Args:
        version: Version string from Cargo.lock.

    Returns:
        The rewritten version, or the input unchanged if it has at most one
        hyphen.

    Example:
        >>> normalize_rpm_version("1.0.0-beta-2")
        '1.0.0_beta-2'
    """
    hyphens = [i for i, char in enumerate(version) if char == "-"]
    logger.debug("hyphens in %s -> %s", version, hyphens)

    if len(hyphens) <= 1:
        return version

    chars = list(version)
    for i in hyphens[:-1]:
        chars[i] = "_"
    return "".join(chars)
