"""Normalization of Cargo license fields into SPDX-style expressions.

Cargo manifests historically allowed "/" as an informal OR separator
(e.g., "MIT/Apache-2.0"). The RPM License tag wants the SPDX spelling with
compound expressions parenthesized so they can be joined with AND.
"""

# Spellings that would otherwise show up twice in the License tag.
CANONICAL_EXPRESSIONS = {
    "( MIT OR Apache-2.0 )": "( Apache-2.0 OR MIT )",
}


def normalize_license_expression(expression: str) -> str:
    """Normalize a Cargo ``license`` value for the RPM License tag.

    Slashes become " OR ". If the result contains "OR" or "AND" anywhere,
    it is wrapped in "( " and " )". The check is a plain substring match, so
    an identifier that merely contains those letters (e.g., "XOR-1.0") is
    wrapped too.

    Args:
        expression: Raw license expression from Cargo.toml.

    Returns:
        The normalized expression. Never fails.

    Example:
        >>> normalize_license_expression("MIT/Apache-2.0")
        '( Apache-2.0 OR MIT )'
    """
    license_text = expression.replace(" / ", " OR ").replace("/", " OR ")

    if "OR" in license_text or "AND" in license_text:
        license_text = f"( {license_text} )"

    return CANONICAL_EXPRESSIONS.get(license_text, license_text)
