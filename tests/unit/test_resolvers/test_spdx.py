"""Tests for Cargo license expression normalization."""

import pytest

from cargo_provides.resolvers.spdx import normalize_license_expression


class TestNormalizeLicenseExpression:
    """Test suite for normalize_license_expression."""

    def test_single_license_unchanged(self):
        """Test that a plain SPDX identifier is returned as-is."""
        assert normalize_license_expression("MIT") == "MIT"

    def test_bsd_identifier_not_wrapped(self):
        """Test that hyphenated identifiers without OR/AND are not wrapped."""
        assert normalize_license_expression("BSD-3-Clause") == "BSD-3-Clause"

    def test_slash_without_spaces(self):
        """Test that "A/B" becomes an OR expression."""
        assert (
            normalize_license_expression("Unlicense/MIT") == "( Unlicense OR MIT )"
        )

    def test_slash_with_spaces(self):
        """Test that " / " becomes a single " OR "."""
        assert (
            normalize_license_expression("Zlib / MIT") == "( Zlib OR MIT )"
        )

    def test_mit_apache_slash_is_canonicalized(self):
        """Test the MIT/Apache-2.0 pair is reordered to Apache-2.0 OR MIT."""
        assert (
            normalize_license_expression("MIT/Apache-2.0") == "( Apache-2.0 OR MIT )"
        )

    def test_mit_apache_or_is_canonicalized(self):
        """Test the spelled-out OR form lands on the same canonical string."""
        assert (
            normalize_license_expression("MIT OR Apache-2.0")
            == "( Apache-2.0 OR MIT )"
        )

    def test_apache_mit_already_canonical(self):
        """Test that Apache-2.0 OR MIT is only wrapped."""
        assert (
            normalize_license_expression("Apache-2.0 OR MIT")
            == "( Apache-2.0 OR MIT )"
        )

    def test_other_pairs_are_not_sorted(self):
        """Test that reordering applies only to the MIT/Apache-2.0 literal."""
        assert (
            normalize_license_expression("MIT OR Zlib OR Apache-2.0")
            == "( MIT OR Zlib OR Apache-2.0 )"
        )

    def test_and_expression_wrapped(self):
        """Test that AND expressions are parenthesized."""
        assert (
            normalize_license_expression("(MIT OR Apache-2.0) AND Unicode-DFS-2016")
            == "( (MIT OR Apache-2.0) AND Unicode-DFS-2016 )"
        )

    @pytest.mark.parametrize("expression", ["XOR-1.0", "LicenseRef-ANDROID"])
    def test_substring_match_wraps_identifiers(self, expression):
        """Test that OR/AND are matched as substrings, not tokens."""
        assert normalize_license_expression(expression) == f"( {expression} )"

    def test_lowercase_operators_not_wrapped(self):
        """Test that the operator check is case-sensitive."""
        assert normalize_license_expression("mit or zlib") == "mit or zlib"

    def test_empty_string(self):
        """Test that an empty expression is returned unchanged."""
        assert normalize_license_expression("") == ""
