"""Tests for deterministic name assembly."""

import re

from lcp_lib.naming import SanitizedComponents, validate_name
from lcp_lib.naming.builder import assemble, build_base_name, build_hashed_name, hash_suffix


class TestHashSuffix:
    """Test hash_suffix()."""

    def test_eight_hex_characters(self, sanitized):
        """Test the suffix is 8 lowercase hex characters."""
        assert re.fullmatch(r"[0-9a-f]{8}", hash_suffix(sanitized, "us-west-2"))

    def test_deterministic(self, sanitized):
        """Test identical input yields identical suffix."""
        assert hash_suffix(sanitized, "us-west-2") == hash_suffix(sanitized, "us-west-2")

    def test_region_changes_suffix(self, sanitized):
        """Test the region participates in the hash."""
        assert hash_suffix(sanitized, "us-west-2") != hash_suffix(sanitized, "eu-west-1")

    def test_missing_region_hashes_as_empty(self, sanitized):
        """Test None and empty region are equivalent."""
        assert hash_suffix(sanitized, None) == hash_suffix(sanitized, "")


class TestAssemble:
    """Test assemble() and truncation."""

    def test_no_truncation_needed(self):
        """Test short names are joined with hyphens."""
        assert assemble("lcp", ["prod", "data", "config"]) == "lcp-prod-data-config"

    def test_suffix_appended(self):
        """Test suffix is appended after the components."""
        assert assemble("lcp", ["prod"], "1234") == "lcp-prod-1234"

    def test_truncates_longest_component(self):
        """Test the longest component is shortened first."""
        assert assemble("lcp", ["abcdef", "xyz"], max_length=12) == "lcp-abcd-xyz"

    def test_ties_trim_rightmost(self):
        """Test equal-length components are trimmed rightmost first."""
        assert assemble("lcp", ["aaaa", "bbbb"], max_length=12) == "lcp-aaaa-bbb"

    def test_prefix_and_suffix_never_trimmed(self):
        """Test only components are shortened."""
        name = assemble("prefix", ["a" * 40, "b" * 40], "suffix", max_length=30)

        assert name.startswith("prefix-")
        assert name.endswith("-suffix")
        assert len(name) <= 30


class TestBuildNames:
    """Test base and hashed name builders."""

    def test_base_name(self, sanitized):
        """Test the base name has no suffix."""
        assert build_base_name(sanitized) == "lcp-prod-data-config"

    def test_base_name_custom_prefix_and_suffix(self, sanitized):
        """Test custom prefix and suffix."""
        assert build_base_name(sanitized, "acme", "0042") == "acme-prod-data-config-0042"

    def test_hashed_name_shape(self, sanitized):
        """Test the hashed name ends with the hash suffix."""
        name = build_hashed_name(sanitized, "us-west-2")

        assert name == f"lcp-prod-data-config-{hash_suffix(sanitized, 'us-west-2')}"

    def test_hashed_name_deterministic(self, sanitized):
        """Test repeated builds are identical."""
        assert build_hashed_name(sanitized, None) == build_hashed_name(sanitized, None)

    def test_maximal_components_fit(self):
        """Test components at the sanitizer maximum still fit in 63 characters."""
        components = SanitizedComponents(account="a" * 30, team="b" * 30, moniker="c" * 30)

        name = build_hashed_name(components, "us-west-2")

        assert len(name) == 63
        assert name.endswith(hash_suffix(components, "us-west-2"))
        assert name.startswith("lcp-" + "a" * 16 + "-" + "b" * 16 + "-" + "c" * 16)
        assert validate_name(name).is_valid

    def test_truncation_strips_trailing_hyphens(self):
        """Test a component truncated at a hyphen does not leave a double hyphen."""
        components = SanitizedComponents(account="a" * 15 + "-xyz" + "a" * 11, team="b" * 30, moniker="c" * 30)

        name = build_hashed_name(components, None)

        assert len(name) == 62
        assert "--" not in name
        assert validate_name(name).is_valid
