# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_parser import (
    AlphaNumeric,
    InvalidVersionError,
    Numeric,
    Version,
    compare_versions,
    parse,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numbers_compare_numerically(self):
        """Test that 10 sorts after 9 in every numeric position."""
        assert compare_versions("1.10.0", "1.9.0") == 1
        assert compare_versions("1.0.0-10", "1.0.0-9") == 1

    def test_major_dominates_metadata(self):
        """Test that earlier fields decide before pre-release and build."""
        assert compare_versions("1.0.0-zzz+zzz", "2.0.0-0") == -1

    def test_empty_prerelease_sorts_first(self):
        """Test that a version without pre-release sorts BEFORE one with it.

        Pre-release identifiers are compared as plain sequences, and the
        empty sequence is a prefix of every other one.
        """
        assert compare_versions("1.0.0", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-alpha", "1.0.0") == 1
        assert compare_versions("1.0.0", "1.0.0-0") == -1

    def test_numeric_before_alphanumeric(self):
        """Test that numeric identifiers sort before alphanumeric ones."""
        assert compare_versions("1.0.0-999", "1.0.0-a") == -1
        assert compare_versions("1.0.0-a", "1.0.0-999") == 1

    def test_alphanumeric_compares_as_strings(self):
        """Test ASCII string ordering of alphanumeric identifiers."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1  # uppercase first
        assert compare_versions("1.0.0-rc.01", "1.0.0-rc.1") == 1  # "01" is alphanumeric

    def test_prefix_sorts_first(self):
        """Test that a shorter identifier list sorts before its extension."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.1") == -1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.1.0") == -1

    def test_build_metadata_compared(self):
        """Test that build metadata takes part in comparison."""
        assert compare_versions("1.0.0+build.1", "1.0.0+build.2") == -1
        assert compare_versions("1.0.0+build", "1.0.0") == 1
        assert compare_versions("1.0.0+build", "1.0.0+build") == 0

    def test_prerelease_decides_before_build(self):
        """Test that pre-release is compared before build metadata."""
        assert compare_versions("1.0.0-b+1", "1.0.0-a+2") == 1

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(parse("1.0.0"), parse("2.0.0")) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise InvalidVersionError."""
        with pytest.raises(InvalidVersionError):
            compare_versions("1.0", "1.0.0")


class TestRichComparison:
    """Tests for comparison operators on Version and Identifier."""

    def test_operators(self):
        """Test that operators agree with compare_versions."""
        a = parse("1.0.0-1")
        b = parse("1.0.0-a")
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a <= parse("1.0.0-1")

    def test_identifier_operators(self):
        """Test identifier ordering across and within variants."""
        assert Numeric(2**64 - 1) < AlphaNumeric("0")
        assert Numeric(2) < Numeric(10)
        assert AlphaNumeric("10") < AlphaNumeric("9")
        assert AlphaNumeric("b") >= AlphaNumeric("a")

    def test_compare_with_foreign_type(self):
        """Test that ordering against other types is unsupported."""
        with pytest.raises(TypeError):
            parse("1.0.0") < "1.0.0"  # type: ignore
        with pytest.raises(TypeError):
            Numeric(1) < 1  # type: ignore

    def test_equality_with_foreign_type(self):
        """Test that equality against other types is False."""
        assert parse("1.0.0") != "1.0.0"
        assert Numeric(1) != 1


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_metadata(self):
        """Test sorting versions with pre-release and build metadata."""
        versions = [
            "1.0.0-beta",
            "1.0.0+build",
            "1.0.0-alpha.1",
            "1.0.0",
            "1.0.0-alpha",
            "1.0.0-1",
        ]
        assert sorted(versions, key=version_key) == [
            "1.0.0",
            "1.0.0+build",
            "1.0.0-1",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-beta",
        ]

    def test_key_matches_sorted_objects(self):
        """Test that sorting by key agrees with sorting Version objects."""
        versions = [parse(v) for v in ["2.0.0", "1.0.0-a", "1.0.0-1", "1.0.0"]]
        assert sorted(versions, key=version_key) == sorted(versions)

    def test_key_fields(self):
        """Test the shape of the sort key."""
        assert version_key("1.2.3-rc.1+5") == (
            1,
            2,
            3,
            (AlphaNumeric("rc"), Numeric(1)),
            (Numeric(5),),
        )

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [Version(2, 0, 0), Version(1, 0, 0)]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a = "1.0.0"
        b = "1.0.0-1"
        c = "1.0.0-alpha"

        assert compare_versions(a, b) == -1
        assert compare_versions(b, c) == -1
        assert compare_versions(a, c) == -1

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0+build"]:
            assert compare_versions(v, v) == 0
