# SPDX-License-Identifier: MIT
"""Unit tests for semantic version parsing."""

import pytest

from versioned import (
    MAX_PART_VALUE,
    Version,
    VersionPart,
    parse_version,
    is_valid_semver,
)


class TestParseVersion:
    """Tests for parse_version function."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse_version("1.2.3")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prerelease == ""
        assert v.build == ""
        assert v.is_valid is True
        assert v.is_stable is True

    def test_v_prefix(self):
        """Test that a leading v or V is skipped."""
        assert parse_version("v1.2.3") == parse_version("1.2.3")
        assert parse_version("V12.34.56") == Version(12, 34, 56)
        assert str(parse_version("v1.2.3")) == "1.2.3"
        assert parse_version("v1.2.3").is_valid

    def test_missing_minor_and_patch(self):
        """Test that missing numeric parts default to zero."""
        v = parse_version("1")
        assert (v.major, v.minor, v.patch) == (1, 0, 0)
        assert str(v) == "1.0.0"
        assert v.is_valid

        v = parse_version("1.2")
        assert (v.major, v.minor, v.patch) == (1, 2, 0)
        assert str(v) == "1.2.0"
        assert v.is_valid

    def test_empty_string_is_zero(self):
        """Test that the empty string is a valid 0.0.0."""
        v = parse_version("")
        assert v == Version(0, 0, 0)
        assert v.is_valid

    def test_prerelease(self):
        """Test parsing pre-release identifiers."""
        v = parse_version("12.34.56-alpha.beta")
        assert v.prerelease == "alpha.beta"
        assert v.is_valid
        assert v.is_stable is False
        assert v.is_prerelease is True

    def test_prerelease_with_dash(self):
        """Test that dashes inside a pre-release are kept."""
        v = parse_version("12.34.56-alpha-42")
        assert v.prerelease == "alpha-42"
        assert v.is_valid

    def test_build_metadata(self):
        """Test parsing build metadata."""
        v = parse_version("12.34.56+build-42")
        assert v.prerelease == ""
        assert v.build == "build-42"
        assert v.is_valid
        assert v.is_stable is True

    def test_prerelease_and_build(self):
        """Test parsing both pre-release and build metadata."""
        v = parse_version("1.2.3-alpha.t1+test.t2")
        assert v.prerelease == "alpha.t1"
        assert v.build == "test.t2"
        assert str(v) == "1.2.3-alpha.t1+test.t2"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.2-alpha+build", (1, 2, 0, "alpha", "build")),
            ("1-alpha+build", (1, 0, 0, "alpha", "build")),
            ("1.2+build", (1, 2, 0, "", "build")),
            ("1+build", (1, 0, 0, "", "build")),
            ("1.2.3-alpha-b1.t1+test-build.t2", (1, 2, 3, "alpha-b1.t1", "test-build.t2")),
        ],
    )
    def test_short_versions_with_suffixes(self, text, expected):
        """Test suffixes directly after major or minor."""
        v = parse_version(text)
        assert (v.major, v.minor, v.patch, v.prerelease, v.build) == expected
        assert v.is_valid

    def test_canonical_string(self):
        """Test rendering short versions in canonical form."""
        assert str(parse_version("1.2-alpha+build")) == "1.2.0-alpha+build"
        assert str(parse_version("1+build")) == "1.0.0+build"

    def test_base_version(self):
        """Test base_version property."""
        assert parse_version("1.2.3-alpha.1+build").base_version == "1.2.3"

    def test_non_string_input(self):
        """Test that non-string input is rejected."""
        with pytest.raises(TypeError):
            parse_version(123)  # type: ignore


class TestInvalidVersions:
    """Tests for malformed version strings."""

    @pytest.mark.parametrize(
        "text",
        [
            "2s",
            "2.3s",
            "2.3.4s",
            "a.b.c",
            "1.2.3.4",
            "1..2",
            "1.",
            "1.2.3-Ї",
            "1.2.3-alpha+Ї",
            "1.2.3-alpha.Й+Ї",
            "1.2.3-al pha",
            "١.2.3",
        ],
    )
    def test_invalid(self, text):
        """Test that malformed strings are flagged invalid."""
        assert parse_version(text).is_valid is False
        assert is_valid_semver(text) is False

    def test_suffix_after_prerelease_marker_is_valid(self):
        """Test that letters are fine once scanning reached the pre-release."""
        assert parse_version("2.3.4-s").is_valid is True

    def test_invalid_keeps_fields(self):
        """Test that parsing continues after an invalid fragment."""
        v = parse_version("1.x.3-beta+b7")
        assert v.is_valid is False
        assert v.major == 1
        assert v.minor == 0
        assert v.patch == 3
        assert v.prerelease == "beta"
        assert v.build == "b7"

    def test_overflow_is_invalid(self):
        """Test that numbers beyond 32 bits mark the version invalid."""
        v = parse_version(f"1.{MAX_PART_VALUE + 1}.3")
        assert v.is_valid is False
        assert v.minor == 0
        assert v.patch == 3
        assert parse_version(f"{MAX_PART_VALUE}.0.0").is_valid

    def test_huge_number_is_invalid(self):
        """Test that numbers past the interpreter digit limit are just invalid."""
        v = parse_version("9" * 5000)
        assert v.is_valid is False
        assert v.major == 0

        v = parse_version("1." + "9" * 5000 + ".3-rc.1")
        assert v.is_valid is False
        assert (v.major, v.minor, v.patch) == (1, 0, 3)
        assert v.prerelease == "rc.1"

    def test_is_valid_semver_non_string(self):
        """Test that non-string input is simply not valid."""
        assert is_valid_semver(None) is False  # type: ignore


class TestDirectConstruction:
    """Tests for building versions from integers."""

    def test_defaults(self):
        """Test that minor and patch default to zero."""
        v = Version(1)
        assert (v.major, v.minor, v.patch) == (1, 0, 0)
        assert v.prerelease == ""
        assert v.build == ""
        assert v.is_valid

    def test_negative_rejected(self):
        """Test that negative numbers are rejected."""
        with pytest.raises(ValueError):
            Version(-1, 0, 0)

    def test_too_large_rejected(self):
        """Test that numbers beyond 32 bits are rejected."""
        with pytest.raises(ValueError):
            Version(0, MAX_PART_VALUE + 1)

    def test_non_int_rejected(self):
        """Test that non-integers are rejected."""
        with pytest.raises(TypeError):
            Version("1")  # type: ignore

    def test_immutable(self):
        """Test that versions cannot be modified."""
        v = Version(1, 2, 3)
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore


class TestStability:
    """Tests for is_stable."""

    def test_release_is_stable(self):
        assert parse_version("1.2.3").is_stable is True

    def test_prerelease_is_not_stable(self):
        assert parse_version("1.2.3-alpha").is_stable is False

    def test_build_does_not_affect_stability(self):
        assert parse_version("1.2.3+build").is_stable is True

    def test_invalid_can_be_stable(self):
        """Test that stability ignores validity."""
        v = parse_version("1.2.3x")
        assert v.is_valid is False
        assert v.is_stable is True


class TestEquality:
    """Tests for version equality."""

    def test_equal_to_integers(self):
        assert parse_version("1.2.3") == Version(1, 2, 3)
        assert parse_version("1.2") == Version(1, 2)
        assert parse_version("1.0.3") == Version(1, 0, 3)

    def test_equal_to_strings(self):
        assert parse_version("1.2.3") == "1.2.3"
        assert parse_version("1.2") == "1.2"
        assert "v1.0.3" == parse_version("1.0.3")

    def test_suffixes_compared_as_text(self):
        assert parse_version("1.0.0-rc.1+build.5") == "1.0.0-rc.1+build.5"
        assert parse_version("1.0.0-rc.1+build.5") != "1.0.0-rc.1+build.6"
        assert parse_version("1.0.0-rc.2+build.5") != "1.0.0-rc.1+build.5"
        assert parse_version("1.0.0-01") != parse_version("1.0.0-1")

    def test_equality_ignores_validity(self):
        """Test that two differently-invalid parses can be equal."""
        a = parse_version("1.x.3")
        b = parse_version("1.y.3")
        assert not a.is_valid and not b.is_valid
        assert a == b
        assert a == Version(1, 0, 3)

    def test_hash_consistent(self):
        assert hash(parse_version("v1.2.3")) == hash(Version(1, 2, 3))
        assert len({parse_version("1.2"), Version(1, 2, 0), parse_version("1.2.0")}) == 1

    def test_other_types_not_equal(self):
        assert Version(1, 2, 3) != (1, 2, 3)
        assert Version(1, 2, 3) != 1


class TestIncrement:
    """Tests for inc_major, inc_minor and inc_patch."""

    def test_inc_major(self):
        assert parse_version("1.2.3").inc_major() == Version(2, 0, 0)

    def test_inc_minor(self):
        assert parse_version("1.2.3").inc_minor() == parse_version("1.3.0")

    def test_inc_patch(self):
        assert parse_version("1.2.3").inc_patch() == parse_version("1.2.4")

    def test_inc_clears_suffixes(self):
        v = parse_version("1.2.3-alpha+b")
        bumped = v.inc_major()
        assert bumped == Version(2, 0, 0)
        assert bumped.prerelease == ""
        assert bumped.build == ""
        assert v.inc_patch() == "1.2.4"

    def test_inc_wraps_at_maximum(self):
        """Test that increments past the 32-bit maximum wrap to zero."""
        assert parse_version(f"1.2.{MAX_PART_VALUE}").inc_patch() == Version(1, 2, 0)
        assert Version(1, MAX_PART_VALUE, 7).inc_minor() == Version(1, 0, 0)
        assert Version(MAX_PART_VALUE, 5, 6).inc_major() == Version(0, 0, 0)

    def test_inc_returns_new_instance(self):
        v = Version(1, 2, 3)
        v.inc_minor()
        assert v == Version(1, 2, 3)


class TestDifferAt:
    """Tests for differ_at."""

    @pytest.mark.parametrize(
        "other, expected",
        [
            (Version(2, 3, 4), VersionPart.MAJOR),
            (Version(2, 2, 3), VersionPart.MAJOR),
            (Version(1, 3, 4), VersionPart.MINOR),
            (Version(1, 3, 3), VersionPart.MINOR),
            (Version(1, 2, 4), VersionPart.PATCH),
            ("1.2.3-alpha", VersionPart.PRERELEASE),
            ("1.2.3+build", VersionPart.BUILD),
        ],
    )
    def test_differ_at(self, other, expected):
        assert parse_version("1.2.3").differ_at(other) is expected

    def test_equal_versions_fail(self):
        with pytest.raises(AssertionError):
            parse_version("1.2.3").differ_at(Version(1, 2, 3))

    def test_invalid_versions_fail(self):
        with pytest.raises(AssertionError):
            parse_version("1.2.3").differ_at("2.x")
