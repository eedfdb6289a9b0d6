"""Tests for version ordering."""

from __future__ import annotations

import pytest

from helm_list_charts.models import ChartVersion
from helm_list_charts.utils.versions import compare_versions, parse_semver, sort_versions


def _versions(*values: str) -> list[ChartVersion]:
    return [ChartVersion(version=value) for value in values]


class TestParseSemver:
    """Test parse_semver function."""

    def test_valid_version(self) -> None:
        """Should parse a full semantic version."""
        parsed = parse_semver("1.2.3-rc.1+build.5")

        assert parsed is not None
        assert (parsed.major, parsed.minor, parsed.patch) == (1, 2, 3)
        assert parsed.prerelease == "rc.1"

    @pytest.mark.parametrize("text", ["v1.2.3", "1.2", "latest", "", "1.2.3.4"])
    def test_invalid_version(self, text: str) -> None:
        """Should return None for strings that are not semantic versions."""
        assert parse_semver(text) is None


class TestCompareVersions:
    """Test compare_versions function."""

    def test_numeric_precedence(self) -> None:
        """Should compare components numerically, not lexically."""
        assert compare_versions("1.10.0", "1.9.0") > 0
        assert compare_versions("1.9.0", "1.10.0") < 0

    def test_prerelease_below_release(self) -> None:
        """Should rank a pre-release below its release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") < 0
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") < 0

    def test_build_metadata_ignored(self) -> None:
        """Should treat versions differing only in build metadata as equal."""
        assert compare_versions("1.0.0+a", "1.0.0+b") == 0

    def test_fallback_to_string_order(self) -> None:
        """Should compare raw strings when either side is not semver."""
        assert compare_versions("v1.0.0", "1.0.0") > 0
        assert compare_versions("1.10", "1.9") < 0
        assert compare_versions("2.0.0", "latest") < 0

    def test_fallback_equal_strings(self) -> None:
        """Should report identical non-semver strings as equal."""
        assert compare_versions("nightly", "nightly") == 0


class TestSortVersions:
    """Test sort_versions function."""

    def test_newest_first(self) -> None:
        """Should place the highest semantic version first."""
        result = sort_versions(_versions("1.0.0", "2.0.0", "1.10.0", "1.9.0"))

        assert [v.version for v in result] == ["2.0.0", "1.10.0", "1.9.0", "1.0.0"]

    def test_prerelease_after_release(self) -> None:
        """Should list a release ahead of its pre-releases."""
        result = sort_versions(_versions("1.0.0-rc.1", "1.0.0", "0.9.0"))

        assert [v.version for v in result] == ["1.0.0", "1.0.0-rc.1", "0.9.0"]

    def test_non_semver_descending(self) -> None:
        """Should sort non-semver strings in descending string order."""
        result = sort_versions(_versions("a", "c", "b"))

        assert [v.version for v in result] == ["c", "b", "a"]

    def test_mixed_does_not_raise(self) -> None:
        """Should sort a mix of valid and invalid versions without failing."""
        result = sort_versions(_versions("1.0.0", "", "v2", "2.0.0", "latest"))

        assert len(result) == 5
        assert {v.version for v in result} == {"1.0.0", "", "v2", "2.0.0", "latest"}

    def test_stable_for_equal_versions(self) -> None:
        """Should keep document order for versions of equal precedence."""
        first = ChartVersion(version="1.0.0+a", description="first")
        second = ChartVersion(version="1.0.0+b", description="second")

        result = sort_versions([first, second])

        assert result == [first, second]

    def test_does_not_modify_input(self) -> None:
        """Should return a new list."""
        versions = _versions("1.0.0", "2.0.0")
        sort_versions(versions)

        assert [v.version for v in versions] == ["1.0.0", "2.0.0"]
