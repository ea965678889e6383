"""Tests for relver.versions.ranges module."""

from __future__ import annotations

import pytest

from relver.versions.ranges import (
    ComparatorRange,
    ExactVersion,
    InvalidRange,
    MajorWildcard,
    MinorWildcard,
    classify_range,
    format_comparators,
    get_lower_bound,
    get_range,
    get_upper_bound,
    is_lts_range,
    is_major_range,
    satisfies,
)


class TestClassifyRange:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.2.3", ExactVersion("1.2.3")),
            ("=1.2.3", ExactVersion("1.2.3")),
            ("1.x", MajorWildcard(1)),
            ("1.x.x", MajorWildcard(1)),
            ("2.X.X", MajorWildcard(2)),
            ("3.*", MajorWildcard(3)),
            ("1.1.x", MinorWildcard(1, 1)),
            ("1.1.X", MinorWildcard(1, 1)),
            ("1.1", MinorWildcard(1, 1)),
            (">=1.0.0 <1.1.0", ComparatorRange("1.0.0", "1.1.0")),
            (">= 1.0.0 < 1.1.0", ComparatorRange("1.0.0", "1.1.0")),
            (">=1.0.0", ComparatorRange("1.0.0", None)),
            ("<=2.0.0", ComparatorRange(None, "2.0.0", upper_inclusive=True)),
            (">1.0.0", ComparatorRange("1.0.0", None, lower_inclusive=False)),
            ("~1.2.3", ComparatorRange("1.2.3", "1.3.0")),
            ("^1.2.3", ComparatorRange("1.2.3", "2.0.0")),
            ("^0.2.3", ComparatorRange("0.2.3", "0.3.0")),
            ("^0.0.3", ComparatorRange("0.0.3", "0.0.4")),
        ],
    )
    def test_shapes(self, text: str, expected: object) -> None:
        assert classify_range(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["foo", "", "1.x.1", "x.1.0", ">=2.0.0 <1.0.0", ">=1.0.0 >=1.1.0", "~foo", "1.0.0 1.1.0", "=1.0.0 <2.0.0"],
    )
    def test_invalid(self, text: str) -> None:
        assert isinstance(classify_range(text), InvalidRange)


class TestIsMajorRange:
    @pytest.mark.parametrize("text", ["1.x.x", "1.X.X", "1.x", "1.X"])
    def test_major(self, text: str) -> None:
        assert is_major_range(text) is True

    @pytest.mark.parametrize("text", ["1.1.x", "1.1.X", "1.1.0", "~1.0.0", "foo"])
    def test_not_major(self, text: str) -> None:
        assert is_major_range(text) is False


class TestIsLtsRange:
    @pytest.mark.parametrize("text", ["1.1.x", "1.x.x", "1.x", "1.1.X", "1.X.X", "1.X"])
    def test_lts(self, text: str) -> None:
        assert is_lts_range(text) is True

    @pytest.mark.parametrize("text", ["1.1.0", "~1.0.0", "^1.0.0", ">=1.0.0 <2.0.0", "foo"])
    def test_not_lts(self, text: str) -> None:
        assert is_lts_range(text) is False

    @pytest.mark.parametrize("text", ["1.x", "4.x.x", "0.X"])
    def test_major_implies_lts(self, text: str) -> None:
        assert is_major_range(text)
        assert is_lts_range(text)


class TestBounds:
    def test_upper_bound(self) -> None:
        assert get_upper_bound("1.x.x") == "2.0.0"
        assert get_upper_bound("1.x") == "2.0.0"
        assert get_upper_bound("1.0.x") == "1.1.0"
        assert get_upper_bound("1.0.0") == "1.0.0"

    def test_lower_bound(self) -> None:
        assert get_lower_bound("1.x.x") == "1.0.0"
        assert get_lower_bound("1.x") == "1.0.0"
        assert get_lower_bound("1.0.x") == "1.0.0"
        assert get_lower_bound("1.0.0") == "1.0.0"

    def test_unrecognized_has_no_bounds(self) -> None:
        assert get_upper_bound("foo") is None
        assert get_lower_bound("foo") is None

    @pytest.mark.parametrize("major", [0, 1, 9, 12])
    def test_major_wildcard_bounds(self, major: int) -> None:
        for text in (f"{major}.x.x", f"{major}.x"):
            assert get_lower_bound(text) == f"{major}.0.0"
            assert get_upper_bound(text) == f"{major + 1}.0.0"

    @pytest.mark.parametrize(("major", "minor"), [(0, 0), (1, 2), (3, 9)])
    def test_minor_wildcard_bounds(self, major: int, minor: int) -> None:
        text = f"{major}.{minor}.x"
        assert get_lower_bound(text) == f"{major}.{minor}.0"
        assert get_upper_bound(text) == f"{major}.{minor + 1}.0"

    def test_comparator_bounds(self) -> None:
        assert get_lower_bound(">=1.0.0 <1.1.0") == "1.0.0"
        assert get_upper_bound(">=1.0.0 <1.1.0") == "1.1.0"
        assert get_lower_bound("~1.2.3") == "1.2.3"
        assert get_upper_bound("~1.2.3") == "1.3.0"
        assert get_upper_bound(">=1.0.0") is None

    def test_formatted_range_resolves_to_same_bounds(self) -> None:
        rendered = get_range("1.0.0", "1.1.0")
        assert get_lower_bound(rendered) == "1.0.0"
        assert get_upper_bound(rendered) == "1.1.0"


class TestGetRange:
    def test_both_bounds(self) -> None:
        assert get_range("1.0.0", "1.1.0") == ">=1.0.0 <1.1.0"

    def test_lower_only(self) -> None:
        assert get_range("1.0.0") == ">=1.0.0"
        assert get_range("1.0.0", None) == ">=1.0.0"


class TestFormatComparators:
    @pytest.mark.parametrize(
        "text",
        [">=1.0.0 <2.0.0", ">1.0.0 <=2.0.0", "<=2.0.0", ">1.0.0", "<1.0.0"],
    )
    def test_renders_own_operators(self, text: str) -> None:
        cmp = classify_range(text)
        assert isinstance(cmp, ComparatorRange)
        assert format_comparators(cmp) == text
        assert classify_range(format_comparators(cmp)) == cmp

    def test_shorthand_renders_as_comparators(self) -> None:
        cmp = classify_range("^1.2.3")
        assert isinstance(cmp, ComparatorRange)
        assert format_comparators(cmp) == ">=1.2.3 <2.0.0"


class TestSatisfies:
    def test_major_wildcard(self) -> None:
        assert satisfies("1.0.0", "1.x")
        assert satisfies("1.9.3", "1.x.x")
        assert not satisfies("2.0.0", "1.x")
        assert not satisfies("0.9.0", "1.x")

    def test_minor_wildcard(self) -> None:
        assert satisfies("1.1.4", "1.1.x")
        assert not satisfies("1.2.0", "1.1.x")

    def test_wildcards_exclude_prereleases(self) -> None:
        assert not satisfies("1.5.0-beta.1", "1.x")

    def test_exact(self) -> None:
        assert satisfies("1.0.0", "1.0.0")
        assert not satisfies("1.0.1", "1.0.0")

    def test_comparators(self) -> None:
        assert satisfies("1.0.0", ">=1.0.0 <1.1.0")
        assert not satisfies("1.1.0", ">=1.0.0 <1.1.0")
        assert satisfies("2.0.0", "<=2.0.0")
        assert not satisfies("1.0.0", ">1.0.0")
        assert satisfies("1.2.9", "~1.2.3")
        assert not satisfies("1.3.0", "~1.2.3")

    def test_comparator_prerelease_needs_matching_bound(self) -> None:
        assert satisfies("1.0.0-beta.2", ">=1.0.0-beta.1")
        assert not satisfies("1.1.0-beta.1", ">=1.0.0-beta.1")

    def test_invalid_input(self) -> None:
        assert not satisfies("foo", "1.x")
        assert not satisfies("1.0.0", "foo")
