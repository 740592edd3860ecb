"""Tests for compiler specifier expansion, compatibility and intersection."""

import itertools
import logging

import pytest

from versioning import (
    CompilerRange,
    are_compilers_compatible,
    compare_versions,
    compilers_intersect,
    expand_compiler_id,
    format_compiler_id,
    version_key,
)


def numeric_compare(first, second):
    """Comparator for plain integer versions."""
    a, b = int(first), int(second)
    return (a > b) - (a < b)


# semantic, four-part, PEP 440 and free-form text versions together
MIXED_VERSIONS = [
    "1.0.0-foo", "1.0.0-rc.1", "1.0.0", "1.0", "1.0.0.1", "1.0.post1",
    "1.0rc1", "1.1", "6.18.0-foo_bar", "abc", "",
]


class TestCompareVersions:
    """Test the default version comparator."""

    def test_numeric_precedence(self):
        assert compare_versions("10.2.0", "6.0.0") > 0
        assert compare_versions("6.0.0", "10.2.0") < 0

    def test_partial_versions_zero_filled(self):
        assert compare_versions("6.0", "6.0.0") == 0
        assert compare_versions("6", "6.0.1") < 0

    def test_prerelease_below_release(self):
        assert compare_versions("1.0.0-rc1", "1.0.0") < 0

    def test_four_part_versions(self):
        assert compare_versions("1.2.3.4", "1.2.3.10") < 0

    def test_unparseable_never_raises(self):
        assert compare_versions("abc", "abd") < 0
        assert compare_versions("same", "same") == 0

    def test_mixed_schemes_share_one_order(self):
        assert compare_versions("1.0.0-foo", "1.0.0") < 0
        assert compare_versions("1.0.0", "1.0.0.1") < 0
        assert compare_versions("1.0.0-foo", "1.0.0.1") < 0

    def test_pep440_prerelease_and_post(self):
        assert compare_versions("1.0rc1", "1.0") < 0
        assert compare_versions("1.0.post1", "1.0") > 0
        assert compare_versions("1.0.post1", "1.0.0.1") < 0

    def test_key_ignores_build_metadata(self):
        assert version_key("1.2.3+build.5") == version_key("1.2.3")

    @pytest.mark.parametrize("a,b,c", itertools.permutations(MIXED_VERSIONS, 3))
    def test_transitive(self, a, b, c):
        if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
            assert compare_versions(a, c) <= 0

    @pytest.mark.parametrize("a,b", itertools.permutations(MIXED_VERSIONS, 2))
    def test_antisymmetric(self, a, b):
        assert (compare_versions(a, b) > 0) == (compare_versions(b, a) < 0)


class TestExpandCompilerId:
    """Test specifier expansion."""

    def test_minimum_version(self):
        assert expand_compiler_id("GCC@>=10.2.0") == CompilerRange("GCC", "10.2.0", None)

    def test_exact_version(self):
        expanded = expand_compiler_id("AC6@6.18.0")
        assert expanded == CompilerRange("AC6", "6.18.0", "6.18.0")
        assert expanded.is_exact

    def test_any_version(self):
        expanded = expand_compiler_id("IAR")
        assert expanded.name == "IAR"
        assert expanded.min_version == "0.0.0"
        assert expanded.max_version is None
        assert expanded.is_any

    def test_trailing_at_means_any_version(self):
        assert expand_compiler_id("GCC@").is_any

    def test_empty_specifier(self):
        assert expand_compiler_id("") == CompilerRange("", "0.0.0", None)


class TestAreCompilersCompatible:
    """Test compatibility of specifier pairs."""

    def test_empty_is_compatible(self):
        assert are_compilers_compatible("GCC", "")
        assert are_compilers_compatible("", "GCC@6.0.0")
        assert are_compilers_compatible("", "")

    def test_exact_below_minimum(self):
        assert not are_compilers_compatible("GCC@6.0.0", "GCC@>=10.2.0")

    def test_exact_above_minimum(self):
        assert are_compilers_compatible("GCC@11.0.0", "GCC@>=10.2.0")

    def test_different_names(self):
        assert not are_compilers_compatible("GCC", "AC6")

    def test_two_minimums(self):
        assert are_compilers_compatible("GCC@>=6.0.0", "GCC@>=10.2.0")

    def test_different_exact_versions(self):
        assert not are_compilers_compatible("GCC@10.2.0", "GCC@10.3.1")

    @pytest.mark.parametrize("first,second", [
        ("GCC@6.0.0", "GCC@>=10.2.0"),
        ("GCC@11.0.0", "GCC@>=10.2.0"),
        ("GCC", "AC6@6.18.0"),
        ("GCC@10.2.0", "GCC@10.3.1"),
        ("AC6", ""),
    ])
    def test_symmetric(self, first, second):
        assert are_compilers_compatible(first, second) == are_compilers_compatible(second, first)

    def test_injected_comparator(self):
        # "10" sorts below "2" as text but not as a number
        assert are_compilers_compatible("X@10", "X@>=2", compare=numeric_compare)


class TestCompilersIntersect:
    """Test intersection of specifier pairs."""

    def test_both_empty(self):
        assert compilers_intersect("", "") == ""

    def test_any_and_minimum(self):
        assert compilers_intersect("GCC", "GCC@>=10.2.0") == "GCC@>=10.2.0"

    def test_one_side_empty(self):
        assert compilers_intersect("GCC@6.0.0", "") == "GCC@6.0.0"
        assert compilers_intersect("", "AC6") == "AC6"

    def test_any_and_any(self):
        assert compilers_intersect("GCC", "GCC") == "GCC"

    def test_higher_minimum_wins(self):
        assert compilers_intersect("GCC@>=6.0.0", "GCC@>=10.2.0") == "GCC@>=10.2.0"
        assert compilers_intersect("GCC@>=10.2.0", "GCC@>=6.0.0") == "GCC@>=10.2.0"

    def test_exact_within_minimum(self):
        assert compilers_intersect("GCC@11.0.0", "GCC@>=10.2.0") == "GCC@11.0.0"
        assert compilers_intersect("GCC@>=10.2.0", "GCC@11.0.0") == "GCC@11.0.0"

    def test_incompatible(self):
        assert compilers_intersect("GCC@6.0.0", "GCC@>=10.2.0") == ""
        assert compilers_intersect("GCC", "AC6") == ""

    def test_equivalent_bounds_written_differently(self):
        assert compilers_intersect("GCC@>=6.0.0", "GCC@6.0", legacy=False) == "GCC@6.0"
        assert compilers_intersect("GCC@6.0", "GCC@>=6.0.0", legacy=False) == "GCC@6.0"

    def test_legacy_requires_identical_bounds(self):
        assert compilers_intersect("GCC@>=6.0.0", "GCC@6.0", legacy=True) == ""
        assert compilers_intersect("GCC@11.0.0", "GCC@>=10.2.0", legacy=True) == "GCC@11.0.0"

    def test_injected_comparator(self):
        assert compilers_intersect("X@>=2", "X@10", compare=numeric_compare) == "X@10"

    def test_four_part_minimum_beats_prerelease_minimum(self):
        assert compilers_intersect("GCC@>=1.0.0.1", "GCC@>=1.0.0-foo") == "GCC@>=1.0.0.1"
        assert compilers_intersect("GCC@>=1.0.0-foo", "GCC@>=1.0.0.1") == "GCC@>=1.0.0.1"

    def test_repeated_merges_are_stable(self):
        merged = "GCC"
        for spec in ("GCC@>=6.0.0", "", "GCC@>=10.2.0", "GCC@12.2.0"):
            merged = compilers_intersect(merged, spec)
        assert merged == "GCC@12.2.0"


class TestFormatCompilerId:
    """Test encoding of ranges back to specifiers."""

    def test_two_sided_range_has_no_specifier(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert format_compiler_id(CompilerRange("GCC", "5.0.0", "6.0.0")) == ""
        assert "no specifier form" in caplog.text

    def test_two_sided_range_legacy_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert format_compiler_id(CompilerRange("GCC", "5.0.0", "6.0.0"), legacy=True) == ""
        assert caplog.text == ""

    def test_minimum(self):
        assert format_compiler_id(CompilerRange("GCC", "10.2.0", None)) == "GCC@>=10.2.0"

    def test_any(self):
        assert format_compiler_id(CompilerRange("GCC")) == "GCC"
