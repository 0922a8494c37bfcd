# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and ordering.

These tests verify that:
- Canonical version strings survive a parse/render round trip
- Partial versions are padded with zeros
- Exactly one of equals, greater_than and reverse greater_than holds
- version_key sorts in the same order as compare_versions
"""

from __future__ import annotations

from hypothesis import given, strategies as st

from vsemver import Version, compare_versions, parse, version_key


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**6)

# Tags that cannot be mistaken for anything but a pre-release
prerelease_tags = st.one_of(
    st.just(""),
    st.from_regex(r"[0-9A-Za-z][0-9A-Za-z.\-]{0,10}", fullmatch=True),
)

# Small ranges so that ties on every field are common
small_numbers = st.integers(min_value=0, max_value=3)
small_tags = st.sampled_from(["", "alpha", "beta", "rc.1", "rc.10", "z"])


@st.composite
def versions(draw, nums=numbers, tags=prerelease_tags):
    """Generate a Version."""
    return Version(draw(nums), draw(nums), draw(nums), draw(tags))


close_versions = versions(nums=small_numbers, tags=small_tags)


# =============================================================================
# Properties
# =============================================================================


@given(versions())
def test_round_trip(version):
    """Rendering then parsing a canonical version gives it back."""
    s = version.to_string()
    assert parse(s) == version
    assert parse(s).to_string() == s


@given(numbers)
def test_major_only_defaults(major):
    assert parse(f"v{major}") == Version(major, 0, 0, "")


@given(numbers, numbers)
def test_major_minor_defaults(major, minor):
    assert parse(f"v{major}.{minor}") == Version(major, minor, 0, "")


@given(close_versions, close_versions)
def test_exactly_one_relation_holds(a, b):
    relations = [a.equals(b), a.greater_than(b), b.greater_than(a)]
    assert relations.count(True) == 1


@given(close_versions, close_versions)
def test_less_than_is_reverse_greater_than(a, b):
    assert a.less_than(b) == b.greater_than(a)


@given(close_versions, close_versions, close_versions)
def test_transitive(a, b, c):
    if a.greater_than(b) and b.greater_than(c):
        assert a.greater_than(c)


@given(close_versions, close_versions)
def test_version_key_agrees_with_compare(a, b):
    by_key = (version_key(a) > version_key(b)) - (version_key(a) < version_key(b))
    assert by_key == compare_versions(a, b)


@given(st.lists(close_versions, max_size=8))
def test_sorted_matches_version_key(items):
    assert sorted(items) == sorted(items, key=version_key)
