# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Ordering follows Version.greater_than: numeric fields first, then a release
outranks any pre-release, then pre-release tags compare as plain strings.
"""

from __future__ import annotations

from typing import Iterable, Union

from .semver import Version, parse


def _coerce(version: Union[str, Version]) -> Version:
    return parse(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("v1.0.0", "v2.0.0")
        -1
        >>> compare_versions("v1", "v1.0.0")
        0
        >>> compare_versions("v1.0.0", "v1.0.0-rc.1")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1.equals(v2):
        return 0
    return 1 if v1.greater_than(v2) else -1


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["v2.0.0", "v1.0.0", "v1.0.0-alpha"], key=version_key)
        ['v1.0.0-alpha', 'v1.0.0', 'v2.0.0']
    """
    v = _coerce(version)

    # Releases sort after every pre-release of the same numbers
    if v.prerelease:
        prerelease_key: tuple = (0, v.prerelease)
    else:
        prerelease_key = (1, "")

    return (v.major, v.minor, v.patch, prerelease_key)


def latest_version(versions: Iterable[Union[str, Version]]) -> Version:
    """Return the highest of the given versions.

    Raises:
        ValueError: If ``versions`` is empty
        InvalidVersionError: If any version string is invalid
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise ValueError("latest_version() requires at least one version")
    return max(parsed, key=version_key)
