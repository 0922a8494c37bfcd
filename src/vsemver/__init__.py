# SPDX-License-Identifier: MIT
"""Parsing and ordering of v-prefixed semantic versions.

Versions look like ``vMAJOR.MINOR.PATCH[-PRERELEASE]``. Partial versions such
as ``v2`` or ``v2.4`` are accepted and padded with zeros. The pre-release tag
is compared as one opaque string, and a release outranks all of its
pre-releases.

Example:
    >>> from vsemver import parse, compare_versions
    >>>
    >>> version = parse("v1.0.7-alpha")
    >>> version.patch
    7
    >>> version.to_string()
    'v1.0.7-alpha'
    >>>
    >>> parse("v2").to_string()
    'v2.0.0'
    >>>
    >>> compare_versions("v1.0.0", "v1.0.0-beta")
    1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse,
    parse_version,
    is_valid_version,
    InvalidVersionError,
    EmptyVersionError,
    IllegalVersionError,
    EmptyVersion,
    IllegalVersion,
)
from .compare import (
    compare_versions,
    version_key,
    latest_version,
)

__all__ = [
    # Version parsing
    "Version",
    "parse",
    "parse_version",
    "is_valid_version",
    "InvalidVersionError",
    "EmptyVersionError",
    "IllegalVersionError",
    "EmptyVersion",
    "IllegalVersion",
    # Version comparison
    "compare_versions",
    "version_key",
    "latest_version",
]
