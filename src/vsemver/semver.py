# SPDX-License-Identifier: MIT
"""Parsing and rendering of v-prefixed semantic versions.

Accepts ``vMAJOR.MINOR.PATCH[-PRERELEASE]`` as well as partial versions such
as ``v2`` or ``v2.4``, whose missing trailing fields default to zero.
The prerelease suffix is kept as one opaque string.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

logger = logging.getLogger(__name__)

# A numeric field is one or more ASCII digits; no sign, no whitespace.
_NUMERIC_RUN = re.compile(r"[0-9]+")

_SEPARATORS = ".-"


class InvalidVersionError(ValueError):
    """Raised when a string is not a valid version."""

    def __init__(self, version: object, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


class EmptyVersionError(InvalidVersionError):
    """Raised when the version string is empty."""


class IllegalVersionError(InvalidVersionError):
    """Raised when a non-empty version string violates the version grammar."""


# Short names for callers that match on the error kind.
EmptyVersion = EmptyVersionError
IllegalVersion = IllegalVersionError


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release tag (e.g. "beta", "rc.2"); empty when the
            version is a release
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""

    def to_string(self) -> str:
        """Return the canonical ``vMAJOR.MINOR.PATCH[-PRERELEASE]`` form."""
        if self.prerelease:
            return f"v{self.major}.{self.minor}.{self.patch}-{self.prerelease}"
        return f"v{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.to_string()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries a pre-release tag."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the rendering without the pre-release tag."""
        return f"v{self.major}.{self.minor}.{self.patch}"

    def equals(self, other: Version) -> bool:
        """Return True if all four fields of both versions are identical."""
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.prerelease == other.prerelease
        )

    def greater_than(self, other: Version) -> bool:
        """Return True if this version is higher than ``other``.

        Numeric fields are compared in order and the first one that differs
        decides, as in ordinary tuple ordering: a lower major is never rescued
        by a higher minor or patch. With equal numbers, a release outranks any
        pre-release and two pre-release tags are compared as plain strings.
        """
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return mine > theirs

        if self.prerelease == other.prerelease:
            return False
        if not self.prerelease:
            return True
        if not other.prerelease:
            return False
        return self.prerelease > other.prerelease

    def less_than(self, other: Version) -> bool:
        """Return True if this version is lower than ``other``."""
        return not self.equals(other) and not self.greater_than(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self.greater_than(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self.less_than(other)


class _ParseState(IntEnum):
    """Parser states. Parsing only ever moves forward through these."""

    AT_START = 0
    FOUND_V = 1
    FOUND_MAJOR = 2
    FOUND_MINOR = 3
    FOUND_PATCH = 4
    FOUND_PRERELEASE = 5


# Field read while in each state
_NUMERIC_FIELDS = {
    _ParseState.FOUND_V: "major",
    _ParseState.FOUND_MAJOR: "minor",
    _ParseState.FOUND_MINOR: "patch",
}


def _illegal(version_string: object, message: str) -> IllegalVersionError:
    logger.debug("Rejected version %r: %s", version_string, message)
    return IllegalVersionError(version_string, f"Illegal version {version_string!r}: {message}")


def _read_number(version_string: str, pos: int, field: str) -> tuple[int, int, str]:
    """Read the numeric run starting at ``pos``.

    The run ends at the next separator or at the end of the string.

    Returns:
        The parsed number, the position just past the separator, and the
        separator itself ("" at end of string)
    """
    end = pos
    while end < len(version_string) and version_string[end] not in _SEPARATORS:
        end += 1

    run = version_string[pos:end]
    if not _NUMERIC_RUN.fullmatch(run):
        raise _illegal(version_string, f"invalid {field} version {run!r}")

    if end == len(version_string):
        return int(run), end, ""
    return int(run), end + 1, version_string[end]


def parse(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Missing minor and patch fields default to zero, and everything after the
    last numeric field is kept verbatim as the pre-release tag.

    Args:
        version_string: A string of the form ``vMAJOR[.MINOR[.PATCH]][-PRERELEASE]``

    Returns:
        A Version object with parsed components

    Raises:
        EmptyVersionError: If the string is empty
        IllegalVersionError: If the string does not follow the version grammar

    Examples:
        >>> parse("v1.0.7-alpha")
        Version(major=1, minor=0, patch=7, prerelease='alpha')

        >>> parse("v2.4")
        Version(major=2, minor=4, patch=0, prerelease='')
    """
    if not isinstance(version_string, str):
        raise _illegal(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )
    if not version_string:
        logger.debug("Rejected empty version string")
        raise EmptyVersionError(version_string, "Version string cannot be empty")

    fields: dict[str, Optional[int]] = {"major": None, "minor": None, "patch": None}
    prerelease = ""
    state = _ParseState.AT_START
    pos = 0

    while pos < len(version_string):
        if state == _ParseState.AT_START:
            if version_string[pos] != "v":
                raise _illegal(version_string, "missing 'v' prefix")
            pos += 1
            state = _ParseState.FOUND_V
        elif state in _NUMERIC_FIELDS:
            field = _NUMERIC_FIELDS[state]
            fields[field], pos, separator = _read_number(version_string, pos, field)
            # An empty tail after patch is an empty pre-release tag
            if separator and pos == len(version_string) and field != "patch":
                raise _illegal(version_string, f"nothing after {separator!r}")
            # A hyphen ends the numeric fields early
            state = _ParseState.FOUND_PATCH if separator == "-" else _ParseState(state + 1)
        else:
            prerelease = version_string[pos:]
            pos = len(version_string)
            state = _ParseState.FOUND_PRERELEASE

    if state < _ParseState.FOUND_MAJOR:
        raise _illegal(version_string, "missing major version")

    return Version(
        major=fields["major"] or 0,
        minor=fields["minor"] or 0,
        patch=fields["patch"] or 0,
        prerelease=prerelease,
    )


parse_version = parse


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("v1.2.3-rc.2")
        True
        >>> is_valid_version("1.2.3")
        False
    """
    try:
        parse(version_string)
    except InvalidVersionError:
        return False
    return True
