# SPDX-License-Identifier: MIT
"""Version parts, their delimiters and per-part character rules.

A version string is made of up to five fragments::

    MAJOR . MINOR . PATCH - PRERELEASE + BUILD

Each part accepts its own set of delimiters. Numeric parts may be cut short
by a prerelease or build marker, so ``1-alpha`` and ``1.2+build`` are both
understood. The build part is terminal and accepts no delimiter at all.
"""

from __future__ import annotations

import string
from enum import Enum
from typing import Optional

# Numeric parts are unsigned 32-bit integers
MAX_PART_VALUE = 2**32 - 1

_DIGITS = frozenset(string.digits)
_SUFFIX_CHARS = frozenset(string.ascii_letters + string.digits + ".-")


class VersionPart(Enum):
    """Parts of a version, from most to least significant."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"
    BUILD = "build"

    @property
    def is_numeric(self) -> bool:
        """Return True for the major, minor and patch parts."""
        return self in NUMERIC_PARTS


NUMERIC_PARTS = (VersionPart.MAJOR, VersionPart.MINOR, VersionPart.PATCH)

# (current part, delimiter) -> part that follows the delimiter
_TRANSITIONS: dict[VersionPart, dict[str, VersionPart]] = {
    VersionPart.MAJOR: {
        ".": VersionPart.MINOR,
        "-": VersionPart.PRERELEASE,
        "+": VersionPart.BUILD,
    },
    VersionPart.MINOR: {
        ".": VersionPart.PATCH,
        "-": VersionPart.PRERELEASE,
        "+": VersionPart.BUILD,
    },
    VersionPart.PATCH: {
        "-": VersionPart.PRERELEASE,
        "+": VersionPart.BUILD,
    },
    VersionPart.PRERELEASE: {
        "+": VersionPart.BUILD,
    },
    VersionPart.BUILD: {},
}


def is_delimiter(part: VersionPart, char: str) -> bool:
    """Check if a character ends the fragment of the given part.

    Args:
        part: Part currently being scanned
        char: Character to check

    Returns:
        True if ``char`` is a delimiter for ``part``
    """
    return char in _TRANSITIONS[part]


def next_part(part: VersionPart, delimiter: str) -> Optional[VersionPart]:
    """Return the part that follows ``delimiter``, or None if there is none."""
    return _TRANSITIONS[part].get(delimiter)


def is_ascii_digits(text: str) -> bool:
    """Return True if text is non-empty and made of ASCII decimal digits only."""
    return bool(text) and all(c in _DIGITS for c in text)


def is_fragment_valid(part: VersionPart, fragment: str) -> bool:
    """Check that every character of a fragment is legal for its part.

    Numeric parts take ASCII digits only. Prerelease and build take ASCII
    letters, digits, ``.`` and ``-``. An empty fragment has no illegal
    characters and passes; for numeric parts the integer conversion rejects
    it afterwards.
    """
    allowed = _DIGITS if part.is_numeric else _SUFFIX_CHARS
    return all(c in allowed for c in fragment)


def to_uint(fragment: str) -> Optional[int]:
    """Convert a numeric fragment to an unsigned 32-bit integer.

    Returns:
        The integer value, or None if the fragment is empty, contains
        anything but ASCII digits, or does not fit in 32 bits
    """
    if not is_ascii_digits(fragment):
        return None
    # Anything longer than the maximum cannot fit
    digits = fragment.lstrip("0") or "0"
    if len(digits) > len(str(MAX_PART_VALUE)):
        return None
    value = int(digits)
    if value > MAX_PART_VALUE:
        return None
    return value
