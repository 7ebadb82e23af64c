# SPDX-License-Identifier: MIT
"""Single-pass scanner splitting a version string into its fragments.

The scanner walks the input once, left to right. It starts in the MAJOR part
and takes every character up to a delimiter of that part. When a delimiter is
found, the fragment is stored and scanning moves to the part the delimiter
introduces. Each part has its own delimiters: while in MAJOR we stop at
``.``, ``-`` or ``+``, but in PATCH only ``-`` and ``+`` end the fragment,
because nothing but a prerelease or build can follow it.

Malformed fragments never stop the scan. They only clear ``is_valid``, so
the numeric fields stay populated for display even when the input is bad.
"""

from __future__ import annotations

from dataclasses import dataclass

from .parts import VersionPart, is_delimiter, is_fragment_valid, next_part, to_uint

VERSION_PREFIXES = ("v", "V")


@dataclass
class ScanResult:
    """Fields collected while scanning a version string.

    Attributes:
        major: Major number, 0 if absent or unparseable
        minor: Minor number, 0 if absent or unparseable
        patch: Patch number, 0 if absent or unparseable
        prerelease: Raw prerelease text, empty if absent
        build: Raw build metadata text, empty if absent
        is_valid: False once any fragment failed validation or conversion
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build: str = ""
    is_valid: bool = True

    def store(self, part: VersionPart, fragment: str) -> None:
        """Validate a closed fragment and record it under its part."""
        if not is_fragment_valid(part, fragment):
            self.is_valid = False

        if part.is_numeric:
            value = to_uint(fragment)
            if value is None:
                self.is_valid = False
            else:
                setattr(self, part.value, value)
        elif part is VersionPart.PRERELEASE:
            self.prerelease = fragment
        else:
            self.build = fragment


def scan(text: str) -> ScanResult:
    """Scan a version string into its fragments.

    Args:
        text: Version string, optionally prefixed with ``v`` or ``V``

    Returns:
        ScanResult with every field filled in on a best-effort basis.
        An empty string scans as a valid ``0.0.0``.

    Examples:
        >>> scan("1.2-alpha+build")
        ScanResult(major=1, minor=2, patch=0, prerelease='alpha', build='build', is_valid=True)

        >>> scan("2s").is_valid
        False
    """
    result = ScanResult()
    if not text:
        return result

    start = 1 if text[0] in VERSION_PREFIXES else 0
    last = len(text) - 1
    part = VersionPart.MAJOR

    for index in range(start, len(text)):
        char = text[index]

        if index < last and not is_delimiter(part, char):
            continue

        # At the end of input the fragment runs through the last character,
        # otherwise it stops just before the delimiter.
        fragment = text[start:] if index == last else text[start:index]
        result.store(part, fragment)

        following = next_part(part, char)
        if following is not None:
            part = following
            start = index + 1

    return result
