# SPDX-License-Identifier: MIT
"""Semantic version value type.

Supports MAJOR[.MINOR[.PATCH]] with optional pre-release and build metadata:
- Prefix: v1.2.3, V1.2.3
- Pre-release: -alpha, -alpha.1, -beta-2, -rc.1
- Build metadata: +build, +build.123, +20240101

Parsing never raises for malformed text. Instead the resulting version has
``is_valid`` set to False and carries whatever could be read from the input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .parts import MAX_PART_VALUE, VersionPart
from .precedence import compare_fields
from .scanner import scan

VersionLike = Union["Version", str]


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Built directly from integers the version is always valid and has no
    pre-release or build metadata. Use :meth:`Version.parse` (or
    :func:`parse_version`) to build one from a string.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1"), empty if none
        build: Build metadata (e.g., "build.123"), empty if none
        is_valid: Whether the source string was a well-formed version
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = field(default="", init=False)
    build: str = field(default="", init=False)
    is_valid: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= MAX_PART_VALUE:
                raise ValueError(f"{name} must be between 0 and {MAX_PART_VALUE}, got {value}")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a version string.

        Args:
            text: Version string such as "1.2.3", "v1.2" or "1.0.0-rc.1+b5"

        Returns:
            A Version; check ``is_valid`` to know whether the text was well formed

        Raises:
            TypeError: If text is not a string

        Examples:
            >>> Version.parse("1.2-alpha")
            Version(major=1, minor=2, patch=0, prerelease='alpha', build='', is_valid=True)
            >>> Version.parse("2.3s").is_valid
            False
        """
        if not isinstance(text, str):
            raise TypeError(f"Version must be a string, got {type(text).__name__}")

        scanned = scan(text)
        version = cls(scanned.major, scanned.minor, scanned.patch)
        object.__setattr__(version, "prerelease", scanned.prerelease)
        object.__setattr__(version, "build", scanned.build)
        object.__setattr__(version, "is_valid", scanned.is_valid)
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_stable(self) -> bool:
        """Return True if there is no pre-release part, valid or not."""
        return not self.prerelease

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return not self.is_stable

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # Equality and ordering

    def _key(self) -> tuple[int, int, int, str, str]:
        return (self.major, self.minor, self.patch, self.prerelease, self.build)

    def __eq__(self, other: object) -> bool:
        other_version = _coerce(other)
        if other_version is None:
            return NotImplemented
        return self._key() == other_version._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def compare(self, other: VersionLike) -> int:
        """Compare with another version or version string.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        other_version = _coerce(other)
        if other_version is None:
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        return compare_fields(self, other_version)

    def __lt__(self, other: object) -> bool:
        other_version = _coerce(other)
        if other_version is None:
            return NotImplemented
        return compare_fields(self, other_version) < 0

    def __le__(self, other: object) -> bool:
        other_version = _coerce(other)
        if other_version is None:
            return NotImplemented
        return compare_fields(self, other_version) <= 0

    def __gt__(self, other: object) -> bool:
        other_version = _coerce(other)
        if other_version is None:
            return NotImplemented
        return compare_fields(self, other_version) > 0

    def __ge__(self, other: object) -> bool:
        other_version = _coerce(other)
        if other_version is None:
            return NotImplemented
        return compare_fields(self, other_version) >= 0

    # Derived versions

    def inc_major(self) -> "Version":
        """Return a new version with major increased and the rest reset.

        Like the other increments, wraps to 0 past ``MAX_PART_VALUE``.
        """
        return Version((self.major + 1) & MAX_PART_VALUE, 0, 0)

    def inc_minor(self) -> "Version":
        """Return a new version with minor increased and patch reset."""
        return Version(self.major, (self.minor + 1) & MAX_PART_VALUE, 0)

    def inc_patch(self) -> "Version":
        """Return a new version with patch increased."""
        return Version(self.major, self.minor, (self.patch + 1) & MAX_PART_VALUE)

    def differ_at(self, other: VersionLike) -> VersionPart:
        """Return the most significant part where two versions differ.

        Args:
            other: A different, valid version

        Raises:
            AssertionError: If the versions are equal or either is invalid.
                This is a programming error, not a recoverable condition.
        """
        other_version = _coerce(other)
        if other_version is None:
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        if not (self.is_valid and other_version.is_valid):
            raise AssertionError("differ_at requires two valid versions")

        for part in VersionPart:
            if getattr(self, part.value) != getattr(other_version, part.value):
                return part
        raise AssertionError("differ_at cannot compare equal versions")


def _coerce(other: object) -> Version | None:
    if isinstance(other, Version):
        return other
    if isinstance(other, str):
        return Version.parse(other)
    return None


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Same as :meth:`Version.parse`.

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='', is_valid=True)
        >>> str(parse_version("1-rc.1+build.5"))
        '1.0.0-rc.1+build.5'
    """
    return Version.parse(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a well-formed version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        True
        >>> is_valid_semver("1.0.0-Ї")
        False
    """
    if not isinstance(version_string, str):
        return False
    return Version.parse(version_string).is_valid
