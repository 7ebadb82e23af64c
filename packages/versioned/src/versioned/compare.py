# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Ordering follows :mod:`versioned.precedence`: numeric parts, then pre-release,
then build metadata. A version without pre-release (or without build
metadata) sorts above one that has it.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Optional, Union

from .semver import Version, parse_version

_version_cmp_key = cmp_to_key(lambda a, b: a.compare(b))


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0-rc.1+build.5")
        1
    """
    return _as_version(version1).compare(_as_version(version2))


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _version_cmp_key(_as_version(version))


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions by precedence.

    Args:
        versions: Version strings or Version objects
        reverse: Sort from highest to lowest

    Returns:
        Sorted list of Version objects
    """
    return sorted((_as_version(v) for v in versions), key=_version_cmp_key, reverse=reverse)


def latest_version(
    versions: Iterable[Union[str, Version]], include_prereleases: bool = True
) -> Optional[Version]:
    """Return the highest version, or None if there is nothing to pick from.

    Args:
        versions: Version strings or Version objects
        include_prereleases: If False, pre-release versions are skipped
    """
    candidates = [
        v for v in map(_as_version, versions) if include_prereleases or v.is_stable
    ]
    if not candidates:
        return None
    return max(candidates, key=_version_cmp_key)
