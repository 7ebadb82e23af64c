# SPDX-License-Identifier: MIT
"""Precedence rules for ordering versions.

Numeric parts are compared first. Ties are broken by the prerelease text and
then by the build text, both split into dot-separated identifiers.

Note:
    A version *without* a suffix sorts above one *with* it. For prerelease
    this is plain SemVer (``1.0.0-alpha < 1.0.0``). The same rule is applied
    to build metadata, so ``1.0.0+build.5 < 1.0.0``. SemVer 2.0.0 says build
    metadata must be ignored for precedence; this deviation is intentional
    and kept for compatibility with existing orderings.
"""

from __future__ import annotations

from typing import Protocol

from .parts import to_uint


class _Comparable(Protocol):
    major: int
    minor: int
    patch: int
    prerelease: str
    build: str


def _sign(left, right) -> int:
    if left == right:
        return 0
    return -1 if left < right else 1


def compare_identifiers(left: str, right: str) -> int:
    """Compare two dot-free identifiers.

    Two all-digit identifiers that fit in 32 bits are compared as integers
    first (``2 < 11``). If that does not decide, or either side has
    non-digits or is too large, the identifiers are compared as text
    (``"01" < "1"``, ``"alpha" < "beta"``).

    Returns:
        -1, 0 or 1
    """
    left_value = to_uint(left)
    right_value = to_uint(right)
    if left_value is not None and right_value is not None:
        result = _sign(left_value, right_value)
        if result:
            return result
    return _sign(left, right)


def compare_suffix(left: str, right: str) -> int:
    """Compare two prerelease or build strings.

    Args:
        left: Raw suffix text, empty when absent
        right: Raw suffix text, empty when absent

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right
    """
    # Presence sorts below absence
    if left and not right:
        return -1
    if right and not left:
        return 1
    if not left:
        return 0

    left_ids = left.split(".")
    right_ids = right.split(".")
    for a, b in zip(left_ids, right_ids):
        result = compare_identifiers(a, b)
        if result:
            return result

    # Shared identifiers are equal, the shorter list is a prefix
    return _sign(len(left_ids), len(right_ids))


def compare_fields(left: _Comparable, right: _Comparable) -> int:
    """Three-way comparison of two versions by precedence.

    ``is_valid`` plays no part in ordering.
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(left, attr), getattr(right, attr))
        if result:
            return result

    result = compare_suffix(left.prerelease, right.prerelease)
    if result == 0:
        result = compare_suffix(left.build, right.build)
    return result
