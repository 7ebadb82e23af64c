# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package provides a hand-scanned semantic version value type with
precedence ordering and increment helpers.

Example:
    >>> from versioned import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> version.is_stable
    False
    >>>
    >>> version < "1.2.3"
    True
    >>> str(version.inc_minor())
    '1.3.0'
"""

__version__ = "0.1.0"

from .parts import (
    MAX_PART_VALUE,
    VersionPart,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    latest_version,
    sort_versions,
    version_key,
)

__all__ = [
    # Version parsing
    "Version",
    "VersionPart",
    "MAX_PART_VALUE",
    "parse_version",
    "is_valid_semver",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "latest_version",
]
