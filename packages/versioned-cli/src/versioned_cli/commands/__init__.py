# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, check, compare, sort, bump

__all__ = ["parse", "check", "compare", "sort", "bump"]
