# SPDX-License-Identifier: MIT
"""Command line tool for inspecting, comparing and bumping versions."""

__version__ = "0.1.0"
