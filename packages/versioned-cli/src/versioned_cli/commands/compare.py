# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

import click

from versioned import compare_versions

from ..main import echo_info, pass_context, require_valid, Context

_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


@click.command()
@click.argument("left")
@click.argument("right")
@click.option(
    "--differ",
    is_flag=True,
    help="Also show the most significant part where the versions differ.",
)
@pass_context
def compare(ctx: Context, left: str, right: str, differ: bool) -> None:
    """Compare LEFT and RIGHT.

    Prints the relation between the two versions. Build metadata takes part
    in ordering: a version without build metadata sorts above the same
    version with it.

    \b
    Examples:
        versioned compare 1.0.0-rc.1 1.0.0
        versioned compare 1.2.3 1.3.0 --differ
    """
    left_version = require_valid(left)
    right_version = require_valid(right)

    result = compare_versions(left_version, right_version)
    echo_info(f"{left_version} {_SYMBOLS[result]} {right_version}")

    if differ:
        if result == 0:
            echo_info("Differ at: none")
        else:
            echo_info(f"Differ at: {left_version.differ_at(right_version).value}")
