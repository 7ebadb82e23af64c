# SPDX-License-Identifier: MIT
"""Check that version strings are well formed."""

from __future__ import annotations

import click

from versioned import parse_version

from ..main import echo_error, echo_info, echo_success, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--stable",
    is_flag=True,
    help="Also require versions to have no pre-release part.",
)
@pass_context
def check(ctx: Context, versions: tuple[str, ...], stable: bool) -> None:
    """Check that every VERSION is a valid semantic version.

    \b
    Examples:
        versioned check 1.2.3
        versioned check 1.0.0 2.0.0-rc.1 --stable
    """
    errors: list[str] = []

    for text in versions:
        version = parse_version(text)
        if not version.is_valid:
            errors.append(f"'{text}' is not a valid semantic version")
        elif stable and not version.is_stable:
            errors.append(f"'{text}' is a pre-release")
        elif ctx.verbose:
            echo_info(f"  {text}: ok ({version})")

    if errors:
        echo_error(f"Errors ({len(errors)}):")
        for error in errors:
            echo_error(f"  - {error}")
        raise SystemExit(1)

    echo_success(f"All {len(versions)} version(s) valid.")
