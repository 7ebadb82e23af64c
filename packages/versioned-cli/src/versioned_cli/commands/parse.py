# SPDX-License-Identifier: MIT
"""Show the parts of a version string."""

from __future__ import annotations

import json

import click

from versioned import Version, parse_version

from ..main import echo_error, echo_info, echo_success, pass_context, Context


def version_to_dict(version: Version) -> dict:
    """Return the fields of a version as a JSON-friendly dictionary."""
    return {
        "version": str(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": version.prerelease,
        "build": version.build,
        "valid": version.is_valid,
        "stable": version.is_stable,
    }


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the parsed fields as JSON.",
)
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and show its parts.

    Malformed versions are still broken down as far as possible, but the
    command exits with status 1.

    \b
    Examples:
        versioned parse 1.2.3
        versioned parse v1.2-rc.1+build.5 --json
    """
    parsed = parse_version(version)

    if as_json:
        click.echo(json.dumps(version_to_dict(parsed), indent=2))
    else:
        echo_info(f"Version:    {parsed}")
        echo_info(f"Major:      {parsed.major}")
        echo_info(f"Minor:      {parsed.minor}")
        echo_info(f"Patch:      {parsed.patch}")
        if parsed.prerelease or ctx.verbose:
            echo_info(f"Prerelease: {parsed.prerelease or '-'}")
        if parsed.build or ctx.verbose:
            echo_info(f"Build:      {parsed.build or '-'}")
        echo_info(f"Stable:     {'yes' if parsed.is_stable else 'no'}")

    if not parsed.is_valid:
        echo_error(f"'{version}' is not a valid semantic version")
        raise SystemExit(1)

    if ctx.verbose and not as_json:
        echo_success("Valid semantic version")
