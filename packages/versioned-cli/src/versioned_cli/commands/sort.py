# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import click

from versioned import latest_version, parse_version, sort_versions

from ..main import echo_error, echo_info, echo_warning, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort from highest to lowest.",
)
@click.option(
    "--latest",
    is_flag=True,
    help="Only print the highest version.",
)
@click.option(
    "--stable-only",
    is_flag=True,
    help="Leave out pre-release versions.",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    reverse: bool,
    latest: bool,
    stable_only: bool,
) -> None:
    """Sort VERSIONS by precedence, one per line.

    Invalid versions are skipped with a warning. With --latest, pre-releases
    are also left out when the project sets allow_prereleases = false under
    [tool.versioned].

    \b
    Examples:
        versioned sort 1.10.0 1.9.0 1.0.0-alpha
        versioned sort --latest --stable-only 1.0.0 2.0.0-rc.1
    """
    if latest and not stable_only:
        config = ctx.find_config()
        if config is not None and not config.allow_prereleases:
            stable_only = True

    candidates = []
    for text in versions:
        version = parse_version(text)
        if not version.is_valid:
            echo_warning(f"Skipping invalid version '{text}'")
            continue
        if stable_only and not version.is_stable:
            if ctx.verbose:
                echo_info(f"Skipping pre-release '{text}'")
            continue
        candidates.append(version)

    if latest:
        best = latest_version(candidates)
        if best is None:
            echo_error("No matching versions")
            raise SystemExit(1)
        echo_info(str(best))
        return

    for version in sort_versions(candidates, reverse=reverse):
        echo_info(str(version))
