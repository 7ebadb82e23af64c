# SPDX-License-Identifier: MIT
"""Compute the next version."""

from __future__ import annotations

from typing import Optional

import click

from versioned import MAX_PART_VALUE, Version

from ..config import DEFAULT_TAG_PREFIX, ConfigError
from ..main import echo_error, echo_info, pass_context, require_valid, Context

_BUMPS = {
    "major": Version.inc_major,
    "minor": Version.inc_minor,
    "patch": Version.inc_patch,
}


@click.command()
@click.argument("part", type=click.Choice(sorted(_BUMPS), case_sensitive=False))
@click.argument("version", required=False)
@click.option(
    "--tag",
    is_flag=True,
    help="Print the result as a release tag using the configured tag_prefix.",
)
@pass_context
def bump(ctx: Context, part: str, version: Optional[str], tag: bool) -> None:
    """Print VERSION with PART increased.

    Lower parts are reset to zero and any pre-release or build metadata is
    dropped. Without VERSION, the [project].version of the current project's
    pyproject.toml is used.

    \b
    Examples:
        versioned bump patch 1.2.3        # 1.2.4
        versioned bump minor 1.2.3-rc.1   # 1.3.0
        versioned bump major --tag        # v2.0.0, from pyproject.toml
    """
    if version is None:
        config = ctx.load_config()
        if not config.version:
            raise ConfigError(f"No [project].version found in {config.project_dir}")
        version = config.version
        if ctx.verbose:
            echo_info(f"Current version: {version} (from pyproject.toml)")

    current = require_valid(version)
    part = part.lower()
    if getattr(current, part) == MAX_PART_VALUE:
        echo_error(f"Cannot bump {part} of {current}: already at {MAX_PART_VALUE}")
        raise SystemExit(1)
    bumped = _BUMPS[part](current)

    if tag:
        config = ctx.find_config()
        prefix = config.tag_prefix if config is not None else DEFAULT_TAG_PREFIX
        echo_info(f"{prefix}{bumped}")
    else:
        echo_info(str(bumped))
