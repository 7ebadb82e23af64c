# SPDX-License-Identifier: MIT
"""CLI entry point for the versioned command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from versioned import Version, parse_version

from .config import CLIConfig, ConfigError, find_project_root, load_config


class InvalidVersionError(Exception):
    """Raised when a command needs a well-formed version and gets a bad one."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def find_config(self) -> Optional[CLIConfig]:
        """Load configuration if a project can be found, None otherwise."""
        if self.project_dir is None:
            try:
                find_project_root()
            except ConfigError:
                return None
        return self.load_config()


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def require_valid(text: str) -> Version:
    """Parse a version string, raising if it is malformed.

    Raises:
        InvalidVersionError: If the string is not a well-formed version
    """
    version = parse_version(text)
    if not version.is_valid:
        raise InvalidVersionError(text)
    return version


@click.group()
@click.version_option(package_name="versioned")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool.

    Parse, validate, compare, sort and bump semantic versions.

    \b
    Examples:
        versioned parse v1.2.3-rc.1+build.5
        versioned check 1.2.3 2.0.0-beta
        versioned compare 1.0.0-rc.1 1.0.0
        versioned sort 1.10.0 1.9.0 1.0.0-alpha
        versioned bump minor
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import parse, check, compare, sort, bump

cli.add_command(parse.parse)
cli.add_command(check.check)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(bump.bump)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
