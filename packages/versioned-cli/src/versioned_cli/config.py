# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


DEFAULT_TAG_PREFIX = "v"


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Package name
        version: Package version as written in [project]
        tag_prefix: Prefix used when rendering release tags
        allow_prereleases: Whether pre-releases count as candidates for "latest"
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    tag_prefix: str = DEFAULT_TAG_PREFIX
    allow_prereleases: bool = True

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or has fields of the wrong type
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a field has the wrong type
        """
        project = pyproject.get("project", {})
        tool_versioned = pyproject.get("tool", {}).get("versioned", {})

        name = project.get("name", "")
        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project].version must be a string, got {version!r}")

        tag_prefix = tool_versioned.get("tag_prefix", DEFAULT_TAG_PREFIX)
        if not isinstance(tag_prefix, str):
            raise ConfigError(f"[tool.versioned].tag_prefix must be a string, got {tag_prefix!r}")

        allow_prereleases = tool_versioned.get("allow_prereleases", True)
        if not isinstance(allow_prereleases, bool):
            raise ConfigError(
                f"[tool.versioned].allow_prereleases must be a boolean, got {allow_prereleases!r}"
            )

        return cls(
            project_dir=project_dir,
            name=name,
            version=version,
            tag_prefix=tag_prefix,
            allow_prereleases=allow_prereleases,
        )

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return (self.project_dir / "pyproject.toml").exists()


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    # Defaults only, there is no project version to work with
    return CLIConfig(project_dir=project_path)
