# SPDX-License-Identifier: MIT
"""Configuration for the init wizard."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from wapm_manifest import MANIFEST_FILE_NAME, PACKAGES_DIR_NAME

# Environment variable equivalent of `wapm init --yes`
FORCE_YES_ENVVAR = "WAPM_INIT_YES"


class ConfigError(Exception):
    """Raised when the init configuration is unusable."""

    pass


@dataclass(frozen=True)
class InitConfig:
    """Resolved settings for one `wapm init` run.

    Attributes:
        directory: Package directory the manifest belongs to
        force_yes: Skip every question and write the manifest as-is
        fresh: Refuse to edit an existing manifest
        ignore_entry: Line that must be present in the ignore file
    """

    directory: Path
    force_yes: bool = False
    fresh: bool = False
    ignore_entry: str = PACKAGES_DIR_NAME

    @property
    def manifest_path(self) -> Path:
        return self.directory / MANIFEST_FILE_NAME

    def has_manifest(self) -> bool:
        return self.manifest_path.exists()


def load_init_config(
    directory: Optional[str | Path] = None,
    force_yes: bool = False,
    fresh: bool = False,
) -> InitConfig:
    """Build the InitConfig for a package directory.

    Args:
        directory: Package directory (defaults to the current directory)
        force_yes: Skip every question
        fresh: Refuse to edit an existing manifest

    Returns:
        InitConfig with an absolute directory

    Raises:
        ConfigError: If the directory does not exist or is not a directory
    """
    path = Path(directory) if directory is not None else Path.cwd()
    path = path.resolve()

    if not path.exists():
        raise ConfigError(f"Directory does not exist: {path}")
    if not path.is_dir():
        raise ConfigError(f"Not a directory: {path}")
    if not path.name:
        raise ConfigError(f"Cannot derive a package name from {path}")

    return InitConfig(directory=path, force_yes=force_yes, fresh=fresh)
