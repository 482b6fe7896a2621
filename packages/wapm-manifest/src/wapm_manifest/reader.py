# SPDX-License-Identifier: MIT
"""Load wapm.toml documents into Manifest objects."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from wapm_version import parse_version

from .schema import MANIFEST_FILE_NAME, Abi, Command, Manifest, Module, Package
from .validator import ManifestError, ManifestValidationError, validate_manifest_dict


class MissingManifestError(ManifestError):
    """Raised when no wapm.toml exists where one is expected."""

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"{MANIFEST_FILE_NAME} not found in {directory}")


class ManifestParseError(ManifestError):
    """Raised when wapm.toml is not valid TOML."""

    pass


def _package_from_dict(package: dict[str, Any]) -> Package:
    return Package(
        name=package["name"],
        version=parse_version(package["version"]),
        description=package.get("description", ""),
        repository=package.get("repository"),
        license=package.get("license"),
        license_file=package.get("license-file"),
        homepage=package.get("homepage"),
        readme=package.get("readme"),
        wasmer_extra_flags=package.get("wasmer-extra-flags"),
        disable_command_rename=package.get("disable-command-rename", False),
    )


def _module_from_dict(module: dict[str, Any]) -> Module:
    interfaces = module.get("interfaces")
    return Module(
        name=module["name"],
        source=module["source"],
        abi=Abi.from_str(module.get("abi", Abi.NONE.value)),
        interfaces=dict(interfaces) if interfaces is not None else None,
    )


def _command_from_dict(command: dict[str, Any]) -> Command:
    return Command(
        name=command["name"],
        module=command["module"],
        main_args=command.get("main_args"),
        package=command.get("package"),
    )


def manifest_from_dict(document: dict[str, Any], base_directory: str | Path) -> Manifest:
    """Build a Manifest from a parsed wapm.toml document.

    Args:
        document: The parsed TOML document
        base_directory: Directory the manifest belongs to

    Returns:
        The Manifest

    Raises:
        ManifestValidationError: If the document does not match the schema
    """
    result = validate_manifest_dict(document)
    if not result.valid:
        raise ManifestValidationError(result.errors)

    dependencies = document.get("dependencies")
    fs = document.get("fs")
    manifest = Manifest(
        base_directory_path=Path(base_directory),
        package=_package_from_dict(document["package"]),
        dependencies=dict(dependencies) if dependencies is not None else None,
        fs=dict(fs) if fs is not None else None,
    )
    manifest = manifest.with_modules([_module_from_dict(m) for m in document.get("module", [])])
    return manifest.with_commands([_command_from_dict(c) for c in document.get("command", [])])


def load_manifest(manifest_path: str | Path) -> Manifest:
    """Load a wapm.toml file; the manifest's base directory is its parent.

    Raises:
        MissingManifestError: If the file does not exist
        ManifestParseError: If the file is not valid TOML
        ManifestValidationError: If the document does not match the schema
    """
    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        raise MissingManifestError(manifest_path.parent)

    try:
        with open(manifest_path, "rb") as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(f"Invalid TOML in {manifest_path}: {e}") from e

    return manifest_from_dict(document, manifest_path.parent)


def find_in_directory(directory: str | Path) -> Manifest:
    """Load the wapm.toml that lives directly in ``directory``."""
    return load_manifest(Path(directory) / MANIFEST_FILE_NAME)
