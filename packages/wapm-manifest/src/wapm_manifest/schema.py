# SPDX-License-Identifier: MIT
"""Data model and JSON Schema for the wapm manifest (wapm.toml).

The schema only covers the fields the tooling in this repository reads or
writes. Unknown keys are allowed everywhere so that manifests written by newer
tools still load.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Sequence

from wapm_version import SEMVER_PATTERN, Version

MANIFEST_FILE_NAME = "wapm.toml"
IGNORE_FILE_NAME = ".gitignore"
PACKAGES_DIR_NAME = "wapm_packages"

# Interface version pinned for WASI modules
WASI_LAST_VERSION = "0.0.0-unstable"

DEFAULT_VERSION = "1.0.0"
DEFAULT_LICENSE = "ISC"
DEFAULT_MODULE_NAME = "entry"
DEFAULT_MODULE_SOURCE = "entry.wasm"

# Module source that stands for "no module"
NO_MODULE_SOURCE = "none"
WASM_EXTENSION = ".wasm"

# Package, module and command names, with an optional "namespace/" prefix
NAME_PART = r"[a-zA-Z0-9][a-zA-Z0-9._-]*"
NAME_PATTERN = rf"^(?:{NAME_PART}/)?{NAME_PART}$"


class Abi(enum.Enum):
    """Binary convention a module expects at run time."""

    NONE = "none"
    WASI = "wasi"
    EMSCRIPTEN = "emscripten"

    @classmethod
    def from_str(cls, value: str) -> "Abi":
        try:
            return cls(value.lower())
        except ValueError:
            allowed = ", ".join(abi.value for abi in cls)
            raise ValueError(f"Unknown ABI '{value}', expected one of: {allowed}") from None

    @property
    def is_none(self) -> bool:
        return self is Abi.NONE

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Package:
    """The [package] table.

    Attributes:
        name: Package name, optionally namespaced ("user/pkg")
        version: Package version
        description: Short description
        repository: Source repository URL
        license: License identifier or expression
        license_file: Path to a license file
        homepage: Homepage URL
        readme: Path to the readme
        wasmer_extra_flags: Extra flags passed to wasmer when running commands
        disable_command_rename: Keep command names as declared on install
    """

    name: str
    version: Version
    description: str = ""
    repository: Optional[str] = None
    license: Optional[str] = None
    license_file: Optional[str] = None
    homepage: Optional[str] = None
    readme: Optional[str] = None
    wasmer_extra_flags: Optional[str] = None
    disable_command_rename: bool = False


@dataclass(frozen=True)
class Module:
    """One [[module]] entry."""

    name: str
    source: str
    abi: Abi = Abi.NONE
    interfaces: Optional[dict[str, str]] = None


@dataclass(frozen=True)
class Command:
    """One [[command]] entry, backed by the module named in ``module``."""

    name: str
    module: str
    main_args: Optional[str] = None
    package: Optional[str] = None


@dataclass(frozen=True)
class Manifest:
    """A whole wapm.toml document rooted at ``base_directory_path``.

    ``modules`` and ``commands`` are None rather than empty so that the
    corresponding sections are left out when rendered.
    """

    base_directory_path: Path
    package: Package
    dependencies: Optional[dict[str, str]] = None
    fs: Optional[dict[str, str]] = None
    modules: Optional[tuple[Module, ...]] = None
    commands: Optional[tuple[Command, ...]] = None

    @property
    def manifest_path(self) -> Path:
        return self.base_directory_path / MANIFEST_FILE_NAME

    def with_modules(self, modules: Sequence[Module]) -> "Manifest":
        return replace(self, modules=tuple(modules) or None)

    def with_commands(self, commands: Sequence[Command]) -> "Manifest":
        return replace(self, commands=tuple(commands) or None)


_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string"}}

# JSON Schema for the parsed wapm.toml document
MANIFEST_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "wapm manifest",
    "type": "object",
    "required": ["package"],
    "properties": {
        "package": {
            "type": "object",
            "required": ["name", "version"],
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "version": {"type": "string", "pattern": SEMVER_PATTERN.pattern},
                "description": {"type": "string"},
                "repository": {"type": "string"},
                "license": {"type": "string"},
                "license-file": {"type": "string"},
                "homepage": {"type": "string"},
                "readme": {"type": "string"},
                "wasmer-extra-flags": {"type": "string"},
                "disable-command-rename": {"type": "boolean"},
            },
        },
        "dependencies": _STRING_MAP,
        "fs": _STRING_MAP,
        "module": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "source"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "source": {"type": "string", "minLength": 1},
                    "abi": {"type": "string", "enum": [abi.value for abi in Abi]},
                    "interfaces": _STRING_MAP,
                },
            },
        },
        "command": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "module"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "module": {"type": "string", "minLength": 1},
                    "main_args": {"type": "string"},
                    "package": {"type": "string"},
                },
            },
        },
    },
    "additionalProperties": True,
}


def get_manifest_schema() -> dict:
    """Return a copy of the manifest JSON schema."""
    return MANIFEST_SCHEMA.copy()
