# SPDX-License-Identifier: MIT
"""Render Manifest objects to wapm.toml text and write them to disk."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterable, Optional

from .schema import Command, Manifest, Module, Package

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")


def _key(name: str) -> str:
    return name if _BARE_KEY.fullmatch(name) else _string(name)


def _string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic string escapes, but TOML
    # also forbids a raw DEL
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def _value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return _string(str(value))


def _pairs(items: Iterable[tuple[str, Any]]) -> list[str]:
    return [f"{_key(key)} = {_value(value)}" for key, value in items if value is not None]


def _package_lines(package: Package) -> list[str]:
    lines = ["[package]"]
    lines += _pairs(
        [
            ("name", package.name),
            ("version", package.version),
            ("description", package.description),
            ("license", package.license),
            ("license-file", package.license_file),
            ("readme", package.readme),
            ("repository", package.repository),
            ("homepage", package.homepage),
            ("wasmer-extra-flags", package.wasmer_extra_flags),
        ]
    )
    if package.disable_command_rename:
        lines += _pairs([("disable-command-rename", True)])
    return lines


def _table_lines(header: str, table: Optional[dict[str, str]]) -> list[str]:
    if table is None:
        return []
    return [f"[{header}]", *_pairs(table.items())]


def _module_lines(module: Module) -> list[str]:
    lines = ["[[module]]"]
    lines += _pairs([("name", module.name), ("source", module.source)])
    if not module.abi.is_none:
        lines += _pairs([("abi", module.abi.value)])
    if module.interfaces is not None:
        lines += ["", "[module.interfaces]", *_pairs(module.interfaces.items())]
    return lines


def _command_lines(command: Command) -> list[str]:
    return [
        "[[command]]",
        *_pairs(
            [
                ("name", command.name),
                ("module", command.module),
                ("main_args", command.main_args),
                ("package", command.package),
            ]
        ),
    ]


def render_manifest(manifest: Manifest) -> str:
    """Render a manifest as wapm.toml text.

    Sections come out in a fixed order: [package], [dependencies], [fs],
    [[module]] and [[command]]. Sections whose value is None are left out,
    as are unset optional fields and an ABI of "none".

    Example:
        >>> from wapm_version import parse_version
        >>> pkg = Package(name="demo", version=parse_version("1.0.0"))
        >>> print(render_manifest(Manifest(Path("."), pkg)), end="")
        [package]
        name = "demo"
        version = "1.0.0"
        description = ""
    """
    sections = [
        _package_lines(manifest.package),
        _table_lines("dependencies", manifest.dependencies),
        _table_lines("fs", manifest.fs),
    ]
    sections += [_module_lines(module) for module in manifest.modules or ()]
    sections += [_command_lines(command) for command in manifest.commands or ()]
    return "\n\n".join("\n".join(lines) for lines in sections if lines) + "\n"


def save_manifest(manifest: Manifest) -> Path:
    """Write the manifest to ``manifest.manifest_path`` and return that path.

    The whole document is rendered before the file is opened, so a render
    failure leaves any existing file untouched.
    """
    content = render_manifest(manifest)
    manifest_path = manifest.manifest_path
    with open(manifest_path, "w", encoding="utf-8") as f:
        f.write(content)
    return manifest_path
