# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

# Import main first so the command modules can import its helpers
from wapm_cli.main import cli  # noqa: F401


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def package_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create an empty package directory named "mypkg" with a .gitignore."""
    project_dir = tmp_path / "mypkg"
    project_dir.mkdir()
    (project_dir / ".gitignore").write_text("__pycache__/\n*.pyc")
    yield project_dir


@pytest.fixture
def existing_package(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a package directory that already has a wapm.toml."""
    project_dir = tmp_path / "existing"
    project_dir.mkdir()
    (project_dir / ".gitignore").write_text("wapm_packages\n")
    (project_dir / "wapm.toml").write_text(
        """[package]
name = "foo"
version = "0.3.1"
description = "Existing package"
license = "MIT"

[dependencies]
"_/sqlite" = "0.1.1"

[[module]]
name = "foo"
source = "foo.wasm"
abi = "emscripten"

[[command]]
name = "foo"
module = "foo"
"""
    )
    yield project_dir
