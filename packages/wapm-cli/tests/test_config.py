# SPDX-License-Identifier: MIT
"""Tests for init configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from wapm_cli.config import ConfigError, load_init_config


class TestLoadInitConfig:
    """Tests for load_init_config."""

    def test_resolves_directory(self, package_dir: Path) -> None:
        config = load_init_config(package_dir)

        assert config.directory == package_dir.resolve()
        assert config.manifest_path == package_dir.resolve() / "wapm.toml"
        assert config.ignore_entry == "wapm_packages"
        assert config.force_yes is False
        assert config.fresh is False

    def test_defaults_to_current_directory(
        self, package_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(package_dir)
        assert load_init_config().directory.name == "mypkg"

    def test_flags(self, package_dir: Path) -> None:
        config = load_init_config(package_dir, force_yes=True, fresh=True)
        assert config.force_yes is True
        assert config.fresh is True

    def test_has_manifest(self, package_dir: Path, existing_package: Path) -> None:
        assert load_init_config(package_dir).has_manifest() is False
        assert load_init_config(existing_package).has_manifest() is True

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="does not exist"):
            load_init_config(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "wapm.toml"
        path.write_text("")
        with pytest.raises(ConfigError, match="Not a directory"):
            load_init_config(path)
