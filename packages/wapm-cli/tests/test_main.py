# SPDX-License-Identifier: MIT
"""Tests for the wapm console entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

import wapm_cli.commands.init as init_command
from wapm_cli.main import main
from wapm_cli.prompts import ScriptedAnswers


def _run_main(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["wapm", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


class TestMain:
    """Tests for how main() reports failures."""

    def test_success(
        self, monkeypatch: pytest.MonkeyPatch, package_dir: Path
    ) -> None:
        assert _run_main(monkeypatch, "init", str(package_dir), "--yes") == 0
        assert (package_dir / "wapm.toml").exists()

    def test_manifest_write_failure(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        package_dir: Path,
    ) -> None:
        manifest_path = package_dir / "wapm.toml"

        def refuse(manifest):
            raise PermissionError(13, "Permission denied", str(manifest_path))

        monkeypatch.setattr(init_command, "save_manifest", refuse)

        assert _run_main(monkeypatch, "init", str(package_dir), "--yes") == 1
        err = capsys.readouterr().err
        assert f"Error: Could not write {manifest_path}: Permission denied" in err

    def test_answers_run_out(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        package_dir: Path,
    ) -> None:
        monkeypatch.setattr(init_command, "ConsoleAnswers", lambda: ScriptedAnswers([]))

        assert _run_main(monkeypatch, "init", str(package_dir)) == 1
        err = capsys.readouterr().err
        assert "Error: No answer given for 'Package name', nothing was written" in err
        assert not (package_dir / "wapm.toml").exists()

    def test_broken_manifest(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        package_dir: Path,
    ) -> None:
        (package_dir / "wapm.toml").write_text("[package\n")

        assert _run_main(monkeypatch, "init", str(package_dir), "--yes") == 1
        assert "Error: Invalid TOML in" in capsys.readouterr().err
