# SPDX-License-Identifier: MIT
"""Tests for the .gitignore updater."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from hypothesis import assume, given, settings, strategies as st

from wapm_cli.gitignore import ensure_ignored


class TestEnsureIgnored:
    """Tests for ensure_ignored."""

    def test_appends_entry(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("node_modules/")

        assert ensure_ignored(tmp_path) is True
        assert (tmp_path / ".gitignore").read_text() == "node_modules/\nwapm_packages"

    def test_existing_entry_is_left_alone(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("wapm_packages\n*.log\n")

        assert ensure_ignored(tmp_path) is False
        assert (tmp_path / ".gitignore").read_text() == "wapm_packages\n*.log\n"

    def test_substring_counts_as_present(self, tmp_path: Path) -> None:
        """A line merely containing the entry is treated as covering it."""
        (tmp_path / ".gitignore").write_text("old_wapm_packages_backup/\n")

        assert ensure_ignored(tmp_path) is False

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("")

        ensure_ignored(tmp_path)
        assert (tmp_path / ".gitignore").read_text() == "\nwapm_packages"

    def test_missing_file_is_not_created(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ensure_ignored(tmp_path)
        assert not (tmp_path / ".gitignore").exists()

    def test_custom_entry(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("dist/")

        ensure_ignored(tmp_path, entry="target")
        assert (tmp_path / ".gitignore").read_text() == "dist/\ntarget"


gitignore_lines = st.lists(
    st.from_regex(r"[a-zA-Z0-9_*./!-]{0,20}", fullmatch=True),
    max_size=8,
)


class TestEnsureIgnoredIdempotence:
    """Running the updater twice is the same as running it once."""

    @given(lines=gitignore_lines, trailing_newline=st.booleans())
    @settings(max_examples=100)
    def test_second_call_changes_nothing(self, lines: list[str], trailing_newline: bool) -> None:
        content = "\n".join(lines) + ("\n" if trailing_newline else "")
        assume(not any("wapm_packages" in line for line in lines))

        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            gitignore = directory / ".gitignore"
            gitignore.write_text(content)

            assert ensure_ignored(directory) is True
            once = gitignore.read_text()
            assert ensure_ignored(directory) is False
            assert gitignore.read_text() == once
            assert "wapm_packages" in once.splitlines()
