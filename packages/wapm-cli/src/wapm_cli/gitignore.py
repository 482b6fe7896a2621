# SPDX-License-Identifier: MIT
"""Keep the installed-packages directory out of version control."""

from __future__ import annotations

from pathlib import Path

from wapm_manifest import IGNORE_FILE_NAME, PACKAGES_DIR_NAME


def ensure_ignored(directory: str | Path, entry: str = PACKAGES_DIR_NAME) -> bool:
    """Append ``entry`` to the .gitignore in ``directory`` unless it is there.

    Any line that contains ``entry`` counts as already ignoring it. This is a
    substring check, not a gitignore pattern match, so "old_wapm_packages/"
    also counts.

    Args:
        directory: Directory holding the .gitignore
        entry: Line to add

    Returns:
        True if the file was changed, False if the entry was already present

    Raises:
        FileNotFoundError: If there is no .gitignore; one is never created
    """
    gitignore_path = Path(directory) / IGNORE_FILE_NAME

    # r+ fails on a missing file instead of creating it
    with open(gitignore_path, "r+", encoding="utf-8", newline="") as f:
        content = f.read()
        if any(entry in line for line in content.splitlines()):
            return False
        f.seek(0, 2)
        f.write(f"\n{entry}")
    return True
