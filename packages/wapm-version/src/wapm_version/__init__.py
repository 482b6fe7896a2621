# SPDX-License-Identifier: MIT
"""Semantic version parsing for wapm packages.

Example:
    >>> from wapm_version import parse_version, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    'alpha.1'
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> is_valid_semver("1.0")
    False
"""

__version__ = "0.1.0"

from .semver import (
    SEMVER_PATTERN,
    InvalidVersionError,
    Version,
    is_valid_semver,
    parse_version,
)

__all__ = [
    "Version",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
]
