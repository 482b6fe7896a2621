# SPDX-License-Identifier: MIT
"""Semantic version parsing for wapm packages.

Versions follow SemVer 2.0.0: MAJOR.MINOR.PATCH with optional pre-release
(``-alpha.1``) and build metadata (``+build.5``). Parse failures say which
component was rejected so the message can be shown to a user as-is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

_IDENTIFIER = re.compile(r"^[0-9a-zA-Z-]+$")
_COMPONENT_NAMES = ("major", "minor", "patch")


class InvalidVersionError(ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Dot-separated pre-release identifiers, if any
        build: Dot-separated build metadata, if any
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None


def _parse_number(version: str, name: str, text: str) -> int:
    if not text:
        raise InvalidVersionError(version, f"Empty {name} version component in '{version}'")
    if not text.isdigit():
        raise InvalidVersionError(
            version, f"Invalid {name} version '{text}': expected a non-negative integer"
        )
    if len(text) > 1 and text[0] == "0":
        raise InvalidVersionError(
            version, f"Leading zeros are not allowed in {name} version '{text}'"
        )
    return int(text)


def _check_identifiers(version: str, label: str, text: str, numeric_zeros: bool) -> None:
    for identifier in text.split("."):
        if not identifier or not _IDENTIFIER.match(identifier):
            raise InvalidVersionError(
                version, f"Invalid {label} identifier '{identifier}' in '{version}'"
            )
        if numeric_zeros and identifier.isdigit() and len(identifier) > 1 and identifier[0] == "0":
            raise InvalidVersionError(
                version, f"Leading zeros are not allowed in {label} identifier '{identifier}'"
            )


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        The parsed Version

    Raises:
        InvalidVersionError: If the string is not a semantic version. The
            message names the offending component.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> str(parse_version("0.0.0-unstable"))
        '0.0.0-unstable'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.match(version_string)
    if match:
        return Version(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("prerelease"),
            build=match.group("buildmetadata"),
        )

    # Slow path: work out which part is wrong for the error message.
    core, _, build = version_string.partition("+")
    core, _, prerelease = core.partition("-")
    parts = core.split(".")
    if len(parts) != 3:
        raise InvalidVersionError(
            version_string,
            f"Expected MAJOR.MINOR.PATCH, got {len(parts)} component(s) in '{version_string}'",
        )
    for name, text in zip(_COMPONENT_NAMES, parts):
        _parse_number(version_string, name, text)
    if "-" in version_string.partition("+")[0]:
        _check_identifiers(version_string, "pre-release", prerelease, numeric_zeros=True)
    if "+" in version_string:
        _check_identifiers(version_string, "build metadata", build, numeric_zeros=False)
    raise InvalidVersionError(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.match(version_string.strip()) is not None
