# SPDX-License-Identifier: MIT
"""Validators for answers given to the init wizard.

Each validator takes the raw answer and returns the accepted value, or raises
ValidationError with a message fit to show the user before asking again.
"""

from __future__ import annotations

import re

from wapm_manifest import NAME_PATTERN, NO_MODULE_SOURCE, WASM_EXTENSION
from wapm_version import InvalidVersionError, Version, parse_version

_NAME_RE = re.compile(NAME_PATTERN)


class ValidationError(ValueError):
    """Raised when an answer is rejected."""

    pass


def validate_name(name: str) -> str:
    """Accept a package, module or command name.

    Names start with a letter or digit and continue with letters, digits,
    "-", "_" or ".". A single "namespace/" prefix is allowed.
    """
    if not name:
        raise ValidationError("Please enter a name")
    if not _NAME_RE.fullmatch(name):
        raise ValidationError(
            f'The name "{name}" is not valid, please use alphanumeric characters, '
            '"-", "_" and "." (optionally prefixed with "namespace/")'
        )
    return name


def _validate_tokens(text: str) -> str:
    for token in text.split():
        validate_name(token)
    return text


def validate_version(version: str) -> Version:
    try:
        return parse_version(version)
    except InvalidVersionError as e:
        raise ValidationError(e.message) from e


def validate_wasm_source(source: str) -> str:
    """Accept "none" or any path ending in .wasm."""
    if source == NO_MODULE_SOURCE or source.endswith(WASM_EXTENSION):
        return source
    raise ValidationError(f"The module source path must have a {WASM_EXTENSION} extension")


def validate_license(license: str) -> str:
    """Accept a license identifier or a space-separated license expression."""
    if not license.strip():
        raise ValidationError("Please enter a license")
    return _validate_tokens(license)


def validate_commands(command_names: str) -> str:
    """Accept a space-separated list of command names.

    The empty string means "no commands". The list is returned as one string;
    it is not split here.
    """
    if command_names == "":
        return command_names
    if not command_names.strip():
        raise ValidationError("Please enter a name")
    return _validate_tokens(command_names)
