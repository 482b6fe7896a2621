# SPDX-License-Identifier: MIT
"""Structural validation of parsed wapm.toml documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .schema import MANIFEST_SCHEMA


class ManifestError(Exception):
    """Base exception for manifest-related errors."""

    pass


class ManifestValidationError(ManifestError):
    """Raised when a manifest document does not match the schema.

    Attributes:
        errors: Validation errors with field paths and messages
    """

    def __init__(self, errors: list[ValidationErrorDetail]):
        self.errors = errors
        message = f"Manifest validation failed with {len(errors)} error(s)"
        if errors:
            message += f": [{errors[0].field}] {errors[0].message}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """A single validation error.

    Attributes:
        field: Path to the invalid field (e.g. "package.version" or "module[1].abi")
        message: Human-readable error message
        value: The offending value, when there is one
    """

    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    valid: bool
    errors: list[ValidationErrorDetail] = field(default_factory=list)


def _field_path(error: ValidationError) -> str:
    if not error.absolute_path:
        return "<root>"
    path = ""
    for part in error.absolute_path:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _format_error_message(error: ValidationError) -> str:
    if error.validator == "required":
        missing = [name for name in error.validator_value if name not in error.instance]
        if len(missing) == 1:
            return f"Missing required field: {missing[0]}"
        return f"Missing required fields: {', '.join(missing)}"

    if error.validator == "type":
        return f"Expected {error.validator_value}, got {type(error.instance).__name__}"

    # Only package.version carries a pattern
    if error.validator == "pattern":
        return f"'{error.instance}' is not a semantic version"

    if error.validator == "enum":
        allowed = ", ".join(repr(v) for v in error.validator_value)
        return f"Value must be one of: {allowed}"

    if error.validator == "minLength":
        return "Value cannot be empty"

    return error.message


def validate_manifest_dict(document: Any) -> ValidationResult:
    """Validate a parsed wapm.toml document against MANIFEST_SCHEMA.

    Example:
        >>> validate_manifest_dict({"package": {"name": "x", "version": "1.0.0"}}).valid
        True
    """
    if not isinstance(document, dict):
        return ValidationResult(
            valid=False,
            errors=[
                ValidationErrorDetail(
                    field="<root>",
                    message=f"Manifest must be a table, got {type(document).__name__}",
                    value=document,
                )
            ],
        )

    validator = Draft202012Validator(MANIFEST_SCHEMA)
    schema_errors = sorted(
        validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path]
    )
    errors: list[ValidationErrorDetail] = []
    seen: set[tuple[str, str]] = set()
    for error in schema_errors:
        detail = ValidationErrorDetail(
            field=_field_path(error),
            message=_format_error_message(error),
            value=error.instance if error.absolute_path else None,
        )
        # "required" is reported once per missing key but formatted for all of them
        if (detail.field, detail.message) in seen:
            continue
        seen.add((detail.field, detail.message))
        errors.append(detail)
    return ValidationResult(valid=not errors, errors=errors)
