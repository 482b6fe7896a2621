# SPDX-License-Identifier: MIT
"""Data model, loading and rendering for wapm manifests (wapm.toml).

Example:
    >>> from wapm_manifest import find_in_directory, render_manifest
    >>>
    >>> manifest = find_in_directory("path/to/package")
    >>> print(render_manifest(manifest))
"""

__version__ = "0.1.0"

from .schema import (
    DEFAULT_LICENSE,
    DEFAULT_MODULE_NAME,
    DEFAULT_MODULE_SOURCE,
    DEFAULT_VERSION,
    IGNORE_FILE_NAME,
    MANIFEST_FILE_NAME,
    MANIFEST_SCHEMA,
    NAME_PATTERN,
    NO_MODULE_SOURCE,
    PACKAGES_DIR_NAME,
    WASI_LAST_VERSION,
    WASM_EXTENSION,
    Abi,
    Command,
    Manifest,
    Module,
    Package,
    get_manifest_schema,
)
from .validator import (
    ManifestError,
    ManifestValidationError,
    ValidationErrorDetail,
    ValidationResult,
    validate_manifest_dict,
)
from .reader import (
    ManifestParseError,
    MissingManifestError,
    find_in_directory,
    load_manifest,
    manifest_from_dict,
)
from .writer import render_manifest, save_manifest

__all__ = [
    # Schema
    "MANIFEST_FILE_NAME",
    "MANIFEST_SCHEMA",
    "IGNORE_FILE_NAME",
    "PACKAGES_DIR_NAME",
    "WASI_LAST_VERSION",
    "DEFAULT_VERSION",
    "DEFAULT_LICENSE",
    "DEFAULT_MODULE_NAME",
    "DEFAULT_MODULE_SOURCE",
    "NO_MODULE_SOURCE",
    "WASM_EXTENSION",
    "NAME_PATTERN",
    "Abi",
    "Package",
    "Module",
    "Command",
    "Manifest",
    "get_manifest_schema",
    # Validation
    "validate_manifest_dict",
    "ValidationResult",
    "ValidationErrorDetail",
    "ManifestError",
    "ManifestValidationError",
    # Reading
    "load_manifest",
    "find_in_directory",
    "manifest_from_dict",
    "MissingManifestError",
    "ManifestParseError",
    # Writing
    "render_manifest",
    "save_manifest",
]
