# SPDX-License-Identifier: MIT
"""Tests for answer validators."""

from __future__ import annotations

import pytest
from hypothesis import assume, given, strategies as st

from wapm_cli.validators import (
    ValidationError,
    validate_commands,
    validate_license,
    validate_name,
    validate_version,
    validate_wasm_source,
)
from wapm_version import Version


class TestValidateName:
    """Tests for validate_name."""

    @pytest.mark.parametrize("name", ["mypkg", "my-pkg", "my_pkg", "v8", "wasmer/python", "lib.core"])
    def test_accepts_valid_names(self, name: str):
        assert validate_name(name) == name

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="Please enter a name"):
            validate_name("")

    @pytest.mark.parametrize("name", ["my pkg", "-pkg", "pkg!", "a/b/c", ".wasm"])
    def test_rejects_invalid_names(self, name: str):
        with pytest.raises(ValidationError, match="is not valid"):
            validate_name(name)

    def test_rejects_trailing_newline(self):
        with pytest.raises(ValidationError):
            validate_name("pkg\n")


class TestValidateVersion:
    """Tests for validate_version."""

    def test_returns_parsed_version(self):
        assert validate_version("1.0.0") == Version(1, 0, 0)

    def test_rejection_carries_parser_message(self):
        with pytest.raises(ValidationError, match="Expected MAJOR.MINOR.PATCH, got 2 component"):
            validate_version("1.0")

    def test_empty_is_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_version("")


class TestValidateWasmSource:
    """Tests for validate_wasm_source."""

    @pytest.mark.parametrize("source", ["none", "entry.wasm", "target/release/app.wasm", ".wasm"])
    def test_accepts(self, source: str):
        assert validate_wasm_source(source) == source

    @pytest.mark.parametrize("source", ["", "None", "app.wat", "app.wasm.gz", "app"])
    def test_rejects(self, source: str):
        with pytest.raises(ValidationError, match="must have a .wasm extension"):
            validate_wasm_source(source)

    @given(prefix=st.text())
    def test_any_prefix_with_extension_is_accepted(self, prefix: str):
        source = prefix + ".wasm"
        assert validate_wasm_source(source) == source

    @given(text=st.text())
    def test_everything_else_is_rejected(self, text: str):
        assume(text != "none" and not text.endswith(".wasm"))
        with pytest.raises(ValidationError):
            validate_wasm_source(text)


class TestValidateLicense:
    """Tests for validate_license."""

    @pytest.mark.parametrize("license", ["ISC", "MIT", "Apache-2.0", "MIT OR Apache-2.0"])
    def test_accepts(self, license: str):
        assert validate_license(license) == license

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="Please enter a license"):
            validate_license("")

    def test_rejects_bad_token(self):
        with pytest.raises(ValidationError, match='"MIT!"'):
            validate_license("MIT! OR ISC")


class TestValidateCommands:
    """Tests for validate_commands."""

    def test_empty_means_no_commands(self):
        assert validate_commands("") == ""

    def test_single_command(self):
        assert validate_commands("app") == "app"

    def test_space_separated_list_is_returned_whole(self):
        assert validate_commands("app app-cli") == "app app-cli"

    def test_whitespace_only_is_rejected(self):
        with pytest.raises(ValidationError):
            validate_commands("   ")

    def test_invalid_token_is_rejected(self):
        with pytest.raises(ValidationError, match='"app!"'):
            validate_commands("app app!")
