# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import init

__all__ = ["init"]
