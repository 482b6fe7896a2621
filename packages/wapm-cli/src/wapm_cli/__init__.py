# SPDX-License-Identifier: MIT
"""Command line tooling for wapm packages.

Example:
    >>> from wapm_cli import ScriptedAnswers, load_init_config, run_init
    >>>
    >>> config = load_init_config("path/to/package")
    >>> run_init(config, ScriptedAnswers(["", "", "", "", "", "none", "yes"]))
"""

__version__ = "0.1.0"

# main must be imported before the command modules, which import its helpers
from .main import cli
from .commands.init import (
    InitError,
    ManifestAlreadyExistsError,
    assemble,
    confirm_and_save,
    load_or_seed,
    run_init,
)
from .config import ConfigError, InitConfig, load_init_config
from .gitignore import ensure_ignored
from .prompts import AnswerSource, ConsoleAnswers, ScriptedAnswers, ask, ask_until_valid
from .validators import ValidationError

__all__ = [
    "cli",
    # Init wizard
    "run_init",
    "load_or_seed",
    "assemble",
    "confirm_and_save",
    "InitError",
    "ManifestAlreadyExistsError",
    # Configuration
    "InitConfig",
    "load_init_config",
    "ConfigError",
    # Prompting
    "AnswerSource",
    "ConsoleAnswers",
    "ScriptedAnswers",
    "ask",
    "ask_until_valid",
    "ValidationError",
    "ensure_ignored",
]
