# SPDX-License-Identifier: MIT
"""CLI entry point for the wapm command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from wapm_manifest import MANIFEST_FILE_NAME, ManifestError

from .config import ConfigError


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="wapm-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """WebAssembly package manager tooling.

    \b
    Examples:
        wapm init
        wapm init --yes
        wapm -C path/to/package init
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import init
from .prompts import AnswersExhaustedError

cli.add_command(init.init)


def main() -> None:
    """Main entry point for the wapm command."""
    try:
        cli()
    except (ConfigError, init.InitError, ManifestError) as e:
        echo_error(str(e))
        sys.exit(1)
    except AnswersExhaustedError as e:
        echo_error(f"No answer given for {e.prompt.strip(' -')!r}, nothing was written")
        sys.exit(1)
    except OSError as e:
        target = e.filename or MANIFEST_FILE_NAME
        echo_error(f"Could not write {target}: {e.strerror or e}")
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
