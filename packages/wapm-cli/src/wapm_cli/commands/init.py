# SPDX-License-Identifier: MIT
"""Create or update the wapm.toml of a package by asking questions."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path, PureWindowsPath
from typing import Optional

import click

from wapm_manifest import (
    DEFAULT_LICENSE,
    DEFAULT_MODULE_NAME,
    DEFAULT_MODULE_SOURCE,
    DEFAULT_VERSION,
    IGNORE_FILE_NAME,
    MANIFEST_FILE_NAME,
    NO_MODULE_SOURCE,
    PACKAGES_DIR_NAME,
    WASI_LAST_VERSION,
    Abi,
    Command,
    Manifest,
    ManifestError,
    Module,
    Package,
    find_in_directory,
    render_manifest,
    save_manifest,
)
from wapm_version import parse_version

from ..config import FORCE_YES_ENVVAR, ConfigError, InitConfig, load_init_config
from ..gitignore import ensure_ignored
from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context
from ..prompts import AnswerSource, ConsoleAnswers, ask, ask_until_valid
from ..validators import (
    validate_commands,
    validate_license,
    validate_name,
    validate_version,
    validate_wasm_source,
)

INTRO = f"""\
This utility will walk you through creating a {MANIFEST_FILE_NAME} file.
It only covers the most common items, and tries to guess sensible defaults.

Use `wapm add <pkg>` afterwards to add a package and
save it as a dependency in the {MANIFEST_FILE_NAME} file.

Press ^C at any time to quit."""

# Label, ABI and interfaces seeded for each ABI choice, in menu order
ABI_CHOICES: tuple[tuple[str, Abi, Optional[dict[str, str]]], ...] = (
    ("None", Abi.NONE, None),
    ("WASI", Abi.WASI, {"wasi": WASI_LAST_VERSION}),
    ("Emscripten", Abi.EMSCRIPTEN, None),
)


class InitError(Exception):
    """Raised when a package directory cannot be initialized."""

    pass


class ManifestAlreadyExistsError(InitError):
    """Raised in fresh mode when the directory already has a manifest."""

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"Manifest file already exists in {directory}")


def seed_manifest(directory: str | Path) -> Manifest:
    """Return the manifest used when a directory has none yet."""
    directory = Path(directory)
    package = Package(
        name=directory.resolve().name,
        version=parse_version(DEFAULT_VERSION),
        license=DEFAULT_LICENSE,
    )
    return Manifest(
        base_directory_path=directory,
        package=package,
        modules=(Module(DEFAULT_MODULE_NAME, DEFAULT_MODULE_SOURCE),),
    )


def load_or_seed(directory: str | Path, fresh: bool = False) -> Manifest:
    """Load the manifest in ``directory``, or seed a new one if there is none.

    Raises:
        ManifestAlreadyExistsError: If ``fresh`` and a manifest exists
        ManifestError: If the existing manifest cannot be read
    """
    directory = Path(directory)
    if (directory / MANIFEST_FILE_NAME).exists():
        if fresh:
            raise ManifestAlreadyExistsError(directory)
        return find_in_directory(directory)
    return seed_manifest(directory)


def module_name_from_source(source: str) -> str:
    """Guess a module name from its source path ("build/app.wasm" -> "app")."""
    # PureWindowsPath splits on both "/" and "\"
    return PureWindowsPath(source).stem


def _default_module(index: int) -> Module:
    if index == 0:
        return Module(DEFAULT_MODULE_NAME, DEFAULT_MODULE_SOURCE)
    return Module("", NO_MODULE_SOURCE)


def ask_package_fields(package: Package, answers: AnswerSource) -> Package:
    """Ask for the [package] fields, offering the current values as defaults."""
    name = ask_until_valid(answers, "Package name", package.name, validate_name)
    version = ask_until_valid(answers, "Version", str(package.version), validate_version)
    description = ask(answers, "Description", package.description) or ""
    repository = ask(answers, "Repository", package.repository)
    license = ask_until_valid(answers, "License", package.license, validate_license)
    return replace(
        package,
        name=name,
        version=version,
        description=description,
        repository=repository,
        license=license,
    )


def collect_modules(answers: AnswerSource) -> tuple[list[Module], list[Command]]:
    """Ask for modules until a source of "none" is given.

    Modules with a WASI or Emscripten ABI may also declare commands; each
    non-empty answer becomes one Command owned by that module.

    Returns:
        The modules and commands, in the order they were entered
    """
    modules: list[Module] = []
    commands: list[Command] = []

    while True:
        echo_info(f"Enter the data for the Module ({len(modules) + 1})")
        module = _default_module(len(modules))

        source = ask_until_valid(answers, " - Source (path)", module.source, validate_wasm_source)
        if source == NO_MODULE_SOURCE:
            break

        default_name = module_name_from_source(source)
        name = ask_until_valid(answers, " - Name", default_name, validate_name)

        labels = [label for label, _, _ in ABI_CHOICES]
        _, abi, interfaces = ABI_CHOICES[answers.select(" - ABI", labels, 0)]
        module = Module(
            name=name,
            source=source,
            abi=abi,
            interfaces=dict(interfaces) if interfaces is not None else None,
        )

        if not abi.is_none:
            command_names = ask_until_valid(
                answers, " - Commands (space separated)", default_name, validate_commands
            )
            if command_names:
                commands.append(Command(name=command_names, module=module.name))

        modules.append(module)

    return modules, commands


def assemble(manifest: Manifest, answers: AnswerSource) -> Manifest:
    """Walk through the package fields and modules, returning the new manifest.

    The module and command lists are rebuilt from the answers; everything
    else not asked about (dependencies, fs, extra package fields) is kept.
    """
    package = ask_package_fields(manifest.package, answers)
    modules, commands = collect_modules(answers)
    manifest = replace(manifest, package=package)
    return manifest.with_modules(modules).with_commands(commands)


def confirm_and_save(
    manifest: Manifest,
    answers: AnswerSource,
    force_yes: bool = False,
    verbose: bool = False,
    ignore_entry: str = PACKAGES_DIR_NAME,
) -> bool:
    """Show the manifest and write it once confirmed.

    Under ``force_yes`` nothing is asked. After writing, ``ignore_entry`` is
    added to .gitignore on a best-effort basis.

    Returns:
        True if the manifest was written, False if the user declined
    """
    lead = "Wrote to" if force_yes else "About to write to"
    echo_info(f"\n{lead} {manifest.base_directory_path}:\n\n{render_manifest(manifest)}\n")

    if not force_yes and not answers.confirm("Is this OK?", True):
        echo_info("Aborted.")
        return False

    manifest_path = save_manifest(manifest)
    if not force_yes:
        echo_success(f"Wrote {manifest_path}")

    try:
        ensure_ignored(manifest.base_directory_path, ignore_entry)
    except OSError as e:
        if verbose:
            echo_warning(f"Could not update {IGNORE_FILE_NAME}: {e}")
    return True


def run_init(config: InitConfig, answers: AnswerSource, verbose: bool = False) -> bool:
    """Run the whole init flow for one directory.

    Returns:
        True if a manifest was written
    """
    if verbose:
        if config.has_manifest():
            echo_info(f"Loading {config.manifest_path}")
        else:
            echo_info(f"No {MANIFEST_FILE_NAME} in {config.directory}, starting from defaults")

    manifest = load_or_seed(config.directory, fresh=config.fresh)
    if not config.force_yes:
        echo_info(INTRO)
        manifest = assemble(manifest, answers)
    return confirm_and_save(
        manifest,
        answers,
        force_yes=config.force_yes,
        verbose=verbose,
        ignore_entry=config.ignore_entry,
    )


@click.command()
@click.argument(
    "directory",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "-y",
    "--yes",
    "force_yes",
    is_flag=True,
    envvar=FORCE_YES_ENVVAR,
    help="Write the manifest without asking any questions.",
)
@click.option(
    "--fresh",
    is_flag=True,
    help=f"Fail if {MANIFEST_FILE_NAME} already exists instead of editing it.",
)
@pass_context
def init(ctx: Context, directory: Optional[Path], force_yes: bool, fresh: bool) -> None:
    """Create or update the wapm.toml of a package.

    DIRECTORY defaults to the current directory. An existing wapm.toml
    supplies the defaults; otherwise the directory name is used as the
    package name.

    \b
    Examples:
        wapm init
        wapm init path/to/package --yes
    """
    try:
        config = load_init_config(directory or ctx.project_dir, force_yes=force_yes, fresh=fresh)
        run_init(config, ConsoleAnswers(), verbose=ctx.verbose)
    except (ConfigError, InitError, ManifestError) as e:
        echo_error(str(e))
        raise SystemExit(1) from e
