# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the ACT command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from act.compiler.build import BuildError, build_project, transpile_file
from act.compiler.errors import TranspileError
from act.compiler.pipeline import format_error, transpile
from act.workspace.config import CONFIG_FILE_NAME, ConfigError, ProjectConfig, load_project_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the ACT CLI."""
    parser = argparse.ArgumentParser(
        prog="act",
        description="ACT - transpile arithmetic scripts to Windows batch files",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # transpile subcommand
    transpile_parser = subparsers.add_parser(
        "transpile",
        help="Transpile a single ACT file",
        description="Transpile an ACT file and print or write the generated batch script.",
    )
    transpile_parser.add_argument("file", help="ACT source file to transpile")
    transpile_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the generated script to this file instead of stdout",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check ACT files for errors",
        description="Transpile ACT files without writing output and report any errors.",
    )
    check_parser.add_argument("files", nargs="+", help="ACT source files to check")

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Build every ACT file in a project",
        description=f"Transpile all sources of a project, configured by an optional '{CONFIG_FILE_NAME}'.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )
    build_parser.add_argument(
        "--force",
        action="store_true",
        help="Regenerate every script, even when it is up to date",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "transpile":
        return _cmd_transpile(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "build":
        return _cmd_build(args)
    return 0


def _print_error(message: str) -> None:
    """Print an error to stderr, in red when stderr is a terminal."""
    if sys.stderr.isatty():
        message = chalk.red(message)
    print(message, file=sys.stderr)


def _print_diagnostic(path: Path, error: TranspileError) -> None:
    _print_error(f"{path}: {format_error(error)}")


def _display_path(path: Path, directory: Path) -> Path:
    """Return *path* relative to *directory* when it lies inside it."""
    if directory in path.parents:
        return path.relative_to(directory)
    return path


def _read_source(path: Path) -> str | None:
    """Read a source file, reporting failures and returning None."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        _print_error(f"Error: cannot read '{path}': {exc}")
        return None


def _cmd_transpile(args: argparse.Namespace) -> int:
    """Handle the transpile subcommand."""
    source_path = Path(args.file)
    if args.output is None:
        source = _read_source(source_path)
        if source is None:
            return 1
        result = transpile(source)
        if isinstance(result.value, TranspileError):
            _print_diagnostic(source_path, result.value)
            return 1
        sys.stdout.write(result.value)
        return 0

    output_path = Path(args.output)
    try:
        result = transpile_file(source_path, output_path)
    except BuildError as exc:
        _print_error(f"Error: {exc}")
        return 1
    if isinstance(result.value, TranspileError):
        _print_diagnostic(source_path, result.value)
        return 1
    print(f"Wrote '{output_path}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    has_errors = False
    for name in args.files:
        source_path = Path(name)
        source = _read_source(source_path)
        if source is None:
            has_errors = True
            continue
        result = transpile(source)
        if isinstance(result.value, TranspileError):
            _print_diagnostic(source_path, result.value)
            has_errors = True

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        _print_error(f"Error: directory '{directory}' does not exist.")
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        try:
            config = load_project_config(config_file)
        except ConfigError as exc:
            _print_error(f"Error: {exc}")
            return 1
    else:
        config = ProjectConfig()

    try:
        outcomes = build_project(directory, config, force=args.force)
    except BuildError as exc:
        _print_error(f"Error: {exc}")
        return 1

    if not outcomes:
        print("No .act files found in the project.")
        return 0

    print(f"Building {len(outcomes)} file(s)...")
    has_errors = False
    for outcome in outcomes:
        if isinstance(outcome.result.value, TranspileError):
            _print_diagnostic(_display_path(outcome.source, directory), outcome.result.value)
            has_errors = True
        elif outcome.cached:
            print(f"  {_display_path(outcome.target, directory)}: up to date")
        else:
            print(f"  {_display_path(outcome.target, directory)}: written")

    return 1 if has_errors else 0
