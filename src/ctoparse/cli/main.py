# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the ctoparse command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from ctoparse.compiler.artifact import serialize
from ctoparse.compiler.build import CompilerError, compile_files
from ctoparse.parser import ParseError, parse
from ctoparse.validation.checks import validate
from ctoparse.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    discover_sources,
    load_workspace_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the ctoparse CLI."""
    parser = argparse.ArgumentParser(
        prog="ctoparse",
        description="ctoparse: parser for CTO model files",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a model file and print it as JSON",
        description="Parse a .cto file and print its JSON serialization.",
    )
    parse_parser.add_argument("file", help="The .cto file to parse")
    parse_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation; a negative value prints compact JSON (default: 2)",
    )
    parse_parser.add_argument(
        "--output",
        "-o",
        help="Write the JSON to this file instead of standard output",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check model files for errors",
        description="Parse .cto files and check validators and defaults for consistency.",
    )
    check_parser.add_argument("files", nargs="+", help="The .cto files to check")

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Compile all model files of a project",
        description=f"Compile the .cto files of a project into JSON artifacts, honouring {CONFIG_FILE_NAME}.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "parse":
        return _cmd_parse(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "build":
        return _cmd_build(args)
    return 0


def _read_source(path: Path) -> str | None:
    """Read *path*, reporting failures on stderr and returning None."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return None


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    source_path = Path(args.file)
    source = _read_source(source_path)
    if source is None:
        return 1

    try:
        model = parse(source)
    except ParseError as exc:
        print(f"Error: {source_path}: {exc}", file=sys.stderr)
        return 1

    indent = args.indent if args.indent >= 0 else None
    text = serialize(model, indent=indent)
    if args.output is None:
        print(text)
        return 0

    output = Path(args.output)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {output}")
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
        try:
            model = parse(source)
        except ParseError as exc:
            print(f"Error: {source_path}: {exc}", file=sys.stderr)
            has_errors = True
            continue

        result = validate(model)
        for warning in result.warnings:
            print(f"Warning: {source_path}: {warning.message}")
        for error in result.errors:
            print(f"Error: {source_path}: {error.message}", file=sys.stderr)
        if result.has_errors:
            has_errors = True

    if has_errors:
        return 1
    print("No issues found.")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()
    if not directory.is_dir():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        try:
            config = load_workspace_config(config_file)
        except WorkspaceConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        logger.debug("No %s in %s, using defaults", CONFIG_FILE_NAME, directory)
        config = WorkspaceConfig()

    sources = discover_sources(directory, config)
    if not sources:
        print("No .cto files found.")
        return 0

    build_dir = directory / config.build_directory
    print(f"Building {len(sources)} model file(s)...")
    try:
        compile_files(sources, build_dir, source_root=directory, indent=config.indent)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Artifacts written to '{build_dir}'.")
    return 0
