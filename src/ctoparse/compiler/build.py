# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental compilation of .cto files into JSON artifacts.

Implements a CMake-style cache: an artifact is reused when it already exists
and is strictly newer than the corresponding source file. Artifacts mirror
the source layout below the sources' common root directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ctoparse.compiler.artifact import ARTIFACT_SUFFIX, read_artifact, write_artifact
from ctoparse.model import Model
from ctoparse.parser import ParseError, parse

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a source file cannot be read or parsed, or its artifact cannot be written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def compile_files(
    files: list[Path],
    build_dir: Path,
    source_root: Path | None = None,
    indent: int | None = 2,
) -> dict[Path, Model]:
    """Compile a list of .cto source files.

    For each file, the compiler:
    1. Checks whether an up-to-date artifact already exists (cache hit).
    2. Parses the source file if no valid cache is found.
    3. Writes the artifact to *build_dir* (mirroring the source layout).

    Args:
        files: Paths to the .cto source files to compile.
        build_dir: Root directory for compiled artifacts.
        source_root: Directory the artifact layout is relative to. Defaults to
            the common parent directory of *files*.
        indent: JSON indentation for written artifacts.

    Returns:
        A mapping from each source path to its parsed :class:`Model`, in the
        order given.

    Raises:
        CompilerError: If a source file cannot be read or fails to parse, or
            its artifact cannot be written.
    """
    if not files:
        return {}
    root = source_root if source_root is not None else _common_root(files)
    compiled: dict[Path, Model] = {}
    for source_file in files:
        compiled[source_file] = _compile_file(source_file, _artifact_path(source_file, root, build_dir), indent)
    return compiled


# ################
# Implementation
# ################


def _common_root(files: list[Path]) -> Path:
    return Path(os.path.commonpath([str(f.resolve().parent) for f in files]))


def _artifact_path(source_file: Path, root: Path, build_dir: Path) -> Path:
    """Return the artifact path for *source_file*.

    ``root/models/a.cto`` maps to ``build_dir/models/a.cto.json``.
    """
    try:
        rel = source_file.resolve().relative_to(root.resolve())
    except ValueError as exc:
        raise CompilerError(f"Source file '{source_file}' is not under '{root}'") from exc
    stem = rel.name[: -len(rel.suffix)] if rel.suffix else rel.name
    return build_dir / rel.parent / (stem + ARTIFACT_SUFFIX)


def _is_up_to_date(source_file: Path, artifact: Path) -> bool:
    """Return True if *artifact* exists and is strictly newer than *source_file*."""
    if not artifact.exists() or not source_file.exists():
        return False
    return artifact.stat().st_mtime > source_file.stat().st_mtime


def _compile_file(source_file: Path, artifact: Path, indent: int | None) -> Model:
    if _is_up_to_date(source_file, artifact):
        try:
            model = read_artifact(artifact)
        except (OSError, KeyError, ValueError) as exc:
            logger.debug("Ignoring unreadable artifact %s: %s", artifact, exc)
        else:
            logger.debug("Reusing artifact %s", artifact)
            return model

    try:
        source_text = source_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise CompilerError(f"Cannot read source file '{source_file}': {exc}") from exc

    try:
        model = parse(source_text)
    except ParseError as exc:
        raise CompilerError(f"Parse error in '{source_file}': {exc}") from exc

    try:
        write_artifact(model, artifact, indent=indent)
    except OSError as exc:
        raise CompilerError(f"Cannot write artifact '{artifact}': {exc}") from exc
    logger.debug("Wrote artifact %s", artifact)
    return model
