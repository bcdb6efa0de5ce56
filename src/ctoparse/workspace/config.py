# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the ctoparse project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".ctoparse.yaml"

DEFAULT_BUILD_DIRECTORY = ".ctoparse-build"
DEFAULT_SOURCES = ("**/*.cto",)
DEFAULT_INDENT = 2


class WorkspaceConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """The parsed configuration for a directory of .cto files.

    Attributes:
        build_directory: Relative path (from the project root) for artifacts.
        sources: Glob patterns, relative to the project root, selecting model files.
        indent: JSON indentation for artifacts, or None for compact output.
    """

    build_directory: str = DEFAULT_BUILD_DIRECTORY
    sources: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))
    indent: int | None = DEFAULT_INDENT


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a ctoparse configuration file.

    Args:
        path: Path to the `.ctoparse.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file. Missing fields
        take their defaults.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def discover_sources(root: Path, config: WorkspaceConfig) -> list[Path]:
    """Return the sorted model files under *root* selected by *config*.

    Files inside the build directory are never selected.
    """
    build_dir = (root / config.build_directory).resolve()
    found: set[Path] = set()
    for pattern in config.sources:
        for candidate in root.glob(pattern):
            resolved = candidate.resolve()
            if candidate.is_file() and not resolved.is_relative_to(build_dir):
                found.add(candidate)
    return sorted(found)


# ################
# Implementation
# ################


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse configuration YAML text into a WorkspaceConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        WorkspaceConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    # An empty file means "all defaults".
    if data is None:
        return WorkspaceConfig()
    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: config must be a YAML mapping")

    config = WorkspaceConfig()
    if "build-directory" in data:
        config.build_directory = _require_string(data, "build-directory", source_label)
    if "sources" in data:
        raw_sources = data["sources"]
        if not isinstance(raw_sources, list) or not all(isinstance(s, str) for s in raw_sources):
            raise WorkspaceConfigError(f"{source_label}: 'sources' must be a list of glob patterns")
        config.sources = list(raw_sources)
    if "indent" in data:
        indent = data["indent"]
        # bool is a subclass of int and must not pass as one.
        if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
            raise WorkspaceConfigError(f"{source_label}: 'indent' must be a non-negative integer or null")
        config.indent = indent
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising WorkspaceConfigError if it has another type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value
