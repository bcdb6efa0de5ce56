# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for ctoparse."""

from ctoparse.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    discover_sources,
    load_workspace_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "discover_sources",
    "load_workspace_config",
]
