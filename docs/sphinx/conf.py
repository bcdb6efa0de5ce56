# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for ctoparse documentation."""

project = "ctoparse"
author = "ctoparse Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
