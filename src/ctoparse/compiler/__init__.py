# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for .cto files: parsing, serialization, and artifact caching."""

from ctoparse.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from ctoparse.compiler.build import CompilerError, compile_files

__all__ = [
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "compile_files",
    "CompilerError",
]
