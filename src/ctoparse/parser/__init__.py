# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for .cto model files."""

from ctoparse.parser.errors import ErrorKind, ParseError, ParseFailure
from ctoparse.parser.parser import parse

__all__ = [
    "parse",
    "ParseError",
    "ParseFailure",
    "ErrorKind",
]
