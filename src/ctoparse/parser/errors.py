# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured, position-aware failures for the CTO grammar.

Grammar rules signal a failed match by raising :class:`ParseFailure`. The
failure records the offset where matching stopped, a categorised
:class:`ErrorKind`, and the chain of rule labels it travelled through on its
way out. The public entry points convert the outermost failure into a
:class:`ParseError` carrying line and column information.
"""

from __future__ import annotations

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Categories of grammar failures."""

    EXPECTED_LITERAL = "expected literal"
    EXPECTED_CHARACTER = "expected character"
    EXPECTED_DIGIT = "expected digit"
    EXPECTED_LETTER = "expected letter"
    EXPECTED_WHITESPACE = "expected whitespace"
    EXPECTED_LINE_ENDING = "expected line ending"
    EXPECTED_END_OF_INPUT = "expected end of input"
    UNEXPECTED_END_OF_INPUT = "unexpected end of input"
    UNEXPECTED_INPUT = "unexpected input"
    NUMERIC_RANGE = "numeric value out of range"
    INVALID_ESCAPE = "invalid escape sequence"
    INVALID_VALUE = "invalid value"


class ParseFailure(Exception):
    """Raised by a grammar rule that does not match at a given position.

    Attributes:
        position: 0-based offset into the input where matching failed.
        kind: Category of the failure.
        expected: Human-readable description of what was expected.
        labels: Rule labels from outermost to innermost.
    """

    def __init__(
        self,
        position: int,
        kind: ErrorKind,
        expected: str,
        labels: tuple[str, ...] = (),
    ) -> None:
        super().__init__(f"{kind.value} at offset {position}: {expected}")
        self.position = position
        self.kind = kind
        self.expected = expected
        self.labels = labels

    def with_label(self, label: str) -> ParseFailure:
        """Return a copy of this failure with *label* pushed as the outermost context."""
        return ParseFailure(self.position, self.kind, self.expected, (label, *self.labels))

    def describe(self) -> str:
        """Render the failure as 'expected X while parsing A > B'."""
        if not self.labels:
            return f"expected {self.expected}"
        return f"expected {self.expected} while parsing {' > '.join(self.labels)}"


class ParseError(Exception):
    """Raised when CTO source text cannot be parsed.

    Attributes:
        line: 1-based line number of the deepest failure.
        column: 1-based column number of the deepest failure.
        offset: 0-based character offset of the deepest failure.
        kind: Category of the underlying failure.
        labels: Rule labels from outermost to innermost.
    """

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        offset: int = 0,
        kind: ErrorKind = ErrorKind.INVALID_VALUE,
        labels: tuple[str, ...] = (),
    ) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column
        self.offset = offset
        self.kind = kind
        self.labels = labels

    @classmethod
    def from_failure(cls, source: str, failure: ParseFailure) -> ParseError:
        """Build a ParseError locating *failure* inside *source*."""
        line, column = line_and_column(source, failure.position)
        return cls(
            failure.describe(),
            line,
            column,
            offset=failure.position,
            kind=failure.kind,
            labels=failure.labels,
        )


def line_and_column(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *offset* within *source*."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1
