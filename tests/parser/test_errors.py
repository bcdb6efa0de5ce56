# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for parse failures, parse errors and position reporting."""

import pytest

from ctoparse.parser.errors import ErrorKind, ParseError, ParseFailure, line_and_column


class TestParseFailure:
    def test_with_label_prepends_and_copies(self) -> None:
        failure = ParseFailure(4, ErrorKind.EXPECTED_DIGIT, "digit", ("inner",))
        labeled = failure.with_label("outer")
        assert labeled.labels == ("outer", "inner")
        assert labeled.position == 4
        assert labeled.kind == ErrorKind.EXPECTED_DIGIT
        assert failure.labels == ("inner",)

    def test_describe_without_labels(self) -> None:
        assert ParseFailure(0, ErrorKind.EXPECTED_LITERAL, "'{'").describe() == "expected '{'"

    def test_describe_with_label_path(self) -> None:
        failure = ParseFailure(0, ErrorKind.EXPECTED_DIGIT, "digit", ("concept", "property", "Integer property"))
        assert failure.describe() == "expected digit while parsing concept > property > Integer property"


class TestParseError:
    def test_message_format(self) -> None:
        err = ParseError("expected '}'", 3, 7)
        assert str(err) == "Line 3, column 7: expected '}'"
        assert err.line == 3
        assert err.column == 7

    def test_from_failure_locates_position(self) -> None:
        source = "namespace a@1\nconcept X {\n  o Strin"
        failure = ParseFailure(len(source), ErrorKind.UNEXPECTED_END_OF_INPUT, "'}'", ("concept",))
        err = ParseError.from_failure(source, failure)
        assert err.line == 3
        assert err.column == 10
        assert err.offset == len(source)
        assert err.kind == ErrorKind.UNEXPECTED_END_OF_INPUT
        assert err.labels == ("concept",)
        assert str(err) == "Line 3, column 10: expected '}' while parsing concept"


class TestLineAndColumn:
    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (0, (1, 1)),
            (2, (1, 3)),
            (3, (2, 1)),
            (5, (2, 3)),
            (99, (2, 3)),
            (-1, (1, 1)),
        ],
    )
    def test_positions(self, offset: int, expected: tuple[int, int]) -> None:
        assert line_and_column("ab\ncd", offset) == expected
