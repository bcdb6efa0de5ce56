# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Composable parsing primitives.

A parser is any callable ``parser(text, pos)`` returning ``(value, new_pos)``
on success and raising :class:`ParseFailure` on failure. Parsers never mutate
shared state, so backtracking is simply calling the next candidate with the
original position. Alternatives are tried in the order given and the first
success wins.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ctoparse.parser.errors import ErrorKind, ParseError, ParseFailure

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str, int], tuple[T, int]]

# ###############
# Public Interface
# ###############


def run(parser: Parser[T], source: str, *, complete: bool = False) -> T:
    """Run *parser* over *source* from the start and return its value.

    Args:
        parser: The grammar rule to apply.
        source: Input text.
        complete: When True, the rule must consume the entire input.

    Raises:
        ParseError: If the rule fails, or leaves input behind when *complete* is set.
    """
    try:
        result, end = parser(source, 0)
        if complete:
            eof(source, end)
    except ParseFailure as failure:
        raise ParseError.from_failure(source, failure) from None
    return result


def labeled(label: str) -> Callable[[Parser[T]], Parser[T]]:
    """Decorate a grammar rule so failures escaping it carry *label* in their path."""

    def decorator(rule: Parser[T]) -> Parser[T]:
        @functools.wraps(rule)
        def wrapper(text: str, pos: int = 0) -> tuple[T, int]:
            try:
                return rule(text, pos)
            except ParseFailure as failure:
                raise failure.with_label(label) from None

        return wrapper

    return decorator


def context(label: str, parser: Parser[T]) -> Parser[T]:
    """Wrap an inline parser with a context label."""
    return labeled(label)(parser)


# ------------------------------------------------------------------
# Literals and character classes
# ------------------------------------------------------------------


def tag(literal: str) -> Parser[str]:
    """Match *literal* exactly."""

    def parse_tag(text: str, pos: int = 0) -> tuple[str, int]:
        if text.startswith(literal, pos):
            return literal, pos + len(literal)
        raise _failure(text, pos, ErrorKind.EXPECTED_LITERAL, repr(literal))

    return parse_tag


def tag_no_case(literal: str) -> Parser[str]:
    """Match *literal* ignoring ASCII case, returning the text as written."""
    folded = literal.lower()

    def parse_tag_no_case(text: str, pos: int = 0) -> tuple[str, int]:
        end = pos + len(literal)
        if text[pos:end].lower() == folded:
            return text[pos:end], end
        raise _failure(text, pos, ErrorKind.EXPECTED_LITERAL, repr(literal))

    return parse_tag_no_case


def char(expected: str) -> Parser[str]:
    """Match the single character *expected*."""

    def parse_char(text: str, pos: int = 0) -> tuple[str, int]:
        if pos < len(text) and text[pos] == expected:
            return expected, pos + 1
        raise _failure(text, pos, ErrorKind.EXPECTED_CHARACTER, repr(expected))

    return parse_char


def one_of(chars: str) -> Parser[str]:
    """Match any single character contained in *chars*."""

    def parse_one_of(text: str, pos: int = 0) -> tuple[str, int]:
        if pos < len(text) and text[pos] in chars:
            return text[pos], pos + 1
        raise _failure(text, pos, ErrorKind.EXPECTED_CHARACTER, f"one of {chars!r}")

    return parse_one_of


def take_while_m_n(
    minimum: int,
    maximum: int | None,
    predicate: Callable[[str], bool],
    kind: ErrorKind = ErrorKind.EXPECTED_CHARACTER,
    expected: str = "character",
) -> Parser[str]:
    """Match between *minimum* and *maximum* characters satisfying *predicate*."""

    def parse_take_while(text: str, pos: int = 0) -> tuple[str, int]:
        limit = len(text) if maximum is None else min(len(text), pos + maximum)
        end = pos
        while end < limit and predicate(text[end]):
            end += 1
        if end - pos < minimum:
            raise _failure(text, end, kind, expected)
        return text[pos:end], end

    return parse_take_while


def take_while(predicate: Callable[[str], bool]) -> Parser[str]:
    """Match zero or more characters satisfying *predicate*."""
    return take_while_m_n(0, None, predicate)


def take_while1(
    predicate: Callable[[str], bool],
    kind: ErrorKind = ErrorKind.EXPECTED_CHARACTER,
    expected: str = "character",
) -> Parser[str]:
    """Match one or more characters satisfying *predicate*."""
    return take_while_m_n(1, None, predicate, kind, expected)


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


def is_hex_digit(c: str) -> bool:
    return is_digit(c) or "a" <= c <= "f" or "A" <= c <= "F"


digit1 = take_while1(is_digit, ErrorKind.EXPECTED_DIGIT, "digit")
alpha1 = take_while1(is_alpha, ErrorKind.EXPECTED_LETTER, "letter")
alphanumeric0 = take_while(is_alphanumeric)
space0 = take_while(lambda c: c in " \t")
space1 = take_while1(lambda c: c in " \t", ErrorKind.EXPECTED_WHITESPACE, "space or tab")
multispace0 = take_while(lambda c: c in " \t\r\n")
multispace1 = take_while1(lambda c: c in " \t\r\n", ErrorKind.EXPECTED_WHITESPACE, "whitespace")


def line_ending(text: str, pos: int = 0) -> tuple[str, int]:
    """Match ``\\n`` or ``\\r\\n``."""
    if text.startswith("\r\n", pos):
        return "\r\n", pos + 2
    if text.startswith("\n", pos):
        return "\n", pos + 1
    raise _failure(text, pos, ErrorKind.EXPECTED_LINE_ENDING, "line ending")


def eof(text: str, pos: int = 0) -> tuple[str, int]:
    """Succeed only at the end of the input."""
    if pos >= len(text):
        return "", pos
    raise ParseFailure(pos, ErrorKind.EXPECTED_END_OF_INPUT, "end of input")


# ------------------------------------------------------------------
# Sequencing and choice
# ------------------------------------------------------------------


def seq(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Apply *parsers* one after another, collecting their values in a tuple."""

    def parse_seq(text: str, pos: int = 0) -> tuple[tuple[Any, ...], int]:
        values = []
        for parser in parsers:
            result, pos = parser(text, pos)
            values.append(result)
        return tuple(values), pos

    return parse_seq


def alt(*parsers: Parser[Any]) -> Parser[Any]:
    """Try *parsers* in order and return the first success.

    When every candidate fails, the failure that got furthest into the input
    is re-raised; ties go to the later candidate.
    """

    def parse_alt(text: str, pos: int = 0) -> tuple[Any, int]:
        furthest: ParseFailure | None = None
        for parser in parsers:
            try:
                return parser(text, pos)
            except ParseFailure as failure:
                if furthest is None or failure.position >= furthest.position:
                    furthest = failure
        assert furthest is not None, "alt() requires at least one parser"
        raise furthest

    return parse_alt


def opt(parser: Parser[T]) -> Parser[T | None]:
    """Apply *parser* if it matches, otherwise produce None without consuming input."""

    def parse_opt(text: str, pos: int = 0) -> tuple[T | None, int]:
        try:
            return parser(text, pos)
        except ParseFailure:
            return None, pos

    return parse_opt


def not_(parser: Parser[Any], expected: str = "no match") -> Parser[None]:
    """Succeed without consuming input only if *parser* does not match here."""

    def parse_not(text: str, pos: int = 0) -> tuple[None, int]:
        try:
            parser(text, pos)
        except ParseFailure:
            return None, pos
        raise ParseFailure(pos, ErrorKind.UNEXPECTED_INPUT, expected)

    return parse_not


def peek(parser: Parser[T]) -> Parser[T]:
    """Apply *parser* without consuming input."""

    def parse_peek(text: str, pos: int = 0) -> tuple[T, int]:
        result, _ = parser(text, pos)
        return result, pos

    return parse_peek


def recognize(parser: Parser[Any]) -> Parser[str]:
    """Return the slice of input consumed by *parser* instead of its value."""

    def parse_recognize(text: str, pos: int = 0) -> tuple[str, int]:
        _, end = parser(text, pos)
        return text[pos:end], end

    return parse_recognize


# ------------------------------------------------------------------
# Value transformation
# ------------------------------------------------------------------


def map_(parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform the value of *parser* with *fn*."""

    def parse_map(text: str, pos: int = 0) -> tuple[U, int]:
        result, end = parser(text, pos)
        return fn(result), end

    return parse_map


def map_res(
    parser: Parser[T],
    fn: Callable[[T], U],
    kind: ErrorKind = ErrorKind.INVALID_VALUE,
    expected: str = "valid value",
) -> Parser[U]:
    """Transform the value of *parser* with *fn*, failing if *fn* raises ValueError.

    The failure is reported at the position where *parser* started.
    """

    def parse_map_res(text: str, pos: int = 0) -> tuple[U, int]:
        result, end = parser(text, pos)
        try:
            return fn(result), end
        except ValueError:
            raise ParseFailure(pos, kind, expected) from None

    return parse_map_res


def value(constant: T, parser: Parser[Any]) -> Parser[T]:
    """Produce *constant* whenever *parser* matches."""
    return map_(parser, lambda _: constant)


def verify(parser: Parser[T], predicate: Callable[[T], bool], expected: str) -> Parser[T]:
    """Fail unless the value of *parser* satisfies *predicate*."""

    def parse_verify(text: str, pos: int = 0) -> tuple[T, int]:
        result, end = parser(text, pos)
        if not predicate(result):
            raise ParseFailure(pos, ErrorKind.INVALID_VALUE, expected)
        return result, end

    return parse_verify


def preceded(first: Parser[Any], second: Parser[T]) -> Parser[T]:
    """Match *first* then *second*, keeping only the value of *second*."""
    return map_(seq(first, second), lambda values: values[1])


def terminated(first: Parser[T], second: Parser[Any]) -> Parser[T]:
    """Match *first* then *second*, keeping only the value of *first*."""
    return map_(seq(first, second), lambda values: values[0])


def delimited(left: Parser[Any], middle: Parser[T], right: Parser[Any]) -> Parser[T]:
    """Match *left*, *middle* and *right*, keeping only the value of *middle*."""
    return map_(seq(left, middle, right), lambda values: values[1])


def separated_pair(first: Parser[T], separator: Parser[Any], second: Parser[U]) -> Parser[tuple[T, U]]:
    """Match *first*, *separator* and *second*, keeping the outer two values."""
    return map_(seq(first, separator, second), lambda values: (values[0], values[2]))


# ------------------------------------------------------------------
# Repetition
# ------------------------------------------------------------------


def fold_many0(parser: Parser[T], init: Callable[[], U], fold: Callable[[U, T], U]) -> Parser[U]:
    """Apply *parser* repeatedly, folding each value into an accumulator.

    Stops at the first failure, or as soon as *parser* succeeds without
    consuming input.
    """

    def parse_fold(text: str, pos: int = 0) -> tuple[U, int]:
        acc = init()
        while True:
            try:
                result, end = parser(text, pos)
            except ParseFailure:
                return acc, pos
            if end == pos:
                return acc, pos
            acc = fold(acc, result)
            pos = end

    return parse_fold


def many0(parser: Parser[T]) -> Parser[list[T]]:
    """Apply *parser* zero or more times, collecting values in a list."""
    return fold_many0(parser, list, _append)


def count(parser: Parser[T], times: int) -> Parser[list[T]]:
    """Apply *parser* exactly *times* times."""

    def parse_count(text: str, pos: int = 0) -> tuple[list[T], int]:
        values = []
        for _ in range(times):
            result, pos = parser(text, pos)
            values.append(result)
        return values, pos

    return parse_count


# ################
# Implementation
# ################


def _failure(text: str, pos: int, kind: ErrorKind, expected: str) -> ParseFailure:
    """Build a failure, reporting running out of input distinctly."""
    if pos >= len(text):
        return ParseFailure(pos, ErrorKind.UNEXPECTED_END_OF_INPUT, expected)
    return ParseFailure(pos, kind, expected)


def _append(acc: list[T], item: T) -> list[T]:
    acc.append(item)
    return acc
