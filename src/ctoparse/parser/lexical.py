# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical primitives: tokens, booleans, numbers and string literals."""

from __future__ import annotations

from ctoparse.parser.combinators import (
    alpha1,
    alphanumeric0,
    alt,
    char,
    context,
    delimited,
    digit1,
    is_hex_digit,
    labeled,
    many0,
    map_,
    map_res,
    multispace1,
    one_of,
    opt,
    preceded,
    recognize,
    seq,
    tag,
    tag_no_case,
    take_while1,
    take_while_m_n,
    value,
)
from ctoparse.parser.errors import ErrorKind

# ###############
# Public Interface
# ###############

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@labeled("token")
def token(text: str, pos: int = 0) -> tuple[str, int]:
    """A letter followed by any number of letters or digits."""
    return _token(text, pos)


@labeled("boolean")
def boolean_value(text: str, pos: int = 0) -> tuple[bool, int]:
    """``true`` or ``false``."""
    return _boolean(text, pos)


@labeled("decimal")
def decimal_value(text: str, pos: int = 0) -> tuple[str, int]:
    """An optionally signed run of digits, returned as written."""
    return _decimal(text, pos)


@labeled("integer")
def integer_value(text: str, pos: int = 0) -> tuple[int, int]:
    """A signed decimal that fits in 32 bits."""
    return _integer(text, pos)


@labeled("long")
def long_value(text: str, pos: int = 0) -> tuple[int, int]:
    """A signed decimal that fits in 64 bits."""
    return _long(text, pos)


@labeled("positive integer")
def positive_integer_value(text: str, pos: int = 0) -> tuple[int, int]:
    """An unsigned decimal that fits in a signed 32-bit integer."""
    return _positive_integer(text, pos)


@labeled("double")
def double_value(text: str, pos: int = 0) -> tuple[float, int]:
    """A floating point literal.

    Accepted forms are ``.42``, ``.42e3``, ``42e3``, ``42.5e-3``, ``42.``,
    ``42.5`` and, ignoring case, ``inf``, ``infinity`` (optionally signed)
    and ``nan``. A bare integer such as ``42`` is not a double literal.
    """
    return _double(text, pos)


@labeled("string")
def string_value(text: str, pos: int = 0) -> tuple[str, int]:
    """A single- or double-quoted string literal with escapes resolved.

    The opening quote selects the closing one; the other quote character may
    appear unescaped. Supported escapes are ``\\n \\r \\t \\b \\f \\\\ \\/ \\"
    \\'``, ``\\u{H...}`` with one to six hex digits naming a Unicode scalar
    value, and a backslash followed by whitespace, which is dropped along
    with the whitespace so long literals can be wrapped.
    """
    return _string(text, pos)


@labeled("regex")
def regex_value(text: str, pos: int = 0) -> tuple[str, int]:
    """A ``/.../`` literal using the string escapes, with ``/`` as the delimiter."""
    return _regex(text, pos)


# ################
# Implementation
# ################

_token = recognize(seq(alpha1, alphanumeric0))

_boolean = alt(value(True, tag("true")), value(False, tag("false")))

_decimal = alt(
    context("negative decimal", recognize(seq(char("-"), digit1))),
    context("explicitly positive decimal", recognize(seq(char("+"), digit1))),
    context("unsigned decimal", digit1),
)


def _bounded_int(lower: int, upper: int):
    def convert(literal: str) -> int:
        number = int(literal)
        if not lower <= number <= upper:
            raise ValueError(f"{literal} is outside [{lower}, {upper}]")
        return number

    return convert


_integer = map_res(_decimal, _bounded_int(INT32_MIN, INT32_MAX), ErrorKind.NUMERIC_RANGE, "32-bit integer")
_long = map_res(_decimal, _bounded_int(INT64_MIN, INT64_MAX), ErrorKind.NUMERIC_RANGE, "64-bit integer")
_positive_integer = map_res(digit1, _bounded_int(0, INT32_MAX), ErrorKind.NUMERIC_RANGE, "positive 32-bit integer")

_exponent = seq(one_of("eE"), _decimal)

_floating_point = alt(
    context(".42e42", recognize(seq(char("."), digit1, opt(_exponent)))),
    context("42e42 or 42.42e42", recognize(seq(_decimal, opt(preceded(char("."), digit1)), _exponent))),
    context("42. or 42.42", recognize(seq(_decimal, char("."), opt(digit1)))),
    context("infinity", recognize(seq(opt(one_of("+-")), alt(tag_no_case("infinity"), tag_no_case("inf"))))),
    context("nan", tag_no_case("nan")),
)

_double = map_res(_floating_point, float, ErrorKind.INVALID_VALUE, "floating point literal")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    "/": "/",
    '"': '"',
    "'": "'",
}


def _unicode_scalar(digits: str) -> str:
    code_point = int(digits, 16)
    if 0xD800 <= code_point <= 0xDFFF or code_point > 0x10FFFF:
        raise ValueError(f"U+{code_point:X} is not a Unicode scalar value")
    return chr(code_point)


_hex_digits = take_while_m_n(1, 6, is_hex_digit, ErrorKind.EXPECTED_DIGIT, "hexadecimal digit")

_unicode_escape = context(
    "unicode escape",
    map_res(
        preceded(char("u"), delimited(char("{"), _hex_digits, char("}"))),
        _unicode_scalar,
        ErrorKind.INVALID_ESCAPE,
        "Unicode scalar value",
    ),
)

_escaped_char = context(
    "escaped character",
    preceded(char("\\"), alt(map_(one_of("".join(_SIMPLE_ESCAPES)), _SIMPLE_ESCAPES.__getitem__), _unicode_escape)),
)

_escaped_whitespace = context("escaped whitespace", value("", preceded(char("\\"), multispace1)))


def _literal_body(terminator: str):
    """Build the content rule for a literal closed by *terminator*."""
    literal = take_while1(lambda c: c != terminator and c != "\\", ErrorKind.EXPECTED_CHARACTER, "literal character")
    fragment = alt(literal, _escaped_char, _escaped_whitespace)
    return map_(many0(fragment), "".join)


_string = alt(
    context("double quoted", delimited(char('"'), _literal_body('"'), char('"'))),
    context("single quoted", delimited(char("'"), _literal_body("'"), char("'"))),
)

_regex = delimited(char("/"), _literal_body("/"), char("/"))
