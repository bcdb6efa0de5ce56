# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""ISO-8601 style date-time literals.

Accepted shapes are ``YYYY-MM-DD`` and ``YYYY-MM-DDTHH:mm:ss`` followed by
an optional one to three digit fraction and a ``Z`` or ``+HH:mm``/``-HH:mm``
zone. Field ranges are checked per character only (months ``01`` to ``19``
pass), and the literal is returned exactly as written.
"""

from __future__ import annotations

from ctoparse.parser.combinators import (
    alt,
    char,
    context,
    count,
    is_digit,
    labeled,
    one_of,
    opt,
    preceded,
    recognize,
    seq,
    take_while_m_n,
)

# ###############
# Public Interface
# ###############


@labeled("date-time")
def datetime_value(text: str, pos: int = 0) -> tuple[str, int]:
    """Match a date or date-time literal, preferring the longest form."""
    return _datetime(text, pos)


# ################
# Implementation
# ################

_DIGITS = "0123456789"

_digit = one_of(_DIGITS)

_year = context("year", recognize(count(_digit, 4)))
_month = context("month", recognize(seq(one_of("01"), _digit)))
_day = context("day", recognize(alt(seq(one_of("012"), _digit), seq(char("3"), one_of("01")))))
_hour = context("hour", recognize(alt(seq(one_of("01"), _digit), seq(char("2"), one_of("0123")))))
_minute = context("minute", recognize(seq(one_of("012345"), _digit)))
_second = context("second", recognize(seq(one_of("012345"), _digit)))

_date = context("YYYY-MM-DD", recognize(seq(_year, char("-"), _month, char("-"), _day)))

_time = context("HH:mm:ss", recognize(seq(_hour, char(":"), _minute, char(":"), _second)))

_fraction = context("fractional seconds", preceded(char("."), take_while_m_n(1, 3, is_digit)))

_zone = context("time zone", alt(char("Z"), recognize(seq(one_of("+-"), _hour, char(":"), _minute))))

_time_suffix = recognize(seq(char("T"), _time, opt(_fraction), _zone))

_datetime = recognize(seq(_date, opt(_time_suffix)))
