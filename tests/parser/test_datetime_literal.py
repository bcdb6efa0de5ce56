# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for date-time literals."""

import pytest

from ctoparse.parser.datetime_literal import datetime_value
from ctoparse.parser.errors import ParseFailure


class TestDateTime:
    @pytest.mark.parametrize(
        "text",
        [
            "2021-11-24",
            "2021-11-24T14:05:00Z",
            "2021-11-24T14:05:00.123Z",
            "2021-11-24T14:05:00.1+02:00",
            "2021-11-24T23:59:59-11:30",
            "0000-01-01",
            "2021-12-31",
        ],
    )
    def test_valid_literals(self, text: str) -> None:
        assert datetime_value(text) == (text, len(text))

    def test_month_range_is_checked_per_character(self) -> None:
        assert datetime_value("2021-19-01") == ("2021-19-01", 10)

    def test_date_without_complete_time_stops_after_date(self) -> None:
        assert datetime_value("2021-11-24T14:05") == ("2021-11-24", 10)

    def test_time_requires_zone(self) -> None:
        assert datetime_value("2021-11-24T14:05:00 rest") == ("2021-11-24", 10)

    def test_fraction_is_at_most_three_digits(self) -> None:
        assert datetime_value("2021-11-24T14:05:00.1234Z") == ("2021-11-24", 10)

    @pytest.mark.parametrize(
        "text",
        [
            "21-11-24",
            "2021-21-01",
            "2021-11-32",
            "2021/11/24",
            "2021-1-24",
            "not a date",
        ],
    )
    def test_invalid_dates(self, text: str) -> None:
        with pytest.raises(ParseFailure) as exc_info:
            datetime_value(text)
        assert exc_info.value.labels[0] == "date-time"

    @pytest.mark.parametrize(
        "text",
        ["2021-11-24T24:00:00Z", "2021-11-24T14:60:00Z", "2021-11-24T14:05:61Z"],
    )
    def test_invalid_time_fields_fall_back_to_the_date(self, text: str) -> None:
        assert datetime_value(text) == ("2021-11-24", 10)
