# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for property lines and metaproperties."""

import math

import pytest

from ctoparse.model import (
    BooleanProperty,
    DateTimeProperty,
    DoubleDomainValidator,
    DoubleProperty,
    IntegerDomainValidator,
    IntegerProperty,
    LongDomainValidator,
    LongProperty,
    ReferenceProperty,
    StringLengthValidator,
    StringProperty,
    StringRegexValidator,
)
from ctoparse.parser.errors import ParseFailure
from ctoparse.parser.lexical import INT64_MAX, integer_value
from ctoparse.parser.properties import (
    boolean_property,
    datetime_property,
    double_property,
    integer_property,
    long_property,
    property_definition,
    ranged,
    reference_property,
    string_property,
)

# ###############
# Bounds
# ###############


class TestRanged:
    @pytest.mark.parametrize(
        ("text", "bounds"),
        [
            ("range=[-1,1]", (-1, 1)),
            ("range = [ -1 , 1 ]", (-1, 1)),
            ("range=[5,]", (5, None)),
            ("range=[,5]", (None, 5)),
        ],
    )
    def test_bounds(self, text: str, bounds: tuple) -> None:
        assert ranged("range", integer_value)(text) == (bounds, len(text))

    @pytest.mark.parametrize("text", ["range=[]", "range=[,]", "range=1", "length=[1,2]"])
    def test_invalid_bounds(self, text: str) -> None:
        with pytest.raises(ParseFailure):
            ranged("range", integer_value)(text)


# ###############
# Primitive Properties
# ###############


class TestStringProperty:
    def test_bare_property(self) -> None:
        assert string_property("o String foo") == (StringProperty(name="foo"), 12)

    def test_all_metaproperties(self) -> None:
        text = 'o String foo default="bar" regex=/[a-z]+/ length=[0, 10] optional'
        result, end = string_property(text)
        assert end == len(text)
        assert result == StringProperty(
            name="foo",
            is_optional=True,
            default_value="bar",
            regex=StringRegexValidator(pattern="[a-z]+"),
            length=StringLengthValidator(min_length=0, max_length=10),
        )

    def test_partial_length(self) -> None:
        result, _ = string_property("o String foo length=[,10]")
        assert result.length == StringLengthValidator(max_length=10)

    def test_length_rejects_negative_bounds(self) -> None:
        assert string_property("o String foo length=[-1,10]")[1] == 12

    @pytest.mark.parametrize("text", ["o String[] tags", "o String [] tags", "o String[ ] tags"])
    def test_array_marker(self, text: str) -> None:
        result, end = string_property(text)
        assert result.is_array
        assert result.name == "tags"
        assert end == len(text)

    def test_metaproperties_separated_by_tabs(self) -> None:
        result, _ = string_property("o String foo\toptional")
        assert result.is_optional

    def test_assignment_allows_spaces(self) -> None:
        assert string_property('o String foo default = "x"')[0].default_value == "x"

    def test_regex_may_have_spaces_before_equals_only(self) -> None:
        assert string_property("o String foo regex =/x/")[0].regex == StringRegexValidator(pattern="x")
        text = "o String foo regex= /x/"
        assert string_property(text) == (StringProperty(name="foo"), 12)

    def test_requires_space_before_name(self) -> None:
        with pytest.raises(ParseFailure):
            string_property("o Stringfoo")


class TestBooleanProperty:
    def test_default(self) -> None:
        result, _ = boolean_property("o Boolean flag default=true")
        assert result == BooleanProperty(name="flag", default_value=True)

    def test_invalid_default_stops_before_metaproperty(self) -> None:
        text = "o Boolean baz default=42"
        assert boolean_property(text) == (BooleanProperty(name="baz"), 13)
        assert text[13:] == " default=42"

    def test_rejects_foreign_metaproperty(self) -> None:
        assert boolean_property("o Boolean flag regex=/x/")[1] == 14


class TestNumericProperties:
    def test_integer(self) -> None:
        result, _ = integer_property("o Integer age default=42 range=[0,150]")
        assert result == IntegerProperty(
            name="age", default_value=42, domain=IntegerDomainValidator(lower=0, upper=150)
        )

    def test_integer_default_must_fit_32_bits(self) -> None:
        assert integer_property("o Integer big default=2147483648")[1] == 13

    def test_long(self) -> None:
        result, _ = long_property(f"o Long id default={INT64_MAX} range=[0,]")
        assert result == LongProperty(name="id", default_value=INT64_MAX, domain=LongDomainValidator(lower=0))

    def test_double(self) -> None:
        result, _ = double_property("o Double d default=-42.0e3 range=[,100.4]")
        assert result.default_value == pytest.approx(-42000.0)
        assert result.domain == DoubleDomainValidator(upper=100.4)

    def test_double_infinity_default(self) -> None:
        result, _ = double_property("o Double d default=-inf")
        assert math.isinf(result.default_value)

    def test_duplicate_metaproperty_last_wins(self) -> None:
        result, _ = integer_property("o Integer i default=1 range=[0,1] default=2 range=[5,6]")
        assert result.default_value == 2
        assert result.domain == IntegerDomainValidator(lower=5, upper=6)


class TestDateTimeProperty:
    def test_default_keeps_text(self) -> None:
        result, _ = datetime_property("o DateTime created default=2021-11-24T14:05:00Z optional")
        assert result == DateTimeProperty(name="created", default_value="2021-11-24T14:05:00Z", is_optional=True)


# ###############
# References and Dispatch
# ###############


class TestReferenceProperty:
    def test_token_type(self) -> None:
        assert reference_property("o Person owner") == (ReferenceProperty(name="owner", type_name="Person"), 14)

    def test_fully_qualified_type(self) -> None:
        result, _ = reference_property("o org.acme@1.0.0-beta.Person[] owners optional")
        assert result == ReferenceProperty(
            name="owners",
            type_name="org.acme@1.0.0-beta.Person",
            is_array=True,
            is_optional=True,
        )

    def test_default_is_not_accepted(self) -> None:
        assert reference_property("o Person owner default=1")[1] == 14


class TestPropertyDefinition:
    @pytest.mark.parametrize(
        ("text", "cls"),
        [
            ("o String s", StringProperty),
            ("o Boolean b", BooleanProperty),
            ("o Integer i", IntegerProperty),
            ("o Long l", LongProperty),
            ("o Double d", DoubleProperty),
            ("o DateTime t", DateTimeProperty),
            ("o Address a", ReferenceProperty),
        ],
    )
    def test_dispatch_by_type(self, text: str, cls: type) -> None:
        assert isinstance(property_definition(text)[0], cls)

    def test_type_name_prefixed_by_primitive_is_a_reference(self) -> None:
        result, _ = property_definition("o Stringy s")
        assert result == ReferenceProperty(name="s", type_name="Stringy")

    def test_leading_spaces_are_allowed(self) -> None:
        assert property_definition("   o String s")[0].name == "s"

    @pytest.mark.parametrize("text", ["x String s", "o String", "o 1Type s", ""])
    def test_invalid_lines(self, text: str) -> None:
        with pytest.raises(ParseFailure) as exc_info:
            property_definition(text)
        assert exc_info.value.labels[0] == "property"
