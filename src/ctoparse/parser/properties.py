# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property lines and their metaproperties.

Every property line has the shape::

    o <Type> [[]] <name> <metaproperty>*

Metaproperties are separated from the name and from each other by spaces
or tabs, may appear in any order, and are folded into the property as they
are matched. When a keyword repeats, its last occurrence wins. Each type
accepts its own set of metaproperties:

========== ====================================================
Type       Metaproperties
========== ====================================================
String     ``default="..."``, ``regex=/.../``, ``length=[a,b]``
Boolean    ``default=true|false``
Integer    ``default=<int32>``, ``range=[a,b]``
Long       ``default=<int64>``, ``range=[a,b]``
Double     ``default=<float>``, ``range=[a,b]``
DateTime   ``default=<date-time>``
reference  (none besides ``optional``)
========== ====================================================

All types accept ``optional``. Either side of a ``[a,b]`` bound may be left
out, but not both.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ctoparse.model import (
    BooleanProperty,
    DateTimeProperty,
    DoubleDomainValidator,
    DoubleProperty,
    IntegerDomainValidator,
    IntegerProperty,
    LongDomainValidator,
    LongProperty,
    Property,
    ReferenceProperty,
    StringLengthValidator,
    StringProperty,
    StringRegexValidator,
)
from ctoparse.parser.combinators import (
    Parser,
    alt,
    char,
    context,
    delimited,
    fold_many0,
    labeled,
    map_,
    opt,
    preceded,
    recognize,
    separated_pair,
    seq,
    space0,
    space1,
    tag,
    terminated,
    value,
)
from ctoparse.parser.datetime_literal import datetime_value
from ctoparse.parser.lexical import (
    boolean_value,
    double_value,
    integer_value,
    long_value,
    positive_integer_value,
    regex_value,
    string_value,
    token,
)
from ctoparse.parser.namespace import fully_qualified_name

# ###############
# Public Interface
# ###############

STRING_TYPE = "String"
BOOLEAN_TYPE = "Boolean"
INTEGER_TYPE = "Integer"
LONG_TYPE = "Long"
DOUBLE_TYPE = "Double"
DATETIME_TYPE = "DateTime"


def ranged(keyword: str, element: Parser[Any]) -> Parser[tuple[Any, Any]]:
    """Build a ``keyword=[lower,upper]`` rule over *element*.

    Produces ``(lower, upper)`` with a missing side as None. The candidates
    are tried as full pair, lower only, then upper only; an empty ``[]`` is
    rejected.
    """
    comma = seq(space0, char(","), space0)
    full = context("full range", separated_pair(element, comma, element))
    only_lower = context("lower bound only", map_(terminated(element, comma), lambda lower: (lower, None)))
    only_upper = context("upper bound only", map_(preceded(comma, element), lambda upper: (None, upper)))
    return context(
        f"{keyword} bounds",
        delimited(
            seq(tag(keyword), space0, char("="), space0, char("["), space0),
            alt(full, only_lower, only_upper),
            seq(space0, char("]")),
        ),
    )


@labeled("String property")
def string_property(text: str, pos: int = 0) -> tuple[StringProperty, int]:
    """Match a ``String`` property line."""
    return _string_property(text, pos)


@labeled("Boolean property")
def boolean_property(text: str, pos: int = 0) -> tuple[BooleanProperty, int]:
    """Match a ``Boolean`` property line."""
    return _boolean_property(text, pos)


@labeled("Integer property")
def integer_property(text: str, pos: int = 0) -> tuple[IntegerProperty, int]:
    """Match an ``Integer`` property line."""
    return _integer_property(text, pos)


@labeled("Long property")
def long_property(text: str, pos: int = 0) -> tuple[LongProperty, int]:
    """Match a ``Long`` property line."""
    return _long_property(text, pos)


@labeled("Double property")
def double_property(text: str, pos: int = 0) -> tuple[DoubleProperty, int]:
    """Match a ``Double`` property line."""
    return _double_property(text, pos)


@labeled("DateTime property")
def datetime_property(text: str, pos: int = 0) -> tuple[DateTimeProperty, int]:
    """Match a ``DateTime`` property line."""
    return _datetime_property(text, pos)


@labeled("reference property")
def reference_property(text: str, pos: int = 0) -> tuple[ReferenceProperty, int]:
    """Match a property typed by another concept.

    The type is a bare token (``Person``) or a fully qualified name
    (``org.acme@1.0.0.Person``), kept as written.
    """
    return _reference_property(text, pos)


@labeled("property")
def property_definition(text: str, pos: int = 0) -> tuple[Property, int]:
    """Match any property line.

    The primitive types are tried first, in the order String, Boolean,
    Integer, Long, DateTime, Double; a reference property is the fallback.
    """
    return _property_definition(text, pos)


# ################
# Implementation
# ################


def _header(type_parser: Parser[str]) -> Parser[tuple[str, str, bool]]:
    """``o <Type> [[]] <name>`` producing ``(type, name, is_array)``."""
    array_marker = preceded(space0, seq(char("["), space0, char("]")))
    return map_(
        seq(space0, char("o"), space0, type_parser, opt(array_marker), space1, token),
        lambda parts: (parts[3], parts[6], parts[4] is not None),
    )


def _assignment(keyword: str, element: Parser[Any]) -> Parser[Any]:
    """``keyword = <element>`` with optional spaces around ``=``."""
    return preceded(seq(tag(keyword), space0, char("="), space0), element)


def _field(name: str, parser: Parser[Any]) -> Parser[tuple[str, Any]]:
    return map_(parser, lambda result: (name, result))


_optional = context("optional", value(("is_optional", True), tag("optional")))


def _default(element: Parser[Any]) -> Parser[tuple[str, Any]]:
    return context("default", _field("default_value", _assignment("default", element)))


def _set_field(fields: dict[str, Any], item: tuple[str, Any]) -> dict[str, Any]:
    fields[item[0]] = item[1]
    return fields


def _typed_property(
    type_parser: Parser[str],
    metaproperties: tuple[Parser[tuple[str, Any]], ...],
    build: Callable[[str, str, bool, dict[str, Any]], Any],
) -> Parser[Any]:
    """Combine a header with a fold over the type's metaproperties."""
    header = _header(type_parser)
    meta = fold_many0(preceded(space1, alt(*metaproperties)), dict, _set_field)

    def parse_typed_property(text: str, pos: int = 0) -> tuple[Any, int]:
        (type_name, name, is_array), pos = header(text, pos)
        fields, pos = meta(text, pos)
        return build(type_name, name, is_array, fields), pos

    return parse_typed_property


def _primitive(type_tag: str, cls: type, metaproperties: tuple[Parser[tuple[str, Any]], ...]) -> Parser[Any]:
    return _typed_property(
        tag(type_tag),
        metaproperties,
        lambda _, name, is_array, fields: cls(name=name, is_array=is_array, **fields),
    )


def _domain(keyword: str, element: Parser[Any], validator: type) -> Parser[tuple[str, Any]]:
    return context(
        keyword,
        _field("domain", map_(ranged(keyword, element), lambda bounds: validator(lower=bounds[0], upper=bounds[1]))),
    )


# The pattern must follow `=` directly.
_regex_assignment = preceded(seq(tag("regex"), space0, char("=")), regex_value)

_regex = context(
    "regex",
    _field("regex", map_(_regex_assignment, lambda pattern: StringRegexValidator(pattern=pattern))),
)

_length = context(
    "length",
    _field(
        "length",
        map_(
            ranged("length", positive_integer_value),
            lambda bounds: StringLengthValidator(min_length=bounds[0], max_length=bounds[1]),
        ),
    ),
)

_string_property = _primitive(STRING_TYPE, StringProperty, (_default(string_value), _regex, _length, _optional))

_boolean_property = _primitive(BOOLEAN_TYPE, BooleanProperty, (_default(boolean_value), _optional))

_integer_property = _primitive(
    INTEGER_TYPE,
    IntegerProperty,
    (_default(integer_value), _domain("range", integer_value, IntegerDomainValidator), _optional),
)

_long_property = _primitive(
    LONG_TYPE,
    LongProperty,
    (_default(long_value), _domain("range", long_value, LongDomainValidator), _optional),
)

_double_property = _primitive(
    DOUBLE_TYPE,
    DoubleProperty,
    (_default(double_value), _domain("range", double_value, DoubleDomainValidator), _optional),
)

_datetime_property = _primitive(DATETIME_TYPE, DateTimeProperty, (_default(datetime_value), _optional))

_reference_type = context("type name", alt(recognize(fully_qualified_name), token))

_reference_property = _typed_property(
    _reference_type,
    (_optional,),
    lambda type_name, name, is_array, fields: ReferenceProperty(
        name=name, type_name=type_name, is_array=is_array, **fields
    ),
)

_property_definition = alt(
    string_property,
    boolean_property,
    integer_property,
    long_property,
    datetime_property,
    double_property,
    reference_property,
)
