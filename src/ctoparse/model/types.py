# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property variants and validators for the ctoparse semantic model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class StringRegexValidator(BaseModel):
    """A regular expression a string value must match."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    flags: str = ""


class StringLengthValidator(BaseModel):
    """Inclusive bounds on the length of a string value."""

    model_config = ConfigDict(frozen=True)

    min_length: int | None = None
    max_length: int | None = None


class IntegerDomainValidator(BaseModel):
    """Inclusive bounds on a 32-bit integer value."""

    model_config = ConfigDict(frozen=True)

    lower: int | None = None
    upper: int | None = None


class LongDomainValidator(BaseModel):
    """Inclusive bounds on a 64-bit integer value."""

    model_config = ConfigDict(frozen=True)

    lower: int | None = None
    upper: int | None = None


class DoubleDomainValidator(BaseModel):
    """Inclusive bounds on a floating point value."""

    model_config = ConfigDict(frozen=True)

    lower: float | None = None
    upper: float | None = None


class StringProperty(BaseModel):
    """A ``String`` property."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    name: str
    is_optional: bool = False
    is_array: bool = False
    default_value: str | None = None
    regex: StringRegexValidator | None = None
    length: StringLengthValidator | None = None


class BooleanProperty(BaseModel):
    """A ``Boolean`` property."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"
    name: str
    is_optional: bool = False
    is_array: bool = False
    default_value: bool | None = None


class IntegerProperty(BaseModel):
    """An ``Integer`` property (32-bit signed)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"
    name: str
    is_optional: bool = False
    is_array: bool = False
    default_value: int | None = None
    domain: IntegerDomainValidator | None = None


class LongProperty(BaseModel):
    """A ``Long`` property (64-bit signed)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["long"] = "long"
    name: str
    is_optional: bool = False
    is_array: bool = False
    default_value: int | None = None
    domain: LongDomainValidator | None = None


class DoubleProperty(BaseModel):
    """A ``Double`` property."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["double"] = "double"
    name: str
    is_optional: bool = False
    is_array: bool = False
    default_value: float | None = None
    domain: DoubleDomainValidator | None = None


class DateTimeProperty(BaseModel):
    """A ``DateTime`` property. The default keeps the literal text as written."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["datetime"] = "datetime"
    name: str
    is_optional: bool = False
    is_array: bool = False
    default_value: str | None = None


class ReferenceProperty(BaseModel):
    """A property typed by another concept, named by *type_name*."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reference"] = "reference"
    name: str
    type_name: str
    is_optional: bool = False
    is_array: bool = False


# A concept property. The `kind` discriminator keeps the union closed and
# lets consumers match on it exhaustively.
Property = Annotated[
    StringProperty
    | BooleanProperty
    | IntegerProperty
    | LongProperty
    | DoubleProperty
    | DateTimeProperty
    | ReferenceProperty,
    _Field(discriminator="kind"),
]
