# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Post-parse consistency checks for CTO models.

Parsing only establishes that a source is well formed. These checks look at
the values inside validators and defaults, which the grammar accepts
without comparing them to each other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ctoparse.model import (
    Declaration,
    DoubleProperty,
    IntegerProperty,
    LongProperty,
    Model,
    Property,
    StringProperty,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A suspicious but non-fatal finding.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A contradiction that makes the model unusable.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the model checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that indicate an invalid model.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(model: Model) -> ValidationResult:
    """Run all checks on a parsed Model.

    Checks performed:

    1. **Inverted bounds** (error): a ``length`` whose minimum exceeds its
       maximum, or a ``range`` whose lower bound exceeds its upper bound.

    2. **Default out of bounds** (error): a numeric default outside its
       ``range``, or a string default whose length is outside its ``length``.

    3. **Invalid regex** (warning): a ``regex`` that Python's :mod:`re`
       cannot compile. The pattern may still be valid in other dialects.

    4. **Default not matching regex** (warning): a string default for which
       the ``regex`` finds no match.

    Args:
        model: The parsed model to check.

    Returns:
        A :class:`ValidationResult`. An empty result indicates a consistent model.
    """
    result = ValidationResult()
    for declaration in model.declarations:
        for prop in declaration.properties:
            _check_property(declaration, prop, result)
    return result


# ################
# Implementation
# ################

_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL}


def _label(declaration: Declaration, prop: Property) -> str:
    return f"Concept '{declaration.name}' property '{prop.name}'"


def _check_property(declaration: Declaration, prop: Property, result: ValidationResult) -> None:
    if isinstance(prop, StringProperty):
        _check_string(_label(declaration, prop), prop, result)
    elif isinstance(prop, IntegerProperty | LongProperty | DoubleProperty):
        _check_numeric(_label(declaration, prop), prop, result)


def _check_string(label: str, prop: StringProperty, result: ValidationResult) -> None:
    if prop.length is not None:
        lower, upper = prop.length.min_length, prop.length.max_length
        if lower is not None and upper is not None and lower > upper:
            result.errors.append(ValidationError(f"{label}: minimum length {lower} exceeds maximum length {upper}"))
        elif prop.default_value is not None and not _within(len(prop.default_value), lower, upper):
            message = f"default value {prop.default_value!r} violates length {_bounds(lower, upper)}"
            result.errors.append(ValidationError(f"{label}: {message}"))

    if prop.regex is not None:
        flags = 0
        for flag in prop.regex.flags:
            flags |= _REGEX_FLAGS.get(flag, 0)
        try:
            pattern = re.compile(prop.regex.pattern, flags)
        except re.error as exc:
            result.warnings.append(ValidationWarning(f"{label}: regex /{prop.regex.pattern}/ is not valid: {exc}"))
            return
        if prop.default_value is not None and pattern.search(prop.default_value) is None:
            result.warnings.append(
                ValidationWarning(
                    f"{label}: default value {prop.default_value!r} does not match /{prop.regex.pattern}/"
                )
            )


def _check_numeric(label: str, prop: IntegerProperty | LongProperty | DoubleProperty, result: ValidationResult) -> None:
    if prop.domain is None:
        return
    lower, upper = prop.domain.lower, prop.domain.upper
    if lower is not None and upper is not None and lower > upper:
        result.errors.append(ValidationError(f"{label}: lower bound {lower} exceeds upper bound {upper}"))
    elif prop.default_value is not None and not _within(prop.default_value, lower, upper):
        result.errors.append(
            ValidationError(f"{label}: default value {prop.default_value} is outside range {_bounds(lower, upper)}")
        )


def _within(number: float, lower: float | None, upper: float | None) -> bool:
    # NaN compares false against every bound, so it never counts as outside.
    if lower is not None and number < lower:
        return False
    return not (upper is not None and number > upper)


def _bounds(lower: float | None, upper: float | None) -> str:
    return f"[{'' if lower is None else lower},{'' if upper is None else upper}]"
