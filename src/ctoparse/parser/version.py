# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic version grammar.

A version is ``major``, ``major.minor`` or ``major.minor.patch`` with missing
components defaulting to zero, optionally followed by ``-`` and a pre-release
label. The label follows the semantic versioning rule that a numeric leading
identifier has no leading zero: ``-0.3.7`` is accepted, ``-001`` is not.
"""

from __future__ import annotations

from ctoparse.model import Version, VersionNumber
from ctoparse.parser.combinators import (
    alpha1,
    alt,
    char,
    context,
    digit1,
    is_alphanumeric,
    labeled,
    map_,
    not_,
    one_of,
    preceded,
    recognize,
    seq,
    take_while,
    take_while1,
    value,
)

# ###############
# Public Interface
# ###############


@labeled("version number")
def version_number(text: str, pos: int = 0) -> tuple[VersionNumber, int]:
    """Match the numeric part of a version, trying the longest form first."""
    return _version_number(text, pos)


@labeled("pre-release")
def pre_release(text: str, pos: int = 0) -> tuple[str, int]:
    """Match ``-label`` and return the label without its leading hyphen."""
    return _pre_release(text, pos)


@labeled("version")
def version_identifier(text: str, pos: int = 0) -> tuple[Version, int]:
    """Match a version number and its optional pre-release label.

    Without a label the version must be followed by the end of input or by a
    character that cannot continue a version (anything except letters,
    digits, ``.`` and ``-``).
    """
    return _version_identifier(text, pos)


def is_pre_release_char(c: str) -> bool:
    return is_alphanumeric(c) or c in ".-"


# ################
# Implementation
# ################

_component = map_(digit1, int)

_version_number = alt(
    context(
        "major.minor.patch",
        map_(
            seq(_component, char("."), _component, char("."), _component),
            lambda parts: VersionNumber(major=parts[0], minor=parts[2], patch=parts[4]),
        ),
    ),
    context(
        "major.minor",
        map_(seq(_component, char("."), _component), lambda parts: VersionNumber(major=parts[0], minor=parts[2])),
    ),
    context("major", map_(_component, lambda major: VersionNumber(major=major))),
)

_pre_release_rest = take_while(is_pre_release_char)

_leading_no_zero = context("no leading zero", alt(one_of("123456789-."), alpha1))

_leading_single_zero = context("single leading zero", seq(char("0"), not_(char("0"), "no second leading zero")))

_pre_release = preceded(
    char("-"),
    alt(
        recognize(seq(_leading_no_zero, _pre_release_rest)),
        recognize(seq(_leading_single_zero, _pre_release_rest)),
    ),
)

_version_end = value(None, not_(take_while1(is_pre_release_char), "end of version"))

_version_identifier = map_(
    seq(version_number, alt(pre_release, _version_end)),
    lambda parts: Version(number=parts[0], pre_release=parts[1]),
)
