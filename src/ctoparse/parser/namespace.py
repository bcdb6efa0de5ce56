# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Namespace statements and fully qualified type names.

A namespace names a dotted path pinned to a version (``com.acme@1.0.0``). A
fully qualified name appends a type name to that (``com.acme@1.0.0.Person``).
With a pre-release label present, the label and the type name share one
dot-separated suffix (``@1.0.0-beta.2.Person``); the final dot-segment is the
type name and everything before it is the label.
"""

from __future__ import annotations

from ctoparse.model import FullyQualifiedName, Namespace, Version
from ctoparse.parser.combinators import (
    alt,
    char,
    context,
    labeled,
    many0,
    map_,
    preceded,
    recognize,
    seq,
    space1,
    tag,
    take_while1,
)
from ctoparse.parser.errors import ErrorKind, ParseFailure
from ctoparse.parser.lexical import token
from ctoparse.parser.version import is_pre_release_char, pre_release, version_identifier, version_number

# ###############
# Public Interface
# ###############


@labeled("dotted name")
def dotted_name(text: str, pos: int = 0) -> tuple[str, int]:
    """One or more tokens joined by ``.``."""
    return _dotted_name(text, pos)


@labeled("namespace reference")
def namespace_reference(text: str, pos: int = 0) -> tuple[Namespace, int]:
    """Match ``name@version`` without the ``namespace`` keyword."""
    return _namespace_reference(text, pos)


@labeled("namespace")
def namespace_identifier(text: str, pos: int = 0) -> tuple[Namespace, int]:
    """Match a ``namespace <dotted-name>@<version>`` statement."""
    return _namespace_identifier(text, pos)


@labeled("fully qualified name")
def fully_qualified_name(text: str, pos: int = 0) -> tuple[FullyQualifiedName, int]:
    """Match ``<dotted-name>@<version>.<TypeName>``.

    The form carrying a pre-release label is tried before the plain form.
    """
    return _fully_qualified_name(text, pos)


# ################
# Implementation
# ################

_dotted_name = recognize(seq(token, many0(preceded(char("."), token))))

_namespace_reference = map_(
    seq(_dotted_name, char("@"), version_identifier),
    lambda parts: Namespace(name=parts[0], version=parts[2]),
)

_namespace_identifier = preceded(seq(tag("namespace"), space1), _namespace_reference)

_pre_release_run = take_while1(is_pre_release_char, ErrorKind.EXPECTED_CHARACTER, "pre-release label")


@labeled("pre-release and type name")
def _pre_release_and_type(text: str, pos: int = 0) -> tuple[tuple[str, str], int]:
    """Split ``label.TypeName`` at its last dot, validating both halves.

    *pos* points just past the hyphen introducing the label.
    """
    run, end = _pre_release_run(text, pos)
    split = pos + run.rfind(".")
    if split < pos:
        raise ParseFailure(end, ErrorKind.EXPECTED_CHARACTER, "'.' before the type name")

    type_name, type_end = token(text, split + 1)
    if type_end != end:
        raise ParseFailure(type_end, ErrorKind.INVALID_VALUE, "type name ending the pre-release label")

    # Re-validate the label alone through the pre-release grammar.
    label, label_end = pre_release(text[:split], pos - 1)
    if label_end != split:
        raise ParseFailure(label_end, ErrorKind.INVALID_VALUE, "pre-release label")
    return (label, type_name), end


def _build_with_pre_release(parts: tuple) -> FullyQualifiedName:
    name, _, number, _, (label, type_name) = parts
    return FullyQualifiedName(name=name, version=Version(number=number, pre_release=label), type_name=type_name)


_fqn_with_pre_release = context(
    "with pre-release",
    map_(
        seq(_dotted_name, char("@"), version_number, char("-"), _pre_release_and_type),
        _build_with_pre_release,
    ),
)

_fqn_no_pre_release = context(
    "without pre-release",
    map_(
        seq(_dotted_name, char("@"), version_number, char("."), token),
        lambda parts: FullyQualifiedName(
            name=parts[0],
            version=Version(number=parts[2]),
            type_name=parts[4],
        ),
    ),
)

_fully_qualified_name = alt(_fqn_with_pre_release, _fqn_no_pre_release)
