# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Concept declarations."""

from __future__ import annotations

from ctoparse.model import Declaration
from ctoparse.parser.combinators import (
    alt,
    char,
    context,
    delimited,
    labeled,
    line_ending,
    many0,
    map_,
    multispace0,
    preceded,
    seq,
    space0,
    space1,
    tag,
    value,
)
from ctoparse.parser.lexical import token
from ctoparse.parser.properties import property_definition

# ###############
# Public Interface
# ###############


@labeled("concept")
def concept_declaration(text: str, pos: int = 0) -> tuple[Declaration, int]:
    """Match ``concept <Name> { ... }``.

    Either the braces enclose only whitespace, or the opening brace ends its
    line and each following line holds exactly one property.
    """
    (name, properties), end = _concept(text, pos)
    return Declaration(name=name, properties=tuple(properties)), end


# ################
# Implementation
# ################

_property_line = context("property line", delimited(space0, property_definition, seq(space0, line_ending)))

# The property loop stops at a line that is not a property, so retrying the
# property rule here only contributes its failure when the brace is missing.
_closing_brace = alt(_property_line, seq(multispace0, char("}")))

_property_block = context(
    "property block",
    delimited(
        seq(char("{"), space0, line_ending),
        many0(_property_line),
        _closing_brace,
    ),
)

_empty_block = context("empty block", value([], seq(char("{"), multispace0, char("}"))))

_concept = map_(
    seq(preceded(seq(tag("concept"), space1), token), space0, alt(_property_block, _empty_block)),
    lambda parts: (parts[0], parts[2]),
)
