# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Top-level parser for CTO sources.

A source is an unordered, whitespace-separated sequence of one namespace
statement and any number of concept declarations. Declarations keep their
source order.
"""

from __future__ import annotations

import logging

from ctoparse.model import Declaration, Model, Namespace
from ctoparse.parser.combinators import alt, labeled, multispace0
from ctoparse.parser.declaration import concept_declaration
from ctoparse.parser.errors import ErrorKind, ParseError, ParseFailure, line_and_column
from ctoparse.parser.namespace import namespace_identifier

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(source: str) -> Model:
    """Parse CTO source text into a Model.

    Args:
        source: The full text of a .cto file.

    Returns:
        The namespace and the concept declarations in source order.

    Raises:
        ParseError: If the source is syntactically invalid or declares no
            namespace. The error points at the furthest position any rule
            reached.
    """
    builder = _ModelBuilder()
    pos = 0
    try:
        while True:
            _, pos = multispace0(source, pos)
            if pos >= len(source):
                break
            definition, pos = _definition(source, pos)
            builder.add(definition, source, pos)
    except ParseFailure as failure:
        raise ParseError.from_failure(source, failure) from None
    return builder.build(source)


# ################
# Implementation
# ################


@labeled("definition")
def _definition(text: str, pos: int = 0) -> tuple[Namespace | Declaration, int]:
    return _namespace_or_concept(text, pos)


_namespace_or_concept = alt(namespace_identifier, concept_declaration)


class _ModelBuilder:
    """Accumulates definitions during one call to :func:`parse`."""

    def __init__(self) -> None:
        self._namespace: Namespace | None = None
        self._namespace_count = 0
        self._declarations: list[Declaration] = []

    def add(self, definition: Namespace | Declaration, source: str, end: int) -> None:
        if isinstance(definition, Namespace):
            self._namespace = definition
            self._namespace_count += 1
            if self._namespace_count > 1:
                line, _ = line_and_column(source, end)
                logger.warning("Namespace %s on line %d replaces an earlier namespace statement", definition, line)
        else:
            logger.debug("Parsed concept %s with %d properties", definition.name, len(definition.properties))
            self._declarations.append(definition)

    def build(self, source: str) -> Model:
        if self._namespace is None:
            line, column = line_and_column(source, len(source))
            raise ParseError(
                "expected a namespace declaration",
                line,
                column,
                offset=len(source),
                kind=ErrorKind.UNEXPECTED_END_OF_INPUT,
            )
        return Model(namespace=self._namespace, declarations=tuple(self._declarations))
