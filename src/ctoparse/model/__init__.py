# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for CTO sources (namespaces, concepts, properties)."""

from ctoparse.model.entities import (
    Declaration,
    FullyQualifiedName,
    Model,
    Namespace,
    Version,
    VersionNumber,
)
from ctoparse.model.types import (
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

__all__ = [
    # Validators
    "StringRegexValidator",
    "StringLengthValidator",
    "IntegerDomainValidator",
    "LongDomainValidator",
    "DoubleDomainValidator",
    # Properties
    "StringProperty",
    "BooleanProperty",
    "IntegerProperty",
    "LongProperty",
    "DoubleProperty",
    "DateTimeProperty",
    "ReferenceProperty",
    "Property",
    # Entities
    "VersionNumber",
    "Version",
    "Namespace",
    "FullyQualifiedName",
    "Declaration",
    "Model",
]
