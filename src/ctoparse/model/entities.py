# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Namespaces, versions, declarations and models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ctoparse.model.types import Property

# ###############
# Public Interface
# ###############


class VersionNumber(BaseModel):
    """The numeric part of a semantic version. Omitted components are 0."""

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class Version(BaseModel):
    """A semantic version with an optional pre-release label."""

    model_config = ConfigDict(frozen=True)

    number: VersionNumber
    pre_release: str | None = None

    def __str__(self) -> str:
        if self.pre_release is None:
            return str(self.number)
        return f"{self.number}-{self.pre_release}"


class Namespace(BaseModel):
    """A dotted namespace name pinned to a version, e.g. ``com.acme@1.0.0``."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: Version

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


class FullyQualifiedName(BaseModel):
    """A type name qualified by its namespace, e.g. ``com.acme@1.0.0.Person``."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: Version
    type_name: str

    @property
    def namespace(self) -> Namespace:
        return Namespace(name=self.name, version=self.version)

    def __str__(self) -> str:
        return f"{self.name}@{self.version}.{self.type_name}"


class Declaration(BaseModel):
    """A ``concept`` declaration and its properties in source order."""

    model_config = ConfigDict(frozen=True)

    name: str
    properties: tuple[Property, ...] = ()

    def get_property(self, name: str) -> Property | None:
        """Return the first property called *name*, or None."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


class Model(BaseModel):
    """The result of parsing one CTO source: a namespace and its declarations."""

    model_config = ConfigDict(frozen=True)

    namespace: Namespace
    declarations: tuple[Declaration, ...] = ()

    def get_declaration(self, name: str) -> Declaration | None:
        """Return the first declaration called *name*, or None."""
        for declaration in self.declarations:
            if declaration.name == name:
                return declaration
        return None
