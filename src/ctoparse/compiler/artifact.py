# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed models.

Models are written as JSON in the Concerto metamodel shape: every object
carries a ``$class`` discriminator, and optional fields are omitted when
absent. Non-finite doubles are written as the strings ``"NaN"``,
``"Infinity"`` and ``"-Infinity"``.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from ctoparse.model import (
    BooleanProperty,
    DateTimeProperty,
    Declaration,
    DoubleDomainValidator,
    DoubleProperty,
    IntegerDomainValidator,
    IntegerProperty,
    LongDomainValidator,
    LongProperty,
    Model,
    Namespace,
    Property,
    ReferenceProperty,
    StringLengthValidator,
    StringProperty,
    StringRegexValidator,
)
from ctoparse.parser.combinators import run
from ctoparse.parser.errors import ParseError
from ctoparse.parser.namespace import namespace_reference

# ###############
# Public Interface
# ###############

ARTIFACT_SUFFIX = ".cto.json"

METAMODEL_NAMESPACE = "concerto.metamodel@1.0.0"


def serialize(model: Model, indent: int | None = 2) -> str:
    """Serialize a Model to a JSON string.

    Args:
        model: The parsed model.
        indent: Indentation width, or None for a single compact line.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        _model_to_dict(model), indent=indent, separators=separators, ensure_ascii=False, allow_nan=False
    )


def deserialize(data: str) -> Model:
    """Deserialize a Model from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Model`.

    Raises:
        ValueError: If the document is not valid JSON, uses an unknown
            ``$class``, carries a malformed namespace, or does not have the
            expected structure.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Artifact is not valid JSON: {exc}") from exc
    try:
        return _model_from_dict(obj)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed artifact: {exc!r}") from exc


def write_artifact(model: Model, path: Path, indent: int | None = 2) -> None:
    """Write a serialized model to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(model, indent=indent), encoding="utf-8")


def read_artifact(path: Path) -> Model:
    """Read and deserialize a model artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _class_name(short_name: str) -> str:
    return f"{METAMODEL_NAMESPACE}.{short_name}"


_PROPERTY_CLASSES: dict[type, str] = {
    StringProperty: _class_name("StringProperty"),
    BooleanProperty: _class_name("BooleanProperty"),
    IntegerProperty: _class_name("IntegerProperty"),
    LongProperty: _class_name("LongProperty"),
    DoubleProperty: _class_name("DoubleProperty"),
    DateTimeProperty: _class_name("DateTimeProperty"),
    ReferenceProperty: _class_name("ObjectProperty"),
}

_DOMAIN_VALIDATORS: dict[type, type] = {
    IntegerProperty: IntegerDomainValidator,
    LongProperty: LongDomainValidator,
    DoubleProperty: DoubleDomainValidator,
}


def _check_class(obj: Any, expected: str) -> None:
    if not isinstance(obj, dict):
        raise ValueError(f"Expected a JSON object for {expected!r}, got {type(obj).__name__}")
    actual = obj.get("$class")
    if actual != expected:
        raise ValueError(f"Expected $class {expected!r}, got {actual!r}")


def _model_to_dict(model: Model) -> dict[str, Any]:
    return {
        "$class": _class_name("Model"),
        "namespace": str(model.namespace),
        "declarations": [_declaration_to_dict(d) for d in model.declarations],
    }


def _model_from_dict(obj: dict[str, Any]) -> Model:
    _check_class(obj, _class_name("Model"))
    return Model(
        namespace=_namespace_from_str(obj["namespace"]),
        declarations=tuple(_declaration_from_dict(d) for d in _list_field(obj, "declarations")),
    )


def _namespace_from_str(text: str) -> Namespace:
    try:
        return run(namespace_reference, text, complete=True)
    except ParseError as exc:
        raise ValueError(f"Invalid namespace {text!r}: {exc}") from exc


def _declaration_to_dict(declaration: Declaration) -> dict[str, Any]:
    return {
        "$class": _class_name("ConceptDeclaration"),
        "name": declaration.name,
        "properties": [_property_to_dict(p) for p in declaration.properties],
    }


def _declaration_from_dict(obj: dict[str, Any]) -> Declaration:
    _check_class(obj, _class_name("ConceptDeclaration"))
    return Declaration(
        name=obj["name"],
        properties=tuple(_property_from_dict(p) for p in _list_field(obj, "properties")),
    )


def _property_to_dict(prop: Property) -> dict[str, Any]:
    d: dict[str, Any] = {
        "$class": _PROPERTY_CLASSES[type(prop)],
        "name": prop.name,
        "isOptional": prop.is_optional,
        "isArray": prop.is_array,
    }
    if isinstance(prop, ReferenceProperty):
        d["type"] = prop.type_name
        return d
    if prop.default_value is not None:
        d["default"] = _number_to_json(prop.default_value)
    if isinstance(prop, StringProperty):
        if prop.regex is not None:
            d["regex"] = {"pattern": prop.regex.pattern, "flags": prop.regex.flags}
        if prop.length is not None:
            d["length"] = _bounds_to_dict(prop.length.min_length, prop.length.max_length, "minLength", "maxLength")
    elif isinstance(prop, IntegerProperty | LongProperty | DoubleProperty):
        if prop.domain is not None:
            d["range"] = _bounds_to_dict(prop.domain.lower, prop.domain.upper, "lower", "upper")
    return d


def _property_from_dict(obj: dict[str, Any]) -> Property:
    if not isinstance(obj, dict):
        raise ValueError(f"Expected a JSON object for a property, got {type(obj).__name__}")
    class_name = obj.get("$class")
    cls = next((c for c, name in _PROPERTY_CLASSES.items() if name == class_name), None)
    if cls is None:
        raise ValueError(f"Unknown property $class: {class_name!r}")

    fields: dict[str, Any] = {
        "name": obj["name"],
        "is_optional": obj.get("isOptional", False),
        "is_array": obj.get("isArray", False),
    }
    if cls is ReferenceProperty:
        return ReferenceProperty(type_name=obj["type"], **fields)
    if "default" in obj:
        default = obj["default"]
        fields["default_value"] = _number_from_json(default) if cls is DoubleProperty else default
    if cls is StringProperty:
        if "regex" in obj:
            fields["regex"] = StringRegexValidator(pattern=obj["regex"]["pattern"], flags=obj["regex"].get("flags", ""))
        if "length" in obj:
            fields["length"] = StringLengthValidator(
                min_length=obj["length"].get("minLength"),
                max_length=obj["length"].get("maxLength"),
            )
    elif cls in _DOMAIN_VALIDATORS and "range" in obj:
        bounds = obj["range"]
        fields["domain"] = _DOMAIN_VALIDATORS[cls](
            lower=_number_from_json(bounds.get("lower")),
            upper=_number_from_json(bounds.get("upper")),
        )
    return cls(**fields)


def _bounds_to_dict(lower: Any, upper: Any, lower_key: str, upper_key: str) -> dict[str, Any]:
    d: dict[str, Any] = {}
    if lower is not None:
        d[lower_key] = _number_to_json(lower)
    if upper is not None:
        d[upper_key] = _number_to_json(upper)
    return d


# JSON has no literal for non-finite floats, so they are written as strings.
_NON_FINITE = {"NaN": math.nan, "Infinity": math.inf, "-Infinity": -math.inf}


def _number_to_json(number: Any) -> Any:
    if isinstance(number, float) and not math.isfinite(number):
        if math.isnan(number):
            return "NaN"
        return "Infinity" if number > 0 else "-Infinity"
    return number


def _number_from_json(value: Any) -> Any:
    if isinstance(value, str):
        if value not in _NON_FINITE:
            raise ValueError(f"Invalid number {value!r}")
        return _NON_FINITE[value]
    return value


def _list_field(obj: dict[str, Any], key: str) -> list[Any]:
    items = obj.get(key, [])
    if not isinstance(items, list):
        raise ValueError(f"Expected a list for {key!r}, got {type(items).__name__}")
    return items
