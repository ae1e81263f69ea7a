# src/fncall_kit/jsonschema/derive.py

"""Derive schema nodes from Python type annotations.

Scalars are matched by subclass, generic containers by their origin
(`typing.get_origin`). Unknown types fail loudly rather than falling
back to a string schema.
"""

import collections.abc
import enum
import inspect
import logging
from collections.abc import Callable
from typing import Annotated, Any, Literal, TypeAliasType, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from fncall_kit.errors import UnsupportedTypeError

from .nodes import (
    ArraySchema,
    BooleanSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)

logger = logging.getLogger(__name__)

# Checked in order: bool is a subclass of int.
_SCALAR_RULES: list[tuple[type, Callable[[], SchemaNode]]] = [
    (bool, BooleanSchema),
    (int, IntegerSchema),
    (float, NumberSchema),
    (str, StringSchema),
    (type(None), NullSchema),
]


def schema_for(annotation: Any) -> SchemaNode:
    """Derive a schema node for a type annotation.

    Args:
        annotation: A class or typing construct, e.g. `int`,
            `list[str]`, `dict[str, float]` or a pydantic model.

    Returns:
        A fresh schema node. Containers are derived recursively.

    Raises:
        UnsupportedTypeError: If the annotation (or anything nested in
            it) has no mapping. Nothing partial is returned.
    """
    return _derive(annotation, ())


def _derive(annotation: Any, seen: tuple[Any, ...]) -> SchemaNode:
    if annotation is None:
        return NullSchema()

    if isinstance(annotation, TypeAliasType):
        if annotation in seen:
            raise UnsupportedTypeError(annotation, "recursive type alias")
        return _derive(annotation.__value__, (*seen, annotation))

    origin = get_origin(annotation)
    if origin is Annotated:
        return _annotated(get_args(annotation), seen)
    if origin is not None:
        rule = _ORIGIN_RULES.get(origin)
        if rule is None:
            raise UnsupportedTypeError(annotation)
        return rule(annotation, get_args(annotation), seen)

    if not isinstance(annotation, type):
        raise UnsupportedTypeError(annotation)

    if annotation in _ORIGIN_RULES:
        raise UnsupportedTypeError(annotation, "missing type arguments")

    if issubclass(annotation, enum.Enum):
        return _enum(annotation)

    if issubclass(annotation, BaseModel):
        if annotation in seen:
            raise UnsupportedTypeError(annotation, "recursive model")
        return _model(annotation, (*seen, annotation))

    for scalar, factory in _SCALAR_RULES:
        if issubclass(annotation, scalar):
            return factory()

    raise UnsupportedTypeError(annotation)


def _annotated(args: tuple[Any, ...], seen: tuple[Any, ...]) -> SchemaNode:
    inner, *metadata = args
    node = _derive(inner, seen)
    # only `Field(description=...)` carries over; constraints are not mapped
    for item in metadata:
        if isinstance(item, FieldInfo) and item.description:
            node = node.model_copy(update={"description": item.description})
    return node


def _sequence(
    annotation: Any, args: tuple[Any, ...], seen: tuple[Any, ...]
) -> SchemaNode:
    if not args:
        raise UnsupportedTypeError(annotation, "missing element type")
    return ArraySchema(items=_derive(args[0], seen))


def _set(annotation: Any, args: tuple[Any, ...], seen: tuple[Any, ...]) -> SchemaNode:
    if not args:
        raise UnsupportedTypeError(annotation, "missing element type")
    return ArraySchema(items=_derive(args[0], seen), unique_items=True)


def _tuple(
    annotation: Any, args: tuple[Any, ...], seen: tuple[Any, ...]
) -> SchemaNode:
    if len(args) == 2 and args[1] is Ellipsis:
        return ArraySchema(items=_derive(args[0], seen))
    # fixed shape: one schema per position
    return ArraySchema(
        prefix_items=[_derive(arg, seen) for arg in args],
        min_items=len(args),
        max_items=len(args),
    )


def _mapping(
    annotation: Any, args: tuple[Any, ...], seen: tuple[Any, ...]
) -> SchemaNode:
    if len(args) != 2:
        raise UnsupportedTypeError(annotation, "missing key or value type")
    key, value = args
    return ArraySchema(
        items=ObjectSchema(
            properties={
                "key": _derive(key, seen),
                "value": _derive(value, seen),
            }
        )
    )


def _literal(
    annotation: Any, args: tuple[Any, ...], seen: tuple[Any, ...]
) -> SchemaNode:
    return _enumerated(annotation, list(args))


def _enum(annotation: type[enum.Enum]) -> SchemaNode:
    return _enumerated(annotation, [member.value for member in annotation])


def _enumerated(annotation: Any, values: list[Any]) -> SchemaNode:
    if not values:
        raise UnsupportedTypeError(annotation, "no enum values")
    value_types = {type(value) for value in values}
    if len(value_types) != 1:
        raise UnsupportedTypeError(annotation, "enum values of mixed types")
    node = _derive(value_types.pop(), ())
    return node.model_copy(update={"enum": values})


def _model(model: type[BaseModel], seen: tuple[Any, ...]) -> SchemaNode:
    properties: dict[str, SchemaNode] = {}
    required: set[str] = set()
    for name, field in model.model_fields.items():
        key = field.alias or name
        node = _derive(field.annotation, seen)
        if field.description:
            node = node.model_copy(update={"description": field.description})
        properties[key] = node
        if field.is_required():
            required.add(key)

    logger.debug("Derived object schema for model %s", model.__name__)
    return ObjectSchema(
        title=model.__name__,
        description=inspect.cleandoc(model.__doc__) if model.__doc__ else None,
        properties=properties,
        required=frozenset(required),
    )


_ORIGIN_RULES: dict[
    Any, Callable[[Any, tuple[Any, ...], tuple[Any, ...]], SchemaNode]
] = {
    list: _sequence,
    collections.abc.Sequence: _sequence,
    collections.abc.MutableSequence: _sequence,
    tuple: _tuple,
    Literal: _literal,
    set: _set,
    frozenset: _set,
    collections.abc.Set: _set,
    collections.abc.MutableSet: _set,
    dict: _mapping,
    collections.abc.Mapping: _mapping,
    collections.abc.MutableMapping: _mapping,
}
