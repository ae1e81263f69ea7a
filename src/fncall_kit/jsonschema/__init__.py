# src/fncall_kit/jsonschema/__init__.py

"""Typed JSON Schema model and type-to-schema derivation.

Example:
    >>> from fncall_kit.jsonschema import schema_for
    >>> schema_for(list[int]).to_json_schema()
    {'type': 'array', 'items': {'type': 'integer'}}
"""

from .derive import schema_for
from .nodes import (
    ArraySchema,
    BooleanSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
    parse_schema,
)

__all__ = [
    # Derivation
    "schema_for",
    "parse_schema",
    # Nodes
    "SchemaNode",
    "StringSchema",
    "NumberSchema",
    "IntegerSchema",
    "ObjectSchema",
    "ArraySchema",
    "BooleanSchema",
    "NullSchema",
]
