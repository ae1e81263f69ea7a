# src/fncall_kit/jsonschema/nodes.py

"""JSON Schema value model.

One frozen pydantic model per JSON Schema primitive type. The `type`
field is fixed per variant and doubles as the union discriminator, so a
serialized tree needs no extra tag to be parsed back.

Attributes are snake_case in Python and camelCase on the wire
(`min_length` <-> `minLength`, `comment` <-> `$comment`).
"""

import re
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    field_serializer,
    field_validator,
    model_serializer,
)
from pydantic.alias_generators import to_camel


class _SchemaBase(BaseModel):
    """Annotation keywords shared by every schema type."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    title: str | None = None
    description: str | None = None
    default: Any = None
    examples: list[Any] | None = None
    deprecated: bool | None = None
    read_only: bool | None = None
    write_only: bool | None = None
    comment: str | None = Field(default=None, alias="$comment")
    enum: list[Any] | None = None
    const: Any = None

    @model_serializer(mode="wrap")
    def serialize_with_type(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        # `type` equals its default, so exclude_defaults would drop it
        data = {"type": self.type, **handler(self)}  # type: ignore[attr-defined]
        # field serializers bypass exclude_defaults; no required names means unset
        if data.get("required") == []:
            del data["required"]
        return data

    def to_json_schema(self) -> dict[str, Any]:
        """Compact JSON-ready dict. Unset keywords are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_defaults=True)


class StringSchema(_SchemaBase):
    type: Literal["string"] = "string"

    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    pattern: re.Pattern[str] | None = None
    format: str | None = None
    content_media_type: str | None = None
    content_encoding: str | None = None


class _NumericSchema(_SchemaBase):
    multiple_of: int | float | None = None
    minimum: int | float | None = None
    exclusive_minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive_maximum: int | float | None = None


class NumberSchema(_NumericSchema):
    type: Literal["number"] = "number"


class IntegerSchema(_NumericSchema):
    """Same keywords as NumberSchema; values are expected to be whole numbers."""

    type: Literal["integer"] = "integer"


class ObjectSchema(_SchemaBase):
    type: Literal["object"] = "object"

    properties: dict[str, "SchemaNode"] = {}
    pattern_properties: dict[str, "SchemaNode"] = {}
    required: frozenset[str] = frozenset()
    property_names: "SchemaNode | None" = None
    min_properties: int | None = Field(default=None, ge=0)
    max_properties: int | None = Field(default=None, ge=0)

    @field_validator("pattern_properties")
    @classmethod
    def validate_pattern_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc
        return value

    @field_serializer("required")
    def serialize_required(self, required: frozenset[str]) -> list[str]:
        # property order first, then anything left over
        ordered = [name for name in self.properties if name in required]
        return ordered + sorted(required.difference(ordered))


class ArraySchema(_SchemaBase):
    type: Literal["array"] = "array"

    items: "SchemaNode | None" = None
    prefix_items: list["SchemaNode"] = []
    contains: "SchemaNode | None" = None
    min_contains: int | None = Field(default=None, ge=0)
    max_contains: int | None = Field(default=None, ge=0)
    min_items: int | None = Field(default=None, ge=0)
    max_items: int | None = Field(default=None, ge=0)
    unique_items: bool | None = None


class BooleanSchema(_SchemaBase):
    type: Literal["boolean"] = "boolean"


class NullSchema(_SchemaBase):
    type: Literal["null"] = "null"


SchemaNode = Annotated[
    StringSchema
    | NumberSchema
    | IntegerSchema
    | ObjectSchema
    | ArraySchema
    | BooleanSchema
    | NullSchema,
    Field(discriminator="type"),
]

ObjectSchema.model_rebuild()
ArraySchema.model_rebuild()

_SCHEMA_ADAPTER: TypeAdapter[SchemaNode] = TypeAdapter(SchemaNode)


def parse_schema(data: dict[str, Any]) -> SchemaNode:
    """Build a schema node from its JSON form.

    Dispatches on `type`. Keywords this model does not know about
    (e.g. `additionalProperties`) are dropped.

    Raises:
        pydantic.ValidationError: If `type` is missing or unknown, or a
            keyword has the wrong shape.
    """
    return _SCHEMA_ADAPTER.validate_python(data)
