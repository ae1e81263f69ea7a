# tests/unit/jsonschema/test_derive.py

import enum
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal

import pytest
from pydantic import BaseModel, Field

from fncall_kit.errors import UnsupportedTypeError
from fncall_kit.jsonschema import (
    ArraySchema,
    BooleanSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    schema_for,
)


class Color(str, enum.Enum):
    RED = "red"
    GREEN = "green"


class Priority(enum.IntEnum):
    LOW = 1
    HIGH = 2


class Location(BaseModel):
    """A place on the map."""

    city: str = Field(description="City name")
    zoom: int = 3


class Node(BaseModel):
    children: list["Node"]


class Empty(enum.Enum):
    pass


type Tree = list[Tree]


class TestScalars:
    @pytest.mark.parametrize(
        ("annotation", "expected"),
        [
            (str, StringSchema()),
            (int, IntegerSchema()),
            (float, NumberSchema()),
            (bool, BooleanSchema()),
            (None, NullSchema()),
            (type(None), NullSchema()),
        ],
    )
    def test_scalar_types(self, annotation: Any, expected: Any) -> None:
        assert schema_for(annotation) == expected

    def test_bool_is_not_an_integer(self) -> None:
        assert isinstance(schema_for(bool), BooleanSchema)

    def test_str_enum(self) -> None:
        assert schema_for(Color) == StringSchema(enum=["red", "green"])

    def test_int_enum(self) -> None:
        assert schema_for(Priority) == IntegerSchema(enum=[1, 2])

    def test_literal(self) -> None:
        assert schema_for(Literal["asc", "desc"]) == StringSchema(
            enum=["asc", "desc"]
        )

    def test_annotated_field_description(self) -> None:
        annotation = Annotated[int, Field(description="Page size", ge=1)]
        assert schema_for(annotation) == IntegerSchema(description="Page size")

    def test_annotated_without_field_is_transparent(self) -> None:
        assert schema_for(Annotated[str, "unit"]) == StringSchema()


class TestContainers:
    @pytest.mark.parametrize("annotation", [list[int], Sequence[int], tuple[int, ...]])
    def test_sequences(self, annotation: Any) -> None:
        assert schema_for(annotation) == ArraySchema(items=IntegerSchema())

    @pytest.mark.parametrize("annotation", [set[str], frozenset[str]])
    def test_sets_are_unique_arrays(self, annotation: Any) -> None:
        assert schema_for(annotation) == ArraySchema(
            items=StringSchema(), unique_items=True
        )

    def test_fixed_tuple_uses_prefix_items(self) -> None:
        assert schema_for(tuple[str, float]) == ArraySchema(
            prefix_items=[StringSchema(), NumberSchema()],
            min_items=2,
            max_items=2,
        )

    @pytest.mark.parametrize("annotation", [dict[str, int], Mapping[str, int]])
    def test_mapping_is_array_of_pairs(self, annotation: Any) -> None:
        assert schema_for(annotation) == ArraySchema(
            items=ObjectSchema(
                properties={"key": StringSchema(), "value": IntegerSchema()}
            )
        )

    def test_nested_containers(self) -> None:
        assert schema_for(list[set[bool]]) == ArraySchema(
            items=ArraySchema(items=BooleanSchema(), unique_items=True)
        )


class TestModels:
    def test_pydantic_model_becomes_object(self) -> None:
        assert schema_for(Location) == ObjectSchema(
            title="Location",
            description="A place on the map.",
            properties={
                "city": StringSchema(description="City name"),
                "zoom": IntegerSchema(),
            },
            required={"city"},
        )

    def test_recursive_model_fails(self) -> None:
        with pytest.raises(UnsupportedTypeError, match="recursive model"):
            schema_for(Node)


class TestUnsupported:
    @pytest.mark.parametrize(
        "annotation",
        [bytes, complex, object, Any, list, dict, int | None, list[int | str]],
    )
    def test_unsupported_types_raise(self, annotation: Any) -> None:
        with pytest.raises(UnsupportedTypeError, match="Unsupported type"):
            schema_for(annotation)

    def test_error_names_the_type(self) -> None:
        with pytest.raises(UnsupportedTypeError) as exc_info:
            schema_for(dict[str, bytes])
        assert exc_info.value.annotation is bytes

    def test_unsupported_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            schema_for(complex)

    def test_recursive_alias_fails(self) -> None:
        with pytest.raises(UnsupportedTypeError, match="recursive type alias"):
            schema_for(Tree)

    def test_empty_enum_fails(self) -> None:
        with pytest.raises(UnsupportedTypeError, match="no enum values"):
            schema_for(Empty)
