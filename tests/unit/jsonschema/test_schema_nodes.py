# tests/unit/jsonschema/test_schema_nodes.py

import pytest
from pydantic import ValidationError

from fncall_kit.jsonschema import (
    ArraySchema,
    BooleanSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    parse_schema,
)


class TestSerialization:
    @pytest.mark.parametrize(
        ("node", "expected_type"),
        [
            (StringSchema(), "string"),
            (NumberSchema(), "number"),
            (IntegerSchema(), "integer"),
            (ObjectSchema(), "object"),
            (ArraySchema(), "array"),
            (BooleanSchema(), "boolean"),
            (NullSchema(), "null"),
        ],
    )
    def test_unset_fields_are_omitted(self, node, expected_type: str) -> None:
        assert node.to_json_schema() == {"type": expected_type}

    def test_string_keywords_use_wire_names(self) -> None:
        node = StringSchema(
            min_length=1,
            max_length=8,
            pattern="^[a-z]+$",
            content_media_type="text/plain",
            comment="lowercase only",
            read_only=True,
        )

        assert node.to_json_schema() == {
            "type": "string",
            "minLength": 1,
            "maxLength": 8,
            "pattern": "^[a-z]+$",
            "contentMediaType": "text/plain",
            "$comment": "lowercase only",
            "readOnly": True,
        }

    def test_falsy_values_are_kept(self) -> None:
        """Only unset keywords are dropped, not zeros or False."""
        node = IntegerSchema(default=0, minimum=0, deprecated=False)

        assert node.to_json_schema() == {
            "type": "integer",
            "default": 0,
            "minimum": 0,
            "deprecated": False,
        }

    def test_nested_nodes_keep_their_type(self) -> None:
        node = ObjectSchema(
            properties={
                "tags": ArraySchema(items=StringSchema(), unique_items=True),
                "count": IntegerSchema(),
            },
            required={"tags"},
        )

        assert node.to_json_schema() == {
            "type": "object",
            "properties": {
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "uniqueItems": True,
                },
                "count": {"type": "integer"},
            },
            "required": ["tags"],
        }

    def test_required_follows_property_order(self) -> None:
        node = ObjectSchema(
            properties={"b": StringSchema(), "a": StringSchema()},
            required={"a", "b", "extra"},
        )

        assert node.to_json_schema()["required"] == ["b", "a", "extra"]

    def test_empty_required_is_omitted_when_nested(self) -> None:
        node = ArraySchema(items=ObjectSchema(properties={"a": StringSchema()}))

        assert node.to_json_schema() == {
            "type": "array",
            "items": {"type": "object", "properties": {"a": {"type": "string"}}},
        }

    def test_enum_and_examples(self) -> None:
        node = StringSchema(enum=["red", "green"], examples=["red"])

        assert node.to_json_schema() == {
            "type": "string",
            "enum": ["red", "green"],
            "examples": ["red"],
        }


class TestConstruction:
    def test_type_cannot_be_overridden(self) -> None:
        with pytest.raises(ValidationError):
            StringSchema(type="integer")  # type: ignore[arg-type]

    def test_nodes_are_immutable(self) -> None:
        node = StringSchema()
        with pytest.raises(ValidationError):
            node.title = "changed"  # type: ignore[misc]

    def test_pattern_is_compiled(self) -> None:
        node = StringSchema(pattern=r"\d+")
        assert node.pattern is not None
        assert node.pattern.fullmatch("123")

    def test_invalid_pattern_property_rejected(self) -> None:
        with pytest.raises(ValidationError, match="invalid pattern"):
            ObjectSchema(pattern_properties={"[": StringSchema()})

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StringSchema(min_length=-1)

    def test_camel_case_names_accepted(self) -> None:
        assert StringSchema(minLength=2) == StringSchema(min_length=2)


class TestParse:
    def test_parse_dispatches_on_type(self) -> None:
        node = parse_schema(
            {
                "type": "object",
                "title": "Order",
                "properties": {
                    "id": {"type": "integer", "minimum": 1},
                    "lines": {
                        "type": "array",
                        "items": {"type": "string"},
                        "prefixItems": [{"type": "null"}],
                    },
                },
                "patternProperties": {"^x-": {"type": "boolean"}},
                "propertyNames": {"type": "string", "maxLength": 10},
                "required": ["id"],
            }
        )

        assert isinstance(node, ObjectSchema)
        assert node.title == "Order"
        assert node.properties["id"] == IntegerSchema(minimum=1)
        assert node.properties["lines"] == ArraySchema(
            items=StringSchema(), prefix_items=[NullSchema()]
        )
        assert node.pattern_properties == {"^x-": BooleanSchema()}
        assert node.property_names == StringSchema(max_length=10)
        assert node.required == frozenset({"id"})

    def test_parse_inverts_serialization(self) -> None:
        node = ArraySchema(
            items=NumberSchema(exclusive_maximum=1.5),
            contains=StringSchema(comment="marker"),
            min_contains=1,
        )

        assert parse_schema(node.to_json_schema()) == node

    def test_parse_unknown_type_fails(self) -> None:
        with pytest.raises(ValidationError):
            parse_schema({"type": "date"})

    def test_parse_ignores_unmodelled_keywords(self) -> None:
        node = parse_schema({"type": "object", "additionalProperties": False})
        assert node.to_json_schema() == {"type": "object"}
