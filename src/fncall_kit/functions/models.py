# src/fncall_kit/functions/models.py

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from fncall_kit.jsonschema import ObjectSchema

logger = logging.getLogger(__name__)


class FunctionDescriptor(BaseModel):
    """A callable offered to the model as a function it may call.

    Immutable. `name` is the hyphen-qualified name produced by
    `qualified_name`; `parameters` is always an object schema.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    parameters: ObjectSchema

    def to_wire(self) -> dict[str, Any]:
        """Render in the chat API's `functions[]` format."""
        data: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            data["description"] = self.description
        data["parameters"] = self.parameters.to_json_schema()
        return data

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "FunctionDescriptor":
        return cls.model_validate(data)


class FunctionCall(BaseModel):
    """A function call requested by the model.

    `arguments` is the raw JSON-encoded string exactly as the API sent it.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: str = "{}"

    def decode_arguments(self) -> dict[str, Any]:
        """Decode `arguments` into a name -> value mapping.

        Scalars are flattened to their JSON text (`3` -> "3",
        `true` -> "true"), null becomes None, arrays and objects keep
        their shape. Malformed input decodes to an empty mapping.
        """
        try:
            decoded = json.loads(
                self.arguments, parse_int=str, parse_float=str, parse_constant=str
            )
        except json.JSONDecodeError:
            logger.warning("Failed to parse function call arguments: %s", self.arguments)
            return {}

        if not isinstance(decoded, dict):
            logger.warning(
                "Function call arguments are not a JSON object: %s", self.arguments
            )
            return {}

        return {name: _flatten(value) for name, value in decoded.items()}


def _flatten(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return [_flatten(item) for item in value]
    if isinstance(value, dict):
        return {key: _flatten(item) for key, item in value.items()}
    return value
