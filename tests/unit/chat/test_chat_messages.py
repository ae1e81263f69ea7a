# tests/unit/chat/test_chat_messages.py

from fncall_kit.chat._function_schema import (
    function_call_option,
    functions_to_openai_schema,
)
from fncall_kit.chat.base import Message, Role
from fncall_kit.functions.models import FunctionCall, FunctionDescriptor
from fncall_kit.jsonschema import IntegerSchema, ObjectSchema


class TestMessageWire:
    def test_message_conversion(self) -> None:
        messages = [
            Message(role=Role.SYSTEM, content="You are helpful."),
            Message(role=Role.USER, content="Hello"),
            Message(
                role=Role.ASSISTANT,
                content=None,
                function_call=FunctionCall(name="pkg-add", arguments='{"a": 1}'),
            ),
            Message(role=Role.FUNCTION, name="pkg-add", content="2"),
        ]

        converted = [message.to_wire() for message in messages]

        assert converted[0] == {"role": "system", "content": "You are helpful."}
        assert converted[1] == {"role": "user", "content": "Hello"}
        assert converted[2] == {
            "role": "assistant",
            "content": None,
            "function_call": {"name": "pkg-add", "arguments": '{"a": 1}'},
        }
        assert converted[3] == {"role": "function", "content": "2", "name": "pkg-add"}

    def test_function_result_serializes_non_strings(self) -> None:
        message = Message.function_result("pkg-stats", {"count": 3})

        assert message.role is Role.FUNCTION
        assert message.name == "pkg-stats"
        assert message.content == '{"count": 3}'

    def test_function_result_keeps_strings(self) -> None:
        assert Message.function_result("pkg-greet", "Hello").content == "Hello"


class TestFunctionSchema:
    def test_functions_to_openai_schema(self) -> None:
        descriptor = FunctionDescriptor(
            name="pkg-add",
            description="Adds",
            parameters=ObjectSchema(
                properties={"a": IntegerSchema(), "b": IntegerSchema()},
                required={"a", "b"},
            ),
        )

        assert functions_to_openai_schema([descriptor]) == [
            {
                "name": "pkg-add",
                "description": "Adds",
                "parameters": {
                    "type": "object",
                    "properties": {"a": {"type": "integer"}, "b": {"type": "integer"}},
                    "required": ["a", "b"],
                },
            }
        ]

    def test_empty_functions_list(self) -> None:
        assert functions_to_openai_schema([]) == []

    def test_function_call_option(self) -> None:
        assert function_call_option("auto") == "auto"
        assert function_call_option("none") == "none"
        assert function_call_option("pkg-add") == {"name": "pkg-add"}
