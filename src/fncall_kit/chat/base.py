# src/fncall_kit/chat/base.py

import json
from enum import Enum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict

from fncall_kit.functions.models import FunctionCall, FunctionDescriptor
from fncall_kit.observability.base import MetricsHook


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"


class Message(BaseModel):
    """A single message in the conversation.

    Immutable. `name` carries the function name when role=FUNCTION;
    `function_call` is set on assistant messages that request a call.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str | None = None
    name: str | None = None
    function_call: FunctionCall | None = None

    def to_wire(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude_none=True)
        # content is always sent, null included
        data.setdefault("content", None)
        return data

    @classmethod
    def function_result(cls, name: str, result: Any) -> "Message":
        """Wrap a function's return value as a role=function reply."""
        content = result if isinstance(result, str) else json.dumps(result, default=str)
        return cls(role=Role.FUNCTION, name=name, content=content)


class Choice(BaseModel):
    index: int
    message: Message
    finish_reason: str | None = None


class Usage(BaseModel):
    """Token usage for a completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletionResponse(BaseModel):
    """Parsed chat completion body. Unknown fields are dropped."""

    id: str
    object: str
    created: int
    model: str
    choices: list[Choice]
    usage: Usage

    @property
    def message(self) -> Message:
        """The first choice's message."""
        return self.choices[0].message

    @property
    def function_call(self) -> FunctionCall | None:
        return self.message.function_call


class ChatClient(Protocol):
    """Protocol for chat-completion clients.

    Stateless: every call receives the full message list. Retries only
    on transport errors, never on model output.
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        functions: list[FunctionDescriptor] | None = None,
        function_call: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResponse:
        """Single completion.

        Args:
            messages: Complete conversation history.
            functions: Functions the model may ask to call.
            function_call: "auto", "none", or the qualified name of a
                function the model must call.
            temperature: Sampling temperature. Provider default when None.
            max_tokens: Maximum tokens in the response.

        Returns:
            The parsed response.

        Raises:
            openai.OpenAIError: After retry exhaustion.
        """
        ...
