# src/fncall_kit/chat/openai.py

import logging
from time import monotonic
from typing import Any

from openai import NOT_GIVEN, AsyncOpenAI, OpenAIError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from fncall_kit.functions.models import FunctionDescriptor
from fncall_kit.observability import names
from fncall_kit.observability.base import MetricsHook, NoOpMetricsHook

from ._function_schema import function_call_option, functions_to_openai_schema
from .base import ChatClient, ChatCompletionResponse, Message

logger = logging.getLogger(__name__)


class OpenAIChatClient(ChatClient):
    """OpenAI chat-completions client with legacy function calling.

    One `AsyncOpenAI` instance per client, reused across requests.
    Transport-only retries.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o",
        timeout: float = 30.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout)
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAIChatClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    async def complete(
        self,
        *,
        messages: list[Message],
        functions: list[FunctionDescriptor] | None = None,
        function_call: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResponse:
        start = monotonic()
        labels = {"provider": "openai", "model": self._model}

        wire_messages = [message.to_wire() for message in messages]
        wire_functions = functions_to_openai_schema(functions) if functions else None

        logger.debug(
            "Calling OpenAI: model=%s, messages=%d, functions=%d",
            self._model,
            len(messages),
            len(functions) if functions else 0,
        )
        self.metrics_hook.record_gauge(
            names.CHAT_FUNCTIONS_OFFERED, len(functions) if functions else 0
        )

        try:
            raw = await self._call_api(
                messages=wire_messages,
                functions=wire_functions,
                function_call=function_call,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError:
            self.metrics_hook.increment(names.CHAT_ERRORS_TOTAL, labels=labels)
            raise

        elapsed_ms = 1000 * (monotonic() - start)

        response = ChatCompletionResponse.model_validate(raw.model_dump())

        # Metrics
        self.metrics_hook.record_latency(names.CHAT_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CHAT_REQUESTS_TOTAL, labels=labels)
        self.metrics_hook.increment(
            names.CHAT_TOKENS_PROMPT, response.usage.prompt_tokens
        )
        self.metrics_hook.increment(
            names.CHAT_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(
            names.CHAT_TOKENS_TOTAL, response.usage.total_tokens
        )

        logger.info(
            "OpenAI completion: finish=%s, tokens=%d, latency=%.0fms",
            response.choices[0].finish_reason if response.choices else None,
            response.usage.total_tokens,
            elapsed_ms,
        )

        return response

    async def _call_api(
        self,
        *,
        messages: list[dict[str, Any]],
        functions: list[dict[str, Any]] | None,
        function_call: str | None,
        temperature: float | None,
        max_tokens: int | None,
    ) -> Any:
        """Call OpenAI API with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(OpenAIError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.chat.completions.create(
                    model=self._model,
                    messages=messages,  # type: ignore[arg-type]
                    functions=functions if functions else NOT_GIVEN,  # type: ignore[arg-type]
                    function_call=(
                        function_call_option(function_call)  # type: ignore[arg-type]
                        if function_call
                        else NOT_GIVEN
                    ),
                    temperature=NOT_GIVEN if temperature is None else temperature,
                    max_tokens=NOT_GIVEN if max_tokens is None else max_tokens,
                )
