# src/fncall_kit/chat/factory.py

from fncall_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import ChatClient
from .config import ChatConfig


def create_chat_client(
    config: ChatConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ChatClient:
    """Create a chat client from config.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> config = ChatConfig(provider="openai", model="gpt-4o")
        >>> client = create_chat_client(config)
        >>> response = await client.complete(messages=[...])
    """
    if config.provider == "openai":
        from .openai import OpenAIChatClient

        return OpenAIChatClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown chat provider: {config.provider}")
