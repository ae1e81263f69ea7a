# src/fncall_kit/chat/config.py

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ChatConfig:
    """Configuration for chat clients.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["openai"]
    model: str
    api_key: str | None = None  # Falls back to OPENAI_API_KEY via the SDK
    timeout: float = 30.0
    max_retries: int = 3
