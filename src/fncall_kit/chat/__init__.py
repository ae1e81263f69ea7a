# src/fncall_kit/chat/__init__.py

"""Chat-completion client layer for fncall-kit.

Example:
    >>> from fncall_kit.chat import ChatConfig, Message, Role, create_chat_client
    >>> from fncall_kit.functions import describe_function
    >>>
    >>> client = create_chat_client(ChatConfig(provider="openai", model="gpt-4o"))
    >>> response = await client.complete(
    ...     messages=[Message(role=Role.USER, content="Say hi to Ben")],
    ...     functions=[describe_function(greet_user)],
    ... )
    >>> response.function_call
    FunctionCall(name='myapp-greet_user', arguments='{"users_name": "Ben"}')
"""

from .base import ChatClient, ChatCompletionResponse, Choice, Message, Role, Usage
from .config import ChatConfig
from .factory import create_chat_client

__all__ = [
    # Factory
    "create_chat_client",
    # Protocol
    "ChatClient",
    # Config
    "ChatConfig",
    # Types
    "Message",
    "Role",
    "Choice",
    "Usage",
    "ChatCompletionResponse",
]
