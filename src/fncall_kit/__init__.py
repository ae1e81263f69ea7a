# Chat
from .chat import (
    ChatClient,
    ChatCompletionResponse,
    ChatConfig,
    Message,
    Role,
    create_chat_client,
)

# Errors
from .errors import (
    ArgumentCoercionError,
    FunctionNotFoundError,
    FunctionSchemaError,
    MissingParameterNameError,
    UnsupportedTypeError,
)

# Functions
from .functions import (
    FunctionCall,
    FunctionDescriptor,
    FunctionEngine,
    FunctionRegistry,
    call_function,
    describe_function,
    invoke,
    resolve_function,
)

# JSON Schema
from .jsonschema import SchemaNode, parse_schema, schema_for

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    # Chat
    "ChatClient",
    "ChatCompletionResponse",
    "ChatConfig",
    "Message",
    "Role",
    "create_chat_client",
    # Errors
    "ArgumentCoercionError",
    "FunctionNotFoundError",
    "FunctionSchemaError",
    "MissingParameterNameError",
    "UnsupportedTypeError",
    # Functions
    "FunctionCall",
    "FunctionDescriptor",
    "FunctionEngine",
    "FunctionRegistry",
    "call_function",
    "describe_function",
    "invoke",
    "resolve_function",
    # JSON Schema
    "SchemaNode",
    "parse_schema",
    "schema_for",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
]
