# src/fncall_kit/functions/__init__.py

"""Function descriptors, argument binding and the function registry.

Example:
    >>> from fncall_kit.functions import FunctionCall, call_function, describe_function
    >>>
    >>> def greet_user(users_name: str) -> str:
    ...     return f"Hello, {users_name}!"
    >>>
    >>> descriptor = describe_function(greet_user)
    >>> call = FunctionCall(name=descriptor.name, arguments='{"users_name": "Ben"}')
    >>> call_function(call)
    'Hello, Ben!'
"""

from .binder import call_function, invoke, resolve_function
from .function_engine import FunctionEngine
from .function_registry import FunctionRegistry, RegisteredFunction
from .models import FunctionCall, FunctionDescriptor
from .signature import describe_function, qualified_name, split_qualified_name

__all__ = [
    # Types
    "FunctionDescriptor",
    "FunctionCall",
    # Derivation
    "describe_function",
    "qualified_name",
    "split_qualified_name",
    # Binding
    "resolve_function",
    "invoke",
    "call_function",
    # Registry
    "FunctionRegistry",
    "RegisteredFunction",
    "FunctionEngine",
]
