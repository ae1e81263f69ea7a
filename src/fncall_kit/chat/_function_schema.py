# src/fncall_kit/chat/_function_schema.py

"""Internal helpers rendering function descriptors for the OpenAI API.

Pure data transformation.
"""

from typing import Any

from fncall_kit.functions.models import FunctionDescriptor

_FUNCTION_CALL_MODES = frozenset({"auto", "none"})


def functions_to_openai_schema(
    functions: list[FunctionDescriptor],
) -> list[dict[str, Any]]:
    """Render descriptors in the `functions` request format."""
    return [function.to_wire() for function in functions]


def function_call_option(function_call: str) -> str | dict[str, str]:
    """Map a `function_call` argument to its request value.

    "auto" and "none" pass through; anything else names the function the
    model is forced to call.
    """
    if function_call in _FUNCTION_CALL_MODES:
        return function_call
    return {"name": function_call}
