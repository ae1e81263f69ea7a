# src/fncall_kit/errors.py

"""Exceptions raised while deriving schemas and binding function calls."""

from typing import Any


class FunctionSchemaError(Exception):
    """Base exception for fncall-kit errors."""


class UnsupportedTypeError(FunctionSchemaError, TypeError):
    """Raised when a type annotation has no JSON Schema mapping."""

    def __init__(self, annotation: Any, reason: str | None = None) -> None:
        self.annotation = annotation
        message = f"Unsupported type: {annotation!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingParameterNameError(FunctionSchemaError, ValueError):
    """Raised when a function parameter has no usable name."""


class FunctionNotFoundError(FunctionSchemaError, LookupError):
    """Raised when a qualified function name cannot be resolved."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        message = f"Function '{name}' not found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ArgumentCoercionError(FunctionSchemaError, ValueError):
    """Raised when a decoded argument does not fit the parameter's type."""

    def __init__(self, function_name: str, parameter: str, value: Any) -> None:
        self.function_name = function_name
        self.parameter = parameter
        self.value = value
        super().__init__(
            f"Argument '{parameter}' of '{function_name}' "
            f"cannot be coerced from {value!r}"
        )
