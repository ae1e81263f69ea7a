import logging
from collections.abc import Callable
from typing import Any

from fncall_kit.errors import FunctionNotFoundError

from .models import FunctionDescriptor
from .signature import describe_function

logger = logging.getLogger(__name__)


class RegisteredFunction:
    def __init__(
        self,
        *,
        descriptor: FunctionDescriptor,
        func: Callable[..., Any],
    ) -> None:
        self.descriptor = descriptor
        self.func = func

    @property
    def name(self) -> str:
        return self.descriptor.name


class FunctionRegistry:
    """Explicit table of the callables a model is allowed to call.

    Keys are qualified names, so a response's `function_call.name` looks
    up directly. Bound methods and closures work here even though they
    cannot be resolved by import.
    """

    def __init__(self) -> None:
        self._functions: dict[str, RegisteredFunction] = {}

    def register(
        self, func: Callable[..., Any], description: str | None = None
    ) -> FunctionDescriptor:
        descriptor = describe_function(func, description)
        if descriptor.name in self._functions:
            raise ValueError(f"Function '{descriptor.name}' already registered")

        self._functions[descriptor.name] = RegisteredFunction(
            descriptor=descriptor, func=func
        )
        logger.debug("Registered function: %s", descriptor.name)
        return descriptor

    def expose(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Decorator form of `register`; returns `func` unchanged."""
        self.register(func)
        return func

    def get(self, name: str) -> RegisteredFunction:
        try:
            return self._functions[name]
        except KeyError:
            logger.error("Function not found: %s", name)
            raise FunctionNotFoundError(name) from None

    def remove(self, name: str) -> None:
        try:
            del self._functions[name]
            logger.debug("Removed function: %s", name)
        except KeyError:
            logger.error("Cannot remove function, not found: %s", name)
            raise FunctionNotFoundError(name) from None

    def descriptors(self) -> list[FunctionDescriptor]:
        """All descriptors in registration order, ready for a chat request."""
        return [entry.descriptor for entry in self._functions.values()]

    def list(self) -> dict[str, RegisteredFunction]:
        # return a shallow copy to avoid mutation
        return dict(self._functions)
