# src/fncall_kit/functions/signature.py

"""Describe a Python callable as a `FunctionDescriptor`.

Example:
    >>> def greet_user(users_name: str) -> str:
    ...     return f"Hello, {users_name}!"
    >>> describe_function(greet_user).to_wire()
    {'name': '__main__-greet_user', 'parameters': {'type': 'object',
     'properties': {'users_name': {'type': 'string'}}, 'required': ['users_name']}}
"""

import inspect
import logging
import re
from collections.abc import Callable
from typing import Any

from fncall_kit.errors import MissingParameterNameError, UnsupportedTypeError
from fncall_kit.jsonschema import ObjectSchema, SchemaNode, schema_for

from ._introspection import parse_docstring, type_hints
from .models import FunctionDescriptor

logger = logging.getLogger(__name__)

# Synthetic property accessor names, e.g. "<get-name>" / "<set-name>".
_ACCESSOR_NAME = re.compile(r"<(get|set)-(.*)>")

_IMPLICIT_PARAMETERS = frozenset({"self", "cls"})
_VARIADIC_KINDS = frozenset(
    {inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD}
)


def qualified_name(func: Callable[..., Any]) -> str:
    """Globally unique, wire-safe name for `func`.

    Module path, enclosing classes and the function name, joined with
    hyphens: `billing.Invoice.total` -> `billing-Invoice-total`.
    """
    name = _accessor_name(func.__name__)
    scope = _scope_path(func)
    if scope:
        name = f"{scope}.{name}"
    return name.replace(".", "-")


def split_qualified_name(name: str) -> tuple[str, str]:
    """Reverse of `qualified_name`: (dotted scope path, bare name)."""
    scope, _, bare = name.replace("-", ".").rpartition(".")
    return scope, bare


def describe_function(
    func: Callable[..., Any], description: str | None = None
) -> FunctionDescriptor:
    """Derive a `FunctionDescriptor` from a callable's signature.

    Parameters with a default are optional; all others are required.
    `self` / `cls` and `*args` / `**kwargs` are not described.

    Args:
        func: Function, method, or other introspectable callable. Every
            described parameter must be annotated with a supported type.
        description: Overrides the docstring summary.

    Returns:
        The descriptor, with parameter order preserved.

    Raises:
        UnsupportedTypeError: If a parameter is unannotated or its type
            has no schema mapping.
        MissingParameterNameError: If a parameter has no name.
    """
    name = qualified_name(func)
    hints = type_hints(func)
    summary, argument_docs = parse_docstring(func)

    properties: dict[str, SchemaNode] = {}
    required: set[str] = set()
    for parameter in inspect.signature(func).parameters.values():
        if not parameter.name:
            raise MissingParameterNameError(
                f"Function '{name}' has a parameter without a name"
            )
        if parameter.name in _IMPLICIT_PARAMETERS or parameter.kind in _VARIADIC_KINDS:
            continue

        annotation = hints.get(parameter.name, parameter.annotation)
        if annotation is inspect.Parameter.empty:
            raise UnsupportedTypeError(
                annotation, f"parameter '{parameter.name}' of '{name}' is not annotated"
            )

        node = schema_for(annotation)
        if parameter.name in argument_docs:
            node = node.model_copy(
                update={"description": argument_docs[parameter.name]}
            )
        properties[parameter.name] = node
        if parameter.default is inspect.Parameter.empty:
            required.add(parameter.name)

    logger.debug(
        "Described function %s: %d parameters, %d required",
        name,
        len(properties),
        len(required),
    )
    return FunctionDescriptor(
        name=name,
        description=description if description is not None else summary,
        parameters=ObjectSchema(properties=properties, required=frozenset(required)),
    )


def _accessor_name(name: str) -> str:
    match = _ACCESSOR_NAME.fullmatch(name)
    if match is None:
        return name
    kind, prop = match.groups()
    return f"{kind}{prop[:1].upper()}{prop[1:]}"


def _scope_path(func: Callable[..., Any]) -> str:
    module = getattr(func, "__module__", None)
    qualname = getattr(func, "__qualname__", func.__name__)
    enclosing = qualname.rpartition(".")[0]
    return ".".join(part for part in (module, enclosing) if part)
