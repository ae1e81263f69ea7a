# src/fncall_kit/functions/binder.py

"""Resolve qualified names back to callables and apply decoded arguments.

Resolution is dynamic: the scope is imported by name and searched for a
member with the bare name. Callables that cannot be reached that way
(bound methods, closures) go through a `FunctionRegistry` instead.
"""

import collections.abc
import enum
import importlib
import inspect
import logging
from collections.abc import Callable, Hashable, Mapping
from typing import Annotated, Any, Literal, TypeAliasType, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError, PydanticUndefinedAnnotation

from fncall_kit.errors import ArgumentCoercionError, FunctionNotFoundError

from ._introspection import type_hints
from .function_registry import FunctionRegistry
from .models import FunctionCall, FunctionDescriptor
from .signature import split_qualified_name

logger = logging.getLogger(__name__)

_MAPPING_ORIGINS = frozenset(
    {dict, collections.abc.Mapping, collections.abc.MutableMapping}
)
_COLLECTION_ORIGINS = frozenset(
    {
        list,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
    }
)


def resolve_function(target: FunctionDescriptor | str) -> Callable[..., Any]:
    """Find the callable a descriptor (or qualified name) refers to.

    When a scope exposes several members with the requested name, the
    first one in `inspect.getmembers` order is returned. Python
    namespaces bind one object per name, so `typing.overload` stubs
    resolve to the runtime implementation.

    Raises:
        FunctionNotFoundError: If the scope or the member does not exist.
    """
    name = target.name if isinstance(target, FunctionDescriptor) else target
    scope_path, bare_name = split_qualified_name(name)
    if not scope_path:
        logger.error("Function name has no scope: %s", name)
        raise FunctionNotFoundError(name, "no enclosing scope")

    scope = _locate_scope(name, scope_path)
    for member_name, member in inspect.getmembers(scope, callable):
        if member_name == bare_name:
            logger.debug("Resolved %s to %r", name, member)
            return member

    logger.error("Function not found: %s", name)
    raise FunctionNotFoundError(name, f"'{scope_path}' has no member '{bare_name}'")


def invoke(
    func: Callable[..., Any],
    arguments: Mapping[str, Any],
    *,
    coerce: bool = True,
) -> Any:
    """Call `func` with the entries of `arguments` that match its parameters.

    Absent parameters are left to their defaults; a missing required one
    surfaces as the interpreter's TypeError. Unknown entries are ignored.
    Exceptions raised by `func` propagate unchanged.

    Args:
        func: The callable to invoke.
        arguments: Parameter name -> decoded value.
        coerce: Validate each value against the parameter annotation
            with pydantic (lax mode, so "3" becomes 3). A null sent for a
            parameter with a default counts as absent. When False, values
            are passed through untouched.

    Raises:
        ArgumentCoercionError: If `coerce` is set and a value does not
            fit its parameter's type.
    """
    hints = type_hints(func) if coerce else {}
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    positional_open = True

    for parameter in inspect.signature(func).parameters.values():
        if parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            continue

        value = arguments.get(parameter.name, inspect.Parameter.empty)
        if (
            coerce
            and value is None
            and parameter.default is not inspect.Parameter.empty
        ):
            value = inspect.Parameter.empty

        if value is inspect.Parameter.empty:
            if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
                positional_open = False
            continue

        if coerce:
            value = _coerce(func, parameter, hints, value)

        if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
            if positional_open:
                args.append(value)
        else:
            kwargs[parameter.name] = value

    logger.debug(
        "Invoking %s with %d positional and %d keyword arguments",
        getattr(func, "__qualname__", func),
        len(args),
        len(kwargs),
    )
    return func(*args, **kwargs)


def call_function(
    function_call: FunctionCall,
    *,
    registry: FunctionRegistry | None = None,
    coerce: bool = True,
) -> Any:
    """Resolve and invoke the function a chat response asked for.

    Looks the name up in `registry` when one is given, otherwise resolves
    it dynamically. Returns whatever the function returns (a coroutine
    for async functions).
    """
    if registry is not None:
        func = registry.get(function_call.name).func
    else:
        func = resolve_function(function_call.name)
    return invoke(func, function_call.decode_arguments(), coerce=coerce)


def _locate_scope(name: str, scope_path: str) -> Any:
    # longest importable module prefix, then attribute access for classes
    parts = scope_path.split(".")
    for index in range(len(parts), 0, -1):
        module_name = ".".join(parts[:index])
        try:
            scope = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name is None or not (
                module_name == exc.name or module_name.startswith(f"{exc.name}.")
            ):
                raise
            continue

        for attribute in parts[index:]:
            try:
                scope = getattr(scope, attribute)
            except AttributeError as exc:
                logger.error("Scope not found: %s", scope_path)
                raise FunctionNotFoundError(
                    name, f"scope '{scope_path}' not found"
                ) from exc
        return scope

    logger.error("Scope not found: %s", scope_path)
    raise FunctionNotFoundError(name, f"scope '{scope_path}' not found")


def _coerce(
    func: Callable[..., Any],
    parameter: inspect.Parameter,
    hints: dict[str, Any],
    value: Any,
) -> Any:
    annotation = hints.get(parameter.name, parameter.annotation)
    if annotation is inspect.Parameter.empty:
        return value

    reshaped = _reshape(annotation, value)
    try:
        adapter: TypeAdapter[Any] = TypeAdapter(annotation)
    except (PydanticSchemaGenerationError, PydanticUndefinedAnnotation):
        logger.debug(
            "No validator for %r, passing %s through", annotation, parameter.name
        )
        return reshaped

    try:
        return adapter.validate_python(reshaped)
    except ValidationError as exc:
        raise ArgumentCoercionError(
            getattr(func, "__qualname__", repr(func)), parameter.name, value
        ) from exc


def _reshape(annotation: Any, value: Any) -> Any:
    """Undo the wire encoding of derived schemas before validation.

    Mappings arrive as a list of `{"key", "value"}` objects, and decoded
    scalars arrive as JSON text, which pydantic will not match against
    non-string `Literal` choices or enum values on its own. Anything
    that does not fit is returned as is for pydantic to reject.
    """
    if isinstance(annotation, TypeAliasType):
        return _reshape(annotation.__value__, value)

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is Annotated:
        return _reshape(args[0], value)
    if origin is Literal:
        return _match_choice(args, value)
    if not isinstance(value, (list, dict)):
        if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
            return _match_choice(tuple(member.value for member in annotation), value)
        return value

    if origin in _MAPPING_ORIGINS and len(args) == 2 and isinstance(value, list):
        return _pairs_to_dict(args[0], args[1], value)
    if origin in _COLLECTION_ORIGINS and args and isinstance(value, list):
        return [_reshape(args[0], item) for item in value]
    if origin is tuple and isinstance(value, list):
        if len(args) == 2 and args[1] is Ellipsis:
            return [_reshape(args[0], item) for item in value]
        return [_reshape(arg, item) for arg, item in zip(args, value)] + value[
            len(args) :
        ]
    if (
        isinstance(annotation, type)
        and issubclass(annotation, BaseModel)
        and isinstance(value, dict)
    ):
        reshaped = dict(value)
        for name, field in annotation.model_fields.items():
            key = field.alias or name
            if key in value:
                reshaped[key] = _reshape(field.annotation, value[key])
        return reshaped
    return value


def _pairs_to_dict(key_type: Any, value_type: Any, pairs: list[Any]) -> Any:
    result: dict[Any, Any] = {}
    for pair in pairs:
        if not isinstance(pair, dict) or set(pair) != {"key", "value"}:
            return pairs
        key = _reshape(key_type, pair["key"])
        if not isinstance(key, Hashable):
            return pairs
        result[key] = _reshape(value_type, pair["value"])
    return result


def _match_choice(choices: tuple[Any, ...], value: Any) -> Any:
    if not isinstance(value, str) or value in choices:
        return value
    for choice in choices:
        if _matches_text(choice, value):
            return choice
    return value


def _matches_text(choice: Any, text: str) -> bool:
    # bool before int: True == 1
    if isinstance(choice, bool):
        return text == ("true" if choice else "false")
    if isinstance(choice, (int, float)):
        try:
            return float(text) == choice
        except ValueError:
            return False
    return False
