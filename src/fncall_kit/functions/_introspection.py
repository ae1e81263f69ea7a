# src/fncall_kit/functions/_introspection.py

"""Internal helpers for reading callables: type hints and docstrings."""

import inspect
import logging
import re
import typing
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

_ARGS_HEADERS = frozenset({"Args:", "Arguments:", "Parameters:"})
_ARG_LINE = re.compile(r"\*{0,2}(\w+)\s*(?:\([^)]*\))?\s*:\s*(.*)")


def type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    """Resolved annotations of `func`, or {} when they cannot be evaluated."""
    try:
        return typing.get_type_hints(func, include_extras=True)
    except (NameError, TypeError) as exc:
        logger.warning("Could not resolve type hints for %r: %s", func, exc)
        return {}


def parse_docstring(func: Callable[..., Any]) -> tuple[str | None, dict[str, str]]:
    """Split a Google-style docstring into its summary and `Args:` entries."""
    doc = inspect.getdoc(func)
    if not doc:
        return None, {}

    first_paragraph = doc.split("\n\n", 1)[0]
    summary = None
    if first_paragraph.strip() not in _ARGS_HEADERS:
        summary = " ".join(first_paragraph.split())

    arguments: dict[str, str] = {}
    in_args = False
    current: str | None = None
    current_indent = 0
    for line in doc.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        indent = len(line) - len(line.lstrip())
        if indent == 0:
            in_args = stripped in _ARGS_HEADERS
            current = None
            continue
        if not in_args:
            continue
        if current is not None and indent > current_indent:
            arguments[current] = f"{arguments[current]} {stripped}"
            continue
        match = _ARG_LINE.fullmatch(stripped)
        if match:
            current, text = match.groups()
            current_indent = indent
            arguments[current] = text

    return summary, arguments
