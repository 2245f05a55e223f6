# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides utilities for introspecting command callables.

The ordered parameter names of a command drive both named-argument resolution
(`name:value` tokens are placed at the index of the matching parameter) and
the signature shown by `show_cmds` and `help`.

A command may declare its parameter names explicitly with the `command`
decorator (see `ncline.command`). The declared names win over introspection.

Functions:
- get_parameter_names: Return the ordered positional parameter names of a callable.
- render_signature: Render a `name( p1, p2 )` display string.
"""
import inspect
from typing import Any, Callable, Sequence

from ncline.exceptions import SignatureError
from ncline.logger import logger

PARAMS_ATTRIBUTE = "__ncline_params__"

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def get_parameter_names(function: Callable[..., Any]) -> list[str]:
    """
    Return the ordered parameter names a command can receive positionally.

    Explicit metadata set by `@command(params=[...])` is returned as is.
    Otherwise the names come from `inspect.signature`. Keyword-only and
    variadic parameters are skipped, and so is `self` on bound methods.

    Raises:
        SignatureError: If `function` is not callable or has no inspectable
            signature (e.g. some builtins).
    """
    declared = getattr(function, PARAMS_ATTRIBUTE, None)
    if declared is not None:
        return list(declared)

    if not callable(function):
        raise SignatureError(f"{function!r} is not callable.")

    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError) as error:
        logger.debug("Could not inspect signature of %r: %s", function, error)
        raise SignatureError(
            f"Unable to determine the parameters of {function!r}: {error}"
        ) from error

    return [
        name
        for name, param in signature.parameters.items()
        if param.kind in _POSITIONAL_KINDS
    ]


def accepts_variadic(function: Callable[..., Any]) -> bool:
    """True if `function` takes `*args`, so extra positional values are allowed."""
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return False
    return any(
        param.kind is inspect.Parameter.VAR_POSITIONAL
        for param in signature.parameters.values()
    )


def count_required(function: Callable[..., Any], parameter_names: Sequence[str]) -> int:
    """Number of leading positional parameters that have no default value."""
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return len(parameter_names)
    required = [
        param
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL_KINDS and param.default is inspect.Parameter.empty
    ]
    return min(len(required), len(parameter_names))


def render_signature(
    name: str, function_or_params: Callable[..., Any] | Sequence[str]
) -> str:
    """Render `name( p1, p2 )`, or `name()` when there are no parameters."""
    if callable(function_or_params):
        parameter_names = get_parameter_names(function_or_params)
    else:
        parameter_names = list(function_or_params)

    if parameter_names:
        return f"{name}( {', '.join(parameter_names)} )"
    return f"{name}()"
