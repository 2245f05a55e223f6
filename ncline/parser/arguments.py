# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Argument parsing for ncline command lines.

Everything typed after the command name is the *argument string*. It is turned
into a list of positional values for the command callable:

    createAlias docs "C:\\My Documents"       -> ["docs", "C:\\My Documents"]
    createAlias [filepath:C:\\temp alias:tmp]  -> ["tmp", "C:\\temp"]
    createAlias {alias:tmp}                   -> ["tmp", None]
    target null                               -> [None]

Parsing steps:
1. Quoted runs (`"..."`) have their whitespace replaced with a sentinel,
   then every double quote is removed.
2. A string wrapped in `[...]` or `{...}` switches to named arguments.
3. The string is split on single spaces.
4. Named tokens (`name:value`) are placed at the index of the matching
   parameter, and unmatched parameters are padded with `None`.
5. The literal `null` becomes `None` and sentinels become spaces again.

Escaped quotes and nested brackets are not supported. An unterminated quote
is kept as plain text (minus the quote character).
"""
from __future__ import annotations

import re
from typing import Any, Callable, Sequence

from ncline.parser.signature import get_parameter_names

SPACE_REPLACEMENT = "@#Sp#@"
NULL_LITERAL = "null"

_QUOTED_SEGMENT = re.compile(r'"[^"]*"')
_WHITESPACE = re.compile(r"\s")
_NAMED_ENVELOPE = re.compile(r"\[.*\]|\{.*\}")

FunctionOrParams = Callable[..., Any] | Sequence[str]


def _parameter_names(function_or_params: FunctionOrParams) -> list[str]:
    if callable(function_or_params):
        return get_parameter_names(function_or_params)
    return list(function_or_params)


def transform_quoted_values(argument_string: str) -> str:
    """
    Protect the spaces inside quoted segments and drop all double quotes.

    `'"quote 1" bare "quote 2"'` becomes
    `'quote@#Sp#@1 bare quote@#Sp#@2'`.
    """
    argument_string = _QUOTED_SEGMENT.sub(
        lambda match: _WHITESPACE.sub(SPACE_REPLACEMENT, match.group(0)),
        argument_string,
    )
    return argument_string.replace('"', "")


def parse_named_arguments(
    tokens: Sequence[str], function_or_params: FunctionOrParams
) -> list[str | None]:
    """
    Map `name:value` tokens onto the declared parameter positions.

    Only the first colon separates name from value, so values like
    `C:\\temp` or `a:b:c` survive intact. Tokens naming an unknown parameter
    are ignored. The result always has one slot per declared parameter, and
    slots nobody named are `None`.
    """
    parameter_names = _parameter_names(function_or_params)
    positions = {name: index for index, name in enumerate(parameter_names)}
    parsed: list[str | None] = [None] * len(parameter_names)

    for token in tokens:
        name, separator, value = token.partition(":")
        if name in positions:
            parsed[positions[name]] = value if separator else None

    return parsed


def restore_value(token: str | None) -> str | None:
    """Turn `null` (or a missing slot) into None and restore protected spaces."""
    if token is None or token == NULL_LITERAL:
        return None
    return token.replace(SPACE_REPLACEMENT, " ")


def is_named_form(argument_string: str) -> bool:
    return _NAMED_ENVELOPE.fullmatch(argument_string) is not None


def generate_arguments(
    argument_string: str, function_or_params: FunctionOrParams = ()
) -> list[str | None]:
    """
    Parse an argument string into the positional values for a command.

    Args:
        argument_string (str): Everything typed after the command name.
        function_or_params (Callable | Sequence[str]): The command callable, or
            its ordered parameter names. Only consulted for named arguments.

    Returns:
        list[str | None]: One entry per positional value. For the named form,
        exactly one entry per declared parameter.
    """
    argument_string = transform_quoted_values(argument_string.strip())

    named = is_named_form(argument_string)
    if named:
        argument_string = argument_string[1:-1]

    argument_string = argument_string.strip()
    tokens: list[str | None] = argument_string.split(" ") if argument_string else []

    if named:
        tokens = list(parse_named_arguments(tokens, function_or_params))

    return [restore_value(token) for token in tokens]
