# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Appender strategies: how a single member value becomes a text fragment.

Strategy selection is a pure ordered match on the member's declared type,
performed once per member while a renderer is built:

1. PRIMITIVE  - bool, int, float and numpy scalar types
2. CHAR       - ``tostring.Char``
3. STRING     - ``str``
4. UNSUPPORTED - ``Any``, ``object`` and iterable shaped types other than str
5. OBJECT     - everything else

``Optional[T]`` members resolve to ``T``'s strategy and render an absent
value as the empty fragment. UNSUPPORTED has no renderer: ``build()`` fails
with ``NotSupportedError`` before any instance is rendered.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, get_origin

import numpy as np
import pandas as pd

from .exceptions import NotSupportedError
from .primitives import AppenderKind, Char
from .utils.annotations import (
    describe_type,
    is_any_type,
    is_iterable_type,
    strip_annotated,
    strip_optional,
)

Appender = Callable[[Any], str]

_PRIMITIVE_TYPES = (bool, int, float, np.bool_, np.number)

_CHAR_ESCAPES = ("'", "\\")


def resolve_appender(declared_type: Any) -> AppenderKind:
    """Select the strategy for a member declared as ``declared_type``."""
    tp, _ = strip_annotated(declared_type)
    tp, _ = strip_optional(tp)

    if _is_primitive(tp):
        return AppenderKind.PRIMITIVE
    if tp is Char:
        return AppenderKind.CHAR
    if tp is str:
        return AppenderKind.STRING
    if is_any_type(tp) or is_iterable_type(tp):
        return AppenderKind.UNSUPPORTED
    return AppenderKind.OBJECT


def check_supported(declared_type: Any, member_name: str, owner: type) -> AppenderKind:
    """
    Resolve the strategy for a member, rejecting unsupported types.

    Raises:
        NotSupportedError: If the member is declared as Any/object or as an
            iterable shaped type other than str
    """
    kind = resolve_appender(declared_type)
    if kind is AppenderKind.UNSUPPORTED:
        raise NotSupportedError(
            f"Cannot generate a string for member \"{member_name}\" of type "
            f"\"{owner.__name__}\": values of type \"{describe_type(declared_type)}\" "
            f"are not supported (Any, object and iterables other than str)",
            rejected_type=declared_type,
        )
    return kind


def appender_for(kind: AppenderKind, declared_type: Any = None) -> Appender:
    """
    Renderer callable for ``kind``.

    Primitives declared ``Optional`` render an absent value as the empty
    fragment; the char, string and object strategies always do.
    """
    if kind is AppenderKind.UNSUPPORTED:
        raise NotSupportedError(
            f"No appender exists for {AppenderKind.UNSUPPORTED.value} members",
            rejected_type=declared_type,
        )

    append = APPENDERS[kind]
    _, optional = strip_optional(strip_annotated(declared_type)[0])
    if optional and kind is AppenderKind.PRIMITIVE:
        return _absent_aware(append)
    return append


def is_absent(value: Any) -> bool:
    """``None`` and the pandas missing-value scalars count as absent."""
    return value is None or value is pd.NA or value is pd.NaT


def append_primitive(value: Any) -> str:
    return str(value)


def append_char(value: Any) -> str:
    if is_absent(value):
        return ""
    escaped = "".join("\\" + c if c in _CHAR_ESCAPES else c for c in value)
    return f"'{escaped}'"


def append_string(value: Any) -> str:
    if is_absent(value):
        return ""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def append_object(value: Any) -> str:
    if is_absent(value):
        return ""
    return str(value)


def append_verbatim(value: Any) -> str:
    # Substituted values arrive already rendered
    return value


APPENDERS: Mapping[AppenderKind, Appender] = MappingProxyType(
    {
        AppenderKind.PRIMITIVE: append_primitive,
        AppenderKind.CHAR: append_char,
        AppenderKind.STRING: append_string,
        AppenderKind.OBJECT: append_object,
        AppenderKind.VERBATIM: append_verbatim,
    }
)


def _is_primitive(tp: Any) -> bool:
    if get_origin(tp) is not None or not isinstance(tp, type):
        return False
    try:
        return issubclass(tp, _PRIMITIVE_TYPES) and not issubclass(tp, Enum)
    except TypeError:
        return False


def _absent_aware(append: Appender) -> Appender:
    def append_optional(value: Any) -> str:
        if is_absent(value):
            return ""
        return append(value)

    return append_optional
