# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class MemberKind(str, Enum):
    """Where a catalog member was discovered on the target class."""

    FIELD = "Field"  # dataclass field, pydantic field or class-level annotation
    PROPERTY = "Property"  # public property or pydantic computed field


class AppenderKind(str, Enum):
    """
    Rendering strategies for a single member fragment.

    Strategies are resolved in declaration order, the first match wins:
    - PRIMITIVE: bool/int/float and numpy scalars, natural literal form
    - CHAR: single quoted character with quote and backslash escaped
    - STRING: double quoted text, empty when absent
    - UNSUPPORTED: Any/object and iterable shaped types, rejected at build time
    - OBJECT: fallback to the value's own ``str()``, empty when absent

    VERBATIM is never resolved from a type; it is used for substituted
    members whose function already produced the final fragment.
    """

    PRIMITIVE = "Primitive"
    CHAR = "Char"
    STRING = "String"
    UNSUPPORTED = "Unsupported"
    OBJECT = "Object"
    VERBATIM = "Verbatim"
