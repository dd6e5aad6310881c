# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Helpers for reasoning about type annotations at build time.

Everything here works on declared types (annotation objects), never on
runtime values, so it is only ever called while a renderer is being built.
"""

from __future__ import annotations

import collections.abc as abc
import types
from typing import (
    Annotated,
    Any,
    ClassVar,
    Literal,
    Tuple,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

import numpy as np
import pandas as pd
from pydantic import BaseModel

NoneType = type(None)

_UNION_ORIGINS = (Union, types.UnionType)

# Array-likes from the scientific stack, checked explicitly because they are
# the most common iterable members on data models.
_ARRAY_TYPES = (np.ndarray, pd.Series, pd.DataFrame, pd.Index)


def strip_annotated(tp: Any) -> Tuple[Any, Tuple[Any, ...]]:
    """
    Remove (possibly nested) ``Annotated`` wrappers.

    Returns:
        The bare type and the collected metadata, outermost first
    """
    metadata: Tuple[Any, ...] = ()
    while get_origin(tp) is Annotated:
        metadata += tuple(tp.__metadata__)
        tp = tp.__origin__
    return tp, metadata


def is_union(tp: Any) -> bool:
    return get_origin(tp) in _UNION_ORIGINS


def strip_optional(tp: Any) -> Tuple[Any, bool]:
    """
    Remove ``None`` from a union.

    ``Optional[int]`` becomes ``(int, True)``; ``int | str | None`` becomes
    ``(Union[int, str], True)``; anything else is returned unchanged with
    ``False``.
    """
    if not is_union(tp):
        return tp, False

    args = get_args(tp)
    remaining = tuple(arg for arg in args if arg is not NoneType)
    if len(remaining) == len(args):
        return tp, False
    if not remaining:
        return NoneType, True
    if len(remaining) == 1:
        return remaining[0], True
    return Union[remaining], True


def is_newtype(tp: Any) -> bool:
    return callable(tp) and hasattr(tp, "__supertype__")


def is_classvar(tp: Any) -> bool:
    return tp is ClassVar or get_origin(tp) is ClassVar


def is_any_type(tp: Any) -> bool:
    """True for the universal types ``typing.Any`` and ``object``."""
    return tp is Any or tp is object


def is_iterable_type(tp: Any) -> bool:
    """
    True when ``tp`` describes something that iterates elements.

    ``str`` is the only iterable that is not considered sequence shaped.
    Pydantic models define ``__iter__`` over their fields but are records,
    not sequences, so they are excluded as well.
    """
    while is_newtype(tp):
        tp = tp.__supertype__

    origin = get_origin(tp) or tp
    if not isinstance(origin, type):
        return False
    if issubclass(origin, str) or issubclass(origin, BaseModel):
        return False
    return issubclass(origin, _ARRAY_TYPES) or issubclass(origin, abc.Iterable)


def describe_type(tp: Any) -> str:
    """Short, human readable name of a declared type for error messages."""
    if tp is Any:
        return "Any"
    if tp is None or tp is NoneType:
        return "None"
    if is_newtype(tp) or (isinstance(tp, type) and get_origin(tp) is None):
        return tp.__name__
    return repr(tp).replace("typing.", "")


def is_assignable(source: Any, target: Any) -> bool:
    """
    Whether a value declared as ``source`` can be passed where ``target``
    is expected.

    Generic parameters are not compared: ``list[int]`` is assignable to
    ``Sequence[str]`` because only the origin classes are checked.
    """
    source, _ = strip_annotated(source)
    target, _ = strip_annotated(target)

    if is_any_type(target):
        return True
    if source is Any:
        return False

    if source is None:
        source = NoneType
    if target is None:
        target = NoneType

    if isinstance(target, TypeVar):
        if target.__constraints__:
            return any(is_assignable(source, c) for c in target.__constraints__)
        if target.__bound__ is None:
            return True
        return is_assignable(source, target.__bound__)

    if is_union(source):
        return all(is_assignable(arg, target) for arg in get_args(source))
    if is_union(target):
        return any(is_assignable(source, arg) for arg in get_args(target))

    if is_newtype(target):
        if source is target:
            return True
        return is_newtype(source) and is_assignable(source.__supertype__, target)
    if is_newtype(source):
        return is_assignable(source.__supertype__, target)

    target_origin = get_origin(target) or target

    if get_origin(source) is Literal:
        if not isinstance(target_origin, type):
            return source == target
        return all(isinstance(value, target_origin) for value in get_args(source))

    source_origin = get_origin(source) or source
    if isinstance(source_origin, type) and isinstance(target_origin, type):
        try:
            return issubclass(source_origin, target_origin)
        except TypeError:
            return False

    return source == target
