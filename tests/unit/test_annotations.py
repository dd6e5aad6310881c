# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import collections.abc as abc
from typing import (
    Annotated,
    Any,
    Dict,
    List,
    Literal,
    Mapping,
    NewType,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

import pytest

from tostring import Char
from tostring.utils import (
    describe_type,
    is_assignable,
    is_iterable_type,
    strip_annotated,
    strip_optional,
)

UserId = NewType("UserId", int)
Number = TypeVar("Number", int, float)
Bounded = TypeVar("Bounded", bound=Sequence)
Free = TypeVar("Free")


class Animal:
    pass


class Dog(Animal):
    pass


def test_strip_annotated_collects_nested_metadata():
    tp, metadata = strip_annotated(Annotated[Annotated[int, "a"], "b"])

    assert tp is int
    assert metadata == ("a", "b")


@pytest.mark.parametrize(
    "tp, expected",
    [
        (Optional[int], (int, True)),
        (Union[int, str, None], (Union[int, str], True)),
        (int | None, (int, True)),
        (Union[int, str], (Union[int, str], False)),
        (str, (str, False)),
    ],
)
def test_strip_optional(tp, expected):
    assert strip_optional(tp) == expected


@pytest.mark.parametrize(
    "source, target, expected",
    [
        (int, Any, True),
        (Any, Any, True),
        (Any, object, True),
        (Any, int, False),
        (Dog, Animal, True),
        (Animal, Dog, False),
        (bool, int, True),
        (int, str, False),
        (List[int], Sequence[str], True),
        (List[int], list, True),
        (Dict[str, int], Mapping, True),
        (list, Dict[str, int], False),
        (Optional[int], int, False),
        (Optional[int], Optional[int], True),
        (int, Optional[int], True),
        (None, Optional[int], True),
        (Union[int, float], Union[int, float, str], True),
        (UserId, int, True),
        (int, UserId, False),
        (UserId, UserId, True),
        (Char, str, True),
        (str, Char, False),
        (Literal["a", "b"], str, True),
        (Literal["a", 1], str, False),
        (int, Number, True),
        (str, Number, False),
        (List[int], Bounded, True),
        (int, Bounded, False),
        (Dog, Free, True),
        (Annotated[Dog, "meta"], Animal, True),
        (abc.Iterable, abc.Iterable, True),
    ],
)
def test_is_assignable(source, target, expected):
    assert is_assignable(source, target) is expected


@pytest.mark.parametrize(
    "tp, expected",
    [
        (str, False),
        (int, False),
        (list, True),
        (List[str], True),
        (Sequence[int], True),
        (Dict[str, int], True),
        (NewType("Names", list), True),
        (Union[int, str], False),
        (Any, False),
    ],
)
def test_is_iterable_type(tp, expected):
    assert is_iterable_type(tp) is expected


@pytest.mark.parametrize(
    "tp, expected",
    [
        (int, "int"),
        (Any, "Any"),
        (None, "None"),
        (Char, "Char"),
        (Dog, "Dog"),
        (List[str], "List[str]"),
        (list[str], "list[str]"),
    ],
)
def test_describe_type(tp, expected):
    assert describe_type(tp) == expected
