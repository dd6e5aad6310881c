# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Values: what a render plan reads from an instance.

``Value`` is a tagged variant. A ``BaseValue`` reads a catalog member and is
rendered by the member's type strategy. A ``SubstitutedValue`` feeds the
member's value through a user supplied function and yields the final text
fragment directly; it never goes through type based dispatch.
"""

from __future__ import annotations

import inspect
from typing import Annotated, Any, Callable, Literal, Union

from pydantic import Field

from .catalog import Member
from .exceptions import InvalidConfigurationError
from .primitives import Model
from .utils.annotations import describe_type, is_assignable

SubstituteFunction = Callable[[Any], str]


class BaseValue(Model):
    """Wraps a catalog member directly."""

    kind: Literal["base"] = "base"
    member: Member

    @property
    def name(self) -> str:
        return self.member.name

    @property
    def declared_type(self) -> Any:
        return self.member.declared_type

    def read(self, instance: Any) -> Any:
        return self.member.read(instance)


class SubstitutedValue(Model):
    """Wraps a base value and renders it with a substitution function."""

    kind: Literal["substituted"] = "substituted"
    inner: BaseValue
    function: SubstituteFunction
    input_type: Any = Field(default=Any)

    @property
    def name(self) -> str:
        return self.inner.name

    @property
    def declared_type(self) -> Any:
        return self.inner.declared_type

    def read(self, instance: Any) -> str:
        """Substituted fragment for ``instance``; ``None`` becomes empty."""
        result = self.function(self.inner.read(instance))
        if result is None:
            return ""
        return result if isinstance(result, str) else str(result)


Value = Annotated[Union[BaseValue, SubstitutedValue], Field(discriminator="kind")]


def resolve_input_type(function: Callable[..., Any]) -> Any:
    """
    Expected input type of a substitution function.

    Uses the annotation of the first positional parameter. Functions
    without one (builtins, lambdas, unannotated callables) accept ``Any``.
    """
    try:
        signature = inspect.signature(function, eval_str=True)
    except (NameError, TypeError, ValueError):
        try:
            signature = inspect.signature(function)
        except (TypeError, ValueError):
            return Any

    positional = [
        parameter
        for parameter in signature.parameters.values()
        if parameter.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        )
    ]
    if not positional:
        return Any

    annotation = positional[0].annotation
    # Unresolvable postponed annotations stay strings
    if annotation is inspect.Parameter.empty or isinstance(annotation, str):
        return Any
    return annotation


def substitute_value(
    value: BaseValue,
    function: SubstituteFunction,
    owner: type,
    input_type: Any = None,
) -> SubstitutedValue:
    """
    Wrap ``value`` with ``function`` after checking type compatibility.

    Raises:
        InvalidConfigurationError: If the member's declared type cannot be
            passed to ``function``
    """
    if input_type is None:
        input_type = resolve_input_type(function)

    if not is_assignable(value.declared_type, input_type):
        raise InvalidConfigurationError(
            f"Cannot substitute member named \"{value.name}\" in type "
            f"\"{owner.__name__}\" because it can't be converted from type "
            f"\"{describe_type(value.declared_type)}\" to type "
            f"\"{describe_type(input_type)}\""
        )

    return SubstitutedValue(inner=value, function=function, input_type=input_type)
