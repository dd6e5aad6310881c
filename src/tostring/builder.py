# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fluent builder for compiled ``str()`` renderers.

Configuration calls only record intent (and reject malformed arguments).
Everything that depends on the target class is checked once by
``build()``, so the returned renderer cannot fail because of configuration.

Example:
    ```python
    @dataclass
    class Point:
        x: int
        y: int
        label: Optional[str] = None

    to_str = (
        ToStringMethodBuilder(Point)
        .use_fields()
        .substitute("y", lambda y: f"{y:+d}")
        .build()
    )
    to_str(Point(1, 2, "origin"))  # '{x=1, y=+2, label="origin"}'
    ```
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from pydantic import Field

from . import validation
from .catalog import MemberCatalog, build_catalog
from .exceptions import InvalidConfigurationError
from .plan import ToStringMethod, compile_plan, compose_plan
from .primitives import Model, RenderSettings
from .values import BaseValue, SubstituteFunction, Value, substitute_value

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Substitution(Model):
    function: SubstituteFunction
    input_type: Any = None  # None: infer from the function's first parameter


class BuilderConfig(Model):
    """Recorded builder intent; replaced (never mutated) by each call."""

    use_fields: bool = False
    use_properties: bool = False
    ignored: Tuple[str, ...] = ()
    substitutes: Dict[str, Substitution] = Field(default_factory=dict)


class ToStringMethodBuilder(Generic[T]):
    """
    Builds a ``ToStringMethod`` for instances of ``target_type``.

    Args:
        target_type: Class whose instances will be rendered
        settings: Output tokens; defaults produce ``{Name=value, ...}``

    Raises:
        ArgumentNullError: If ``target_type`` is None
        ArgumentError: If ``target_type`` is not a class
    """

    def __init__(self, target_type: Type[T], settings: Optional[RenderSettings] = None):
        validation.argument_not_null(target_type, "target_type")
        validation.argument(
            isinstance(target_type, type), f"{target_type!r} is not a class"
        )
        self._target_type = target_type
        self._settings = settings or RenderSettings()
        self._config = BuilderConfig()

    @property
    def target_type(self) -> Type[T]:
        return self._target_type

    @property
    def config(self) -> BuilderConfig:
        return self._config

    def use_fields(self) -> "ToStringMethodBuilder[T]":
        """Include the instance fields of the target class."""
        self._config = self._config.copy(updates={"use_fields": True})
        return self

    def use_properties(self) -> "ToStringMethodBuilder[T]":
        """Include the public properties of the target class."""
        self._config = self._config.copy(updates={"use_properties": True})
        return self

    def ignore(self, *names: str) -> "ToStringMethodBuilder[T]":
        """
        Exclude the members named in ``names``.

        Every name must exist on the target class when ``build()`` runs.

        Raises:
            ArgumentError: If any name is None
        """
        return self.ignore_all(names)

    def ignore_all(self, names: Iterable[str]) -> "ToStringMethodBuilder[T]":
        """
        Exclude every member named in the iterable ``names``.

        Raises:
            ArgumentNullError: If ``names`` is None
            ArgumentError: If ``names`` is a bare string or contains None
        """
        validation.argument_not_null(names, "names")
        validation.argument(
            not isinstance(names, str), "names must be an iterable of names, not a str"
        )
        names = list(names)
        for name in names:
            validation.argument(name is not None, "A name cannot be None")

        ignored = list(self._config.ignored)
        ignored.extend(name for name in dict.fromkeys(names) if name not in ignored)
        self._config = self._config.copy(updates={"ignored": tuple(ignored)})
        return self

    def substitute(
        self,
        name: str,
        function: SubstituteFunction,
        input_type: Any = None,
    ) -> "ToStringMethodBuilder[T]":
        """
        Render the member ``name`` with ``function`` instead of its type strategy.

        The function's result is appended verbatim (no quoting). Calling this
        twice for the same name keeps the last function.

        Args:
            name: Member name on the target class
            function: Callable taking the member value and returning text
            input_type: Type the function accepts; inferred from the first
                parameter annotation when omitted

        Raises:
            ArgumentNullError: If ``name`` or ``function`` is None
            ArgumentError: If ``function`` is not callable
        """
        validation.argument_not_null(name, "name")
        validation.argument_not_null(function, "function")
        validation.argument(callable(function), f"{function!r} is not callable")

        substitutes = dict(self._config.substitutes)
        substitutes[name] = Substitution(function=function, input_type=input_type)
        self._config = self._config.copy(updates={"substitutes": substitutes})
        return self

    def build(self) -> ToStringMethod:
        """
        Validate the configuration and compile the renderer.

        Raises:
            InvalidConfigurationError: If no inclusion mode was chosen, an
                ignored or substituted name does not match a member, or a
                substitution function cannot accept its member's type
            NotSupportedError: If a rendered member is declared as Any,
                object or an iterable other than str
        """
        config = self._config
        self._validate_use_anything()

        catalog = build_catalog(
            self._target_type,
            include_fields=config.use_fields,
            include_properties=config.use_properties,
        )
        self._validate_ignored_members(catalog)

        values: List[Value] = [
            BaseValue(member=member)
            for member in catalog.members
            if member.name not in config.ignored
        ]
        self._validate_substitutions(values)
        values = [self._substitute_if_needed(value) for value in values]

        logger.debug(
            f"Building ToStringMethod for {self._target_type.__name__}: "
            f"{len(values)} members, {len(config.substitutes)} substituted, "
            f"{len(config.ignored)} ignored"
        )

        plan = compose_plan(values, self._target_type, self._settings)
        return compile_plan(plan)

    def _validate_use_anything(self) -> None:
        if not (self._config.use_fields or self._config.use_properties):
            raise InvalidConfigurationError(
                f"No member to use in ToStringMethod for type "
                f"\"{self._target_type.__name__}\": call use_fields() and/or "
                f"use_properties() before build()"
            )

    def _validate_ignored_members(self, catalog: MemberCatalog) -> None:
        member_names = catalog.names
        for ignored_member in self._config.ignored:
            if ignored_member not in member_names:
                raise InvalidConfigurationError(
                    f"Cannot ignore member named \"{ignored_member}\" because it "
                    f"doesn't exist in type \"{self._target_type.__name__}\""
                )

    def _validate_substitutions(self, values: List[Value]) -> None:
        value_names = {value.name for value in values}
        for substituted_name in self._config.substitutes:
            if substituted_name not in value_names:
                raise InvalidConfigurationError(
                    f"Cannot substitute member named \"{substituted_name}\" because "
                    f"it doesn't exist in type \"{self._target_type.__name__}\" "
                    f"or was ignored"
                )

    def _substitute_if_needed(self, value: BaseValue) -> Value:
        substitution = self._config.substitutes.get(value.name)
        if substitution is None:
            return value
        return substitute_value(
            value,
            substitution.function,
            owner=self._target_type,
            input_type=substitution.input_type,
        )


def to_string(
    cls: Optional[type] = None,
    *,
    use_fields: bool = True,
    use_properties: bool = False,
    ignore: Iterable[str] = (),
    substitutes: Optional[Dict[str, SubstituteFunction]] = None,
    settings: Optional[RenderSettings] = None,
    include_repr: bool = False,
) -> Any:
    """
    Class decorator installing a compiled renderer as ``__str__``.

    The renderer is built when the class is decorated, so configuration
    errors surface at import time. Place it above ``@dataclass``.

    Example:
        ```python
        @to_string(ignore=["password"])
        @dataclass
        class Credentials:
            user: str
            password: str

        str(Credentials("ada", "hunter2"))  # '{user="ada"}'
        ```
    """

    def wrap(klass: type) -> type:
        builder = ToStringMethodBuilder(klass, settings=settings)
        if use_fields:
            builder.use_fields()
        if use_properties:
            builder.use_properties()
        builder.ignore_all(ignore)
        for name, function in (substitutes or {}).items():
            builder.substitute(name, function)
        method = builder.build()

        def __str__(self) -> str:
            return method(self)

        __str__.__qualname__ = f"{klass.__qualname__}.__str__"
        klass.__str__ = __str__
        if include_repr:
            klass.__repr__ = __str__
        return klass

    if cls is None:
        return wrap
    return wrap(cls)
