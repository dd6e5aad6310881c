# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Member catalog: the ordered, renderable members of a target class.

The catalog is a plain snapshot of (name, declared type, accessor) entries
taken once per build. Three kinds of classes are understood:
- Pydantic models (``model_fields`` plus properties and computed fields)
- Dataclasses (``dataclasses.fields`` plus properties)
- Plain classes (class-level annotations plus properties)

Fields always come before properties; each group keeps declaration order,
with members inherited from base classes first.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import sys
from operator import attrgetter
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple, get_type_hints

from pydantic import BaseModel

from .primitives import MemberKind, Model, is_ignore_marker
from .primitives.types import IGNORE_ATTRIBUTE
from .utils.annotations import is_classvar, strip_annotated

logger = logging.getLogger(__name__)

_UNRESOLVED_ERRORS = (NameError, AttributeError, TypeError, SyntaxError)


class Member(Model):
    """A single readable member of the target class."""

    name: str
    declared_type: Any
    accessor: Callable[[Any], Any]
    kind: MemberKind
    ignored: bool = False

    def read(self, instance: Any) -> Any:
        """Return the member's current value on ``instance``."""
        return self.accessor(instance)


class MemberCatalog(Model):
    """Candidates discovered on ``target_type`` for one build."""

    target_type: Any
    candidates: Tuple[Member, ...] = ()

    @property
    def names(self) -> FrozenSet[str]:
        """Names of every candidate, including marker-ignored ones."""
        return frozenset(member.name for member in self.candidates)

    @property
    def members(self) -> Tuple[Member, ...]:
        """Candidates that are not hidden by an ignore marker, in order."""
        return tuple(member for member in self.candidates if not member.ignored)


def build_catalog(
    target_type: type, include_fields: bool, include_properties: bool
) -> MemberCatalog:
    """
    Resolve the members of ``target_type`` for the requested inclusion modes.

    An empty catalog is legal; callers decide whether that is an error.
    """
    candidates: List[Member] = []
    if include_fields:
        candidates.extend(collect_fields(target_type))
    if include_properties:
        candidates.extend(collect_properties(target_type))

    for member in candidates:
        if member.ignored:
            logger.debug(
                f"{target_type.__name__}.{member.name}: skipped (ignore marker)"
            )

    return MemberCatalog(target_type=target_type, candidates=tuple(candidates))


def collect_fields(target_type: type) -> List[Member]:
    """Public instance fields of ``target_type`` in declaration order."""
    if issubclass(target_type, BaseModel):
        return _collect_model_fields(target_type)

    hints = _type_hints(target_type)

    if dataclasses.is_dataclass(target_type):
        names = [field.name for field in dataclasses.fields(target_type)]
    else:
        names = [name for name, hint in hints.items() if not is_classvar(hint)]

    members = []
    for name in names:
        if name.startswith("_"):
            continue
        if isinstance(inspect.getattr_static(target_type, name, None), property):
            # Reads go through the property, which the property scan reports
            logger.debug(f"{target_type.__name__}.{name}: field shadowed by property")
            continue
        declared_type, metadata = strip_annotated(hints.get(name, Any))
        members.append(
            _member(
                name,
                declared_type,
                MemberKind.FIELD,
                ignored=any(is_ignore_marker(item) for item in metadata),
            )
        )
    return members


def collect_properties(target_type: type) -> List[Member]:
    """
    Public readable properties of ``target_type`` in declaration order.

    Properties overridden in a subclass keep the position of the base
    declaration; a property shadowed by a plain attribute disappears.
    """
    found: Dict[str, property] = {}
    for klass in reversed(target_type.__mro__):
        if klass is object or klass is BaseModel:
            continue
        for name, attribute in vars(klass).items():
            if isinstance(attribute, property):
                found[name] = attribute
            elif name in found:
                del found[name]

    members = []
    for name, prop in found.items():
        if name.startswith("_") or prop.fget is None:
            continue
        declared_type, metadata = strip_annotated(
            _type_hints(prop.fget).get("return", Any)
        )
        ignored = getattr(prop.fget, IGNORE_ATTRIBUTE, False) or any(
            is_ignore_marker(item) for item in metadata
        )
        members.append(
            _member(name, declared_type, MemberKind.PROPERTY, ignored=ignored)
        )
    return members


def _collect_model_fields(model_type: type[BaseModel]) -> List[Member]:
    members = []
    for name, info in model_type.model_fields.items():
        if name.startswith("_"):
            continue
        declared_type, metadata = strip_annotated(info.annotation)
        ignored = any(
            is_ignore_marker(item) for item in (*info.metadata, *metadata)
        )
        members.append(_member(name, declared_type, MemberKind.FIELD, ignored=ignored))
    return members


def _member(name: str, declared_type: Any, kind: MemberKind, ignored: bool) -> Member:
    return Member(
        name=name,
        declared_type=declared_type,
        accessor=attrgetter(name),
        kind=kind,
        ignored=ignored,
    )


def _type_hints(obj: Any) -> Dict[str, Any]:
    """
    Resolved annotations of a class or function, keeping ``Annotated``.

    When some forward references cannot be resolved (``TYPE_CHECKING``
    imports, classes local to a function), each annotation is resolved on
    its own and only the failing ones degrade to ``Any``.
    """
    try:
        return get_type_hints(obj, include_extras=True)
    except _UNRESOLVED_ERRORS as e:
        logger.debug(f"Resolving annotations of {obj!r} one by one: {e}")

    if isinstance(obj, type):
        owners = [klass for klass in reversed(obj.__mro__) if klass is not object]
    else:
        owners = [obj]

    hints: Dict[str, Any] = {}
    for owner in owners:
        module = sys.modules.get(getattr(owner, "__module__", None) or "")
        globalns = getattr(owner, "__globals__", None) or getattr(module, "__dict__", {})
        localns = dict(vars(owner)) if isinstance(owner, type) else None
        for name, hint in inspect.get_annotations(owner).items():
            hints[name] = _resolve_hint(name, hint, globalns, localns)
    return hints


def _resolve_hint(
    name: str, hint: Any, globalns: Dict[str, Any], localns: Optional[Dict[str, Any]]
) -> Any:
    if not isinstance(hint, str):
        return hint

    holder = type("_Annotation", (), {"__annotations__": {name: hint}})
    try:
        return get_type_hints(
            holder, globalns=globalns, localns=localns, include_extras=True
        )[name]
    except _UNRESOLVED_ERRORS as e:
        logger.debug(f"Annotation {name}: {hint!r} is unresolved ({e}), using Any")
        return Any
