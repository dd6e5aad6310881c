# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Render plans and their compilation into renderers.

A plan is the ordered list of (label, value, strategy) entries that
survived configuration. Compiling it closes over a tuple of plain callables
so that each call only reads members and joins fragments:

    {Label1=<fragment1>, Label2=<fragment2>}

An empty plan compiles to a constant function returning ``{}``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from pydantic import Field, model_validator

from .appenders import appender_for, check_supported
from .primitives import AppenderKind, Model, RenderSettings
from .values import SubstitutedValue, Value

logger = logging.getLogger(__name__)

ToStringMethod = Callable[[Any], str]


class PlanEntry(Model):
    label: str
    value: Value
    appender: AppenderKind


class RenderPlan(Model):
    """Ordered, immutable description of a renderer."""

    target_type: Any
    entries: Tuple[PlanEntry, ...] = ()
    settings: RenderSettings = Field(default_factory=RenderSettings)

    @model_validator(mode="after")
    def _check_unique_labels(self) -> "RenderPlan":
        labels = self.labels
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(f"Duplicate member labels in render plan: {duplicates}")
        return self

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(entry.label for entry in self.entries)


def compose_plan(
    values: Iterable[Value],
    target_type: type,
    settings: Optional[RenderSettings] = None,
) -> RenderPlan:
    """
    Assign a strategy to every value, keeping the given order.

    Substituted values always use the verbatim strategy.

    Raises:
        NotSupportedError: If a non-substituted value has an unsupported
            declared type
    """
    entries = []
    for value in values:
        if isinstance(value, SubstitutedValue):
            kind = AppenderKind.VERBATIM
        else:
            kind = check_supported(value.declared_type, value.name, target_type)
        entries.append(PlanEntry(label=value.name, value=value, appender=kind))

    return RenderPlan(
        target_type=target_type,
        entries=tuple(entries),
        settings=settings or RenderSettings(),
    )


def compile_plan(plan: RenderPlan) -> ToStringMethod:
    """Turn ``plan`` into a pure, reentrant ``instance -> str`` function."""
    settings = plan.settings

    if not plan.entries:
        empty = settings.empty

        def render_empty(instance: Any) -> str:
            return empty

        return render_empty

    steps = []
    for position, entry in enumerate(plan.entries):
        lead = settings.opening if position == 0 else settings.separator
        steps.append(
            (
                f"{lead}{entry.label}{settings.assignment}",
                entry.value.read,
                appender_for(entry.appender, entry.value.declared_type),
            )
        )
    steps = tuple(steps)
    closing = settings.closing

    def render(instance: Any) -> str:
        parts = []
        for prefix, read, append in steps:
            parts.append(prefix)
            parts.append(append(read(instance)))
        parts.append(closing)
        return "".join(parts)

    logger.debug(
        f"Compiled renderer for {plan.target_type.__name__}: "
        f"{', '.join(f'{e.label}:{e.appender.value}' for e in plan.entries)}"
    )
    return render
