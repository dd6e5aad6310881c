# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; builders replace their state with updated copies
    instead of mutating it in place.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # Members carry raw type objects and callables
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )

    def copy(self, *, updates: dict = None) -> "Model":
        """
        Return a copy of the model (shorter alias for model_copy)

        Args:
            updates: Optional dictionary of field values to update

        Returns:
            A copy of the model with any specified updates
        """
        return self.model_copy(update=updates)
