# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model


class RenderSettings(Model):
    """
    Output tokens used by compiled renderers.

    The defaults produce ``{Name1=value1, Name2=value2}``. Settings are
    captured by value when a plan is compiled, so a renderer never observes
    later changes.

    Usage Examples:
        # Default shape
        settings = RenderSettings()

        # Parenthesized, colon separated
        settings = RenderSettings(opening="(", closing=")", assignment=": ")
    """

    opening: str = Field(default="{", description="Emitted before the first member.")
    closing: str = Field(default="}", description="Emitted after the last member.")
    separator: str = Field(
        default=", ", description="Emitted between two consecutive members."
    )
    assignment: str = Field(
        default="=", description="Emitted between a member name and its value."
    )

    @property
    def empty(self) -> str:
        """Output for a class without renderable members."""
        return self.opening + self.closing
