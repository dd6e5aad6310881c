# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Error taxonomy for renderer configuration.

Argument errors are raised immediately by the offending builder call.
Configuration and support errors are raised only by ``build()``; a
compiled renderer never raises any of them.
"""

from __future__ import annotations


class ToStringError(Exception):
    """Base class for every error raised by this package."""


class ArgumentError(ToStringError, ValueError):
    """A configuration argument is syntactically invalid."""


class ArgumentNullError(ArgumentError):
    """A required configuration argument is ``None``."""

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"Argument \"{argument_name}\" cannot be None")


class ArgumentRangeError(ArgumentError):
    """A value lies outside an inclusive range."""

    def __init__(self, argument_name: str, argument, range_start, range_end):
        self.argument_name = argument_name
        self.argument = argument
        self.range_start = range_start
        self.range_end = range_end
        super().__init__(
            f"Argument \"{argument_name}\" must be between {range_start} and "
            f"{range_end}, got {argument}"
        )


class InvalidConfigurationError(ToStringError, RuntimeError):
    """The builder configuration is inconsistent with the target class."""


class NotSupportedError(ToStringError, TypeError):
    """A member's declared type cannot be rendered."""

    def __init__(self, message: str, rejected_type=None):
        self.rejected_type = rejected_type
        super().__init__(message)
