# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Precondition helpers shared by the builder API.

Each helper checks a single condition and raises the matching argument
error; none of them log or return anything meaningful.
"""

from __future__ import annotations

from typing import Any

from .exceptions import ArgumentError, ArgumentNullError, ArgumentRangeError


def argument_not_null(argument: Any, argument_name: str) -> None:
    """
    Validate that ``argument`` is not None.

    Raises:
        ArgumentNullError: If ``argument`` is None
    """
    if argument is None:
        raise ArgumentNullError(argument_name)


def argument(condition: bool, message: str) -> None:
    """
    Validate an argument based on ``condition``.

    Raises:
        ArgumentError: If ``condition`` is false
    """
    if not condition:
        raise ArgumentError(message)


def argument_in_range(
    argument: int, range_start: int, range_end: int, argument_name: str
) -> None:
    """
    Validate that ``range_start <= argument <= range_end`` (both inclusive).

    Raises:
        ArgumentRangeError: If ``argument`` lies outside the range
    """
    if range_start > argument or argument > range_end:
        raise ArgumentRangeError(argument_name, argument, range_start, range_end)
