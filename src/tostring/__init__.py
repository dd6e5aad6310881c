# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
tostring - compiled, introspective ``str()`` renderers

Builds, once per class, a reusable function that renders any instance as
``{Name1=value1, Name2=value2}``. Members are discovered from dataclass
fields, pydantic model fields, class annotations and public properties;
each member gets a rendering strategy from its declared type, and all
configuration errors are raised by ``build()`` rather than per call.

Example Usage:
    ```python
    from dataclasses import dataclass
    from tostring import ToStringMethodBuilder

    @dataclass
    class Flags:
        enabled: bool
        name: str

    to_str = ToStringMethodBuilder(Flags).use_fields().build()
    to_str(Flags(True, "beta"))  # '{enabled=True, name="beta"}'
    ```
"""

import logging

from .builder import BuilderConfig, ToStringMethodBuilder, to_string
from .exceptions import (
    ArgumentError,
    ArgumentNullError,
    ArgumentRangeError,
    InvalidConfigurationError,
    NotSupportedError,
    ToStringError,
)
from .plan import ToStringMethod
from .primitives import Char, Ignored, RenderSettings, ignored

# Library logging: applications configure handlers, we only add a NullHandler.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentRangeError",
    "BuilderConfig",
    "Char",
    "Ignored",
    "InvalidConfigurationError",
    "NotSupportedError",
    "RenderSettings",
    "ToStringError",
    "ToStringMethod",
    "ToStringMethodBuilder",
    "ignored",
    "to_string",
]
