# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Marker types understood by the member catalog and the appender strategies.
"""

from __future__ import annotations

from typing import Callable, NewType, TypeVar

# A single character. Annotate a member with ``Char`` to render it quoted
# with single quotes instead of as a double quoted string.
Char = NewType("Char", str)

_F = TypeVar("_F", bound=Callable)

IGNORE_ATTRIBUTE = "__tostring_ignore__"


class _IgnoredMarker:
    """Singleton placed in ``Annotated`` metadata to hide a member."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Ignored"

    def __reduce__(self):
        return "Ignored"


# Usage: ``secret: Annotated[str, Ignored]``
Ignored = _IgnoredMarker()


def ignored(getter: _F) -> _F:
    """
    Mark a property getter so that renderers never include it.

    Apply below ``@property``:

        @property
        @ignored
        def password(self) -> str: ...
    """
    setattr(getter, IGNORE_ATTRIBUTE, True)
    return getter


def is_ignore_marker(metadata: object) -> bool:
    return metadata is Ignored or metadata is _IgnoredMarker
