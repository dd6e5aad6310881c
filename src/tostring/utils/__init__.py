from .annotations import (
    describe_type,
    is_any_type,
    is_assignable,
    is_iterable_type,
    strip_annotated,
    strip_optional,
)

__all__ = [
    "describe_type",
    "is_any_type",
    "is_assignable",
    "is_iterable_type",
    "strip_annotated",
    "strip_optional",
]
