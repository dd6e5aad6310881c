from .enums import AppenderKind, MemberKind
from .model import Model
from .settings import RenderSettings
from .types import Char, Ignored, ignored, is_ignore_marker

__all__ = [
    "AppenderKind",
    "Char",
    "Ignored",
    "MemberKind",
    "Model",
    "RenderSettings",
    "ignored",
    "is_ignore_marker",
]
