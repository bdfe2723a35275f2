"""Enum definition factories."""

from enumkit.application.factories.definitions import define_enum
from enumkit.application.factories.simple import SIMPLE_ENUM_NAME, simple_enum

__all__ = [
    "SIMPLE_ENUM_NAME",
    "define_enum",
    "simple_enum",
]
