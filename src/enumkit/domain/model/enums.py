"""Domain enumerations."""

from enum import Enum, auto


class RawValueKind(Enum):
    """How a definition derives raw values for cases registered without one."""

    TEXT = auto()  # raw value is the case name
    NUMERIC = auto()  # raw value is the 0-based registration index
