"""Domain model: enum definitions and their cases."""

from enumkit.domain.model.case import Case
from enumkit.domain.model.definition import EnumDefinition
from enumkit.domain.model.enums import RawValueKind

__all__ = [
    "Case",
    "EnumDefinition",
    "RawValueKind",
]
