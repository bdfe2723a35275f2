"""SimpleEnum: declare, register and freeze in one call."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from enumkit.application.factories.definitions import define_enum
from enumkit.domain.model.definition import EnumDefinition

SIMPLE_ENUM_NAME: Final = "Enum"


def simple_enum(*cases: str | Mapping[str, object]) -> EnumDefinition:
    """Create a closed enum from case names.

    No cases gives an empty enum. Cases get text raw values (their names) unless a mapping is given.
    The result is already frozen and named "Enum".

    Args:
        *cases: Case names, or one mapping of name -> raw value

    Returns:
        Frozen EnumDefinition
    """
    definition = define_enum(SIMPLE_ENUM_NAME)
    if cases:
        definition.case(*cases)
    return definition.freeze()
