"""Factory for enum definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from enumkit.domain.model.definition import EnumDefinition
from enumkit.domain.model.enums import RawValueKind

if TYPE_CHECKING:
    from enumkit.domain.ports.naming_rule import NamingRule


def define_enum(
    name: str,
    *,
    kind: RawValueKind = RawValueKind.TEXT,
    naming: NamingRule | None = None,
) -> EnumDefinition:
    """Declare a new open enum definition.

    Args:
        name: Definition name
        kind: Raw value kind (TEXT: name, NUMERIC: registration index)
        naming: Rule every case name must match, e.g. NamingConvention.PascalCase

    Returns:
        Empty EnumDefinition ready for case() calls
    """
    return EnumDefinition(name, kind, naming=naming)
