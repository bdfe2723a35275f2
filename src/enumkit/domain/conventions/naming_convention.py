"""Naming conventions for case names.

NamingConvention is itself an enum definition. Each of its cases is a
naming rule and can produce enum definitions that enforce it:

    Color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
    Color.case("BLUE")   # ok
    Color.case("Blue")   # NamingConventionViolationError
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Final

from enumkit.domain.model.case import Case
from enumkit.domain.model.definition import EnumDefinition
from enumkit.domain.model.enums import RawValueKind

logger = logging.getLogger(__name__)

# Matched with fullmatch(): the whole name must match
_PATTERNS: Final = MappingProxyType(
    {
        "PascalCase": re.compile(r"[A-Z][a-zA-Z]*"),
        "ScreamingSnakeCase": re.compile(r"[A-Z][A-Z_]*"),
        "NoRules": re.compile(r".*", re.DOTALL),
    }
)


class NamingConventionCase(Case):
    """Case of NamingConvention: a naming rule for case names.

    Pattern and factory are looked up from the case name, not stored.
    """

    __slots__ = ()

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled pattern a name must fully match."""
        return _PATTERNS[self.name]

    def matches(self, candidate: str) -> bool:
        """Check if candidate follows this convention.

        Args:
            candidate: Name to test

        Returns:
            True if the whole candidate matches the pattern

        Raises:
            TypeError: If candidate is not a string
        """
        if not isinstance(candidate, str):
            raise TypeError(f"candidate must be str, got {type(candidate).__name__}")
        return self.pattern.fullmatch(candidate) is not None

    def enum_factory(self, name: str, *, kind: RawValueKind = RawValueKind.TEXT) -> EnumDefinition:
        """Create an enum definition that enforces this convention.

        Definitions derived from the result keep the convention.

        Args:
            name: Definition name
            kind: Raw value kind

        Returns:
            Open, empty EnumDefinition
        """
        logger.debug("creating enum %r with naming convention %s", name, self)
        return EnumDefinition(name, kind, naming=self)


NamingConvention: Final = EnumDefinition("NamingConvention", case_type=NamingConventionCase)
NamingConvention.case(*_PATTERNS).freeze()
