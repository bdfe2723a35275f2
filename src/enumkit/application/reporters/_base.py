"""Base reporter class for enum definitions.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from enumkit.domain.model.definition import EnumDefinition


class BaseReporter(ABC):
    """Base class for reporters.

    Output is str, not print(). Caller decides destination.

    Example:
        class CountReporter(BaseReporter):
            def report(self, definition: EnumDefinition) -> str:
                return f"{definition.name}: {len(definition)}"
    """

    @abstractmethod
    def report(self, definition: EnumDefinition) -> str:
        """Format an enum definition.

        Args:
            definition: Definition to describe

        Returns:
            Formatted text
        """
