"""Plain text reporter.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from enumkit.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from enumkit.domain.model.definition import EnumDefinition


class PlainTextReporter(BaseReporter):
    """Plain text listing of an enum definition."""

    def report(self, definition: EnumDefinition) -> str:
        """Format definition as plain text.

        Args:
            definition: Definition to describe

        Returns:
            Header line, settings line, then one line per case
        """
        state = "frozen" if definition.is_frozen else "open"
        lines = [
            f"{definition.name} ({len(definition)} case(s), {state})",
            f"  kind: {definition.kind.name}",
        ]
        if definition.naming is not None:
            lines.append(f"  naming: {definition.naming}")

        lines.extend(f"  {case.name} = {case.raw_value!r}" for case in definition)
        return "\n".join(lines)
