"""Naming rule port: contract for case-name validation."""

from typing import Protocol


class NamingRule(Protocol):
    """Protocol for rules checked against every candidate case name.

    str(rule) is used in error messages, so it should identify the rule.
    NamingConvention cases are the built-in implementations.
    """

    def matches(self, candidate: str) -> bool:
        """Check whether candidate is an acceptable case name.

        Args:
            candidate: Case name about to be registered

        Returns:
            True if the name may be registered
        """
        ...
