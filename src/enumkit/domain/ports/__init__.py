"""Domain ports (protocols)."""

from enumkit.domain.ports.naming_rule import NamingRule

__all__ = ["NamingRule"]
