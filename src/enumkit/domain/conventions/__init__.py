"""Naming conventions for enum case names."""

from enumkit.domain.conventions.naming_convention import NamingConvention, NamingConventionCase

__all__ = ["NamingConvention", "NamingConventionCase"]
