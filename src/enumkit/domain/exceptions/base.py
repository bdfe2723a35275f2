"""Base exceptions for enumkit domain."""


class EnumKitError(Exception):
    """Root exception for all enumkit errors.

    All domain exceptions inherit from this.
    Allows catching all enumkit-specific errors.
    """
