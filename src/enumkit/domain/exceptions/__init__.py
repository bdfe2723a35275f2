"""Domain exceptions."""

from enumkit.domain.exceptions.base import EnumKitError
from enumkit.domain.exceptions.instantiation import DirectInstantiationError
from enumkit.domain.exceptions.naming import NamingConventionViolationError
from enumkit.domain.exceptions.registration import (
    CaseRegistrationError,
    DuplicateCaseError,
    FrozenTypeError,
    InvalidCaseNameError,
)

__all__ = [
    "EnumKitError",
    "CaseRegistrationError",
    "DirectInstantiationError",
    "DuplicateCaseError",
    "FrozenTypeError",
    "InvalidCaseNameError",
    "NamingConventionViolationError",
]
