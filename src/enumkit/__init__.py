"""enumkit - enumerated types with named cases, raw values and naming conventions."""

__version__ = "0.1.0"

from enumkit.application.factories import define_enum, simple_enum
from enumkit.domain.conventions import NamingConvention, NamingConventionCase
from enumkit.domain.exceptions import (
    CaseRegistrationError,
    DirectInstantiationError,
    DuplicateCaseError,
    EnumKitError,
    FrozenTypeError,
    InvalidCaseNameError,
    NamingConventionViolationError,
)
from enumkit.domain.model import Case, EnumDefinition, RawValueKind

__all__ = [
    "Case",
    "CaseRegistrationError",
    "DirectInstantiationError",
    "DuplicateCaseError",
    "EnumDefinition",
    "EnumKitError",
    "FrozenTypeError",
    "InvalidCaseNameError",
    "NamingConvention",
    "NamingConventionCase",
    "NamingConventionViolationError",
    "RawValueKind",
    "__version__",
    "define_enum",
    "simple_enum",
]
