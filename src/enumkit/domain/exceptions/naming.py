"""Naming convention exceptions."""

from enumkit.domain.exceptions.registration import CaseRegistrationError


class NamingConventionViolationError(CaseRegistrationError):
    """Case name does not match the definition's naming convention.

    Attributes:
        enum_name: Name of the enum definition
        case_name: Offending case name
        convention: Display string of the required convention
    """

    def __init__(self, enum_name: str, case_name: str, convention: str) -> None:
        if not convention:
            raise ValueError("convention must not be empty")

        self.convention = convention
        super().__init__(
            enum_name,
            case_name,
            f"The name '{case_name}' for enum '{enum_name}' does not match "
            f"your required naming convention ({convention}).",
        )
