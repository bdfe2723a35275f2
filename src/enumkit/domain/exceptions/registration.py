"""Case registration exceptions."""

from enumkit.domain.exceptions.base import EnumKitError


class CaseRegistrationError(EnumKitError):
    """Registration of a case was rejected.

    Base for every error raised by EnumDefinition.case().
    No case is added for the rejected name.

    Attributes:
        enum_name: Name of the enum definition (must not be empty)
        case_name: Rejected case name
    """

    def __init__(self, enum_name: str, case_name: object, message: str) -> None:
        if not enum_name:
            raise ValueError("enum_name must not be empty")
        if not message:
            raise ValueError("message must not be empty")

        self.enum_name = enum_name
        self.case_name = case_name
        super().__init__(message)


class FrozenTypeError(CaseRegistrationError):
    """Registration attempted after freeze()."""

    def __init__(self, enum_name: str, case_name: object) -> None:
        super().__init__(
            enum_name,
            case_name,
            f"Enum '{enum_name}' is frozen: you may no longer add additional cases "
            f"(tried to add {case_name!r}).",
        )


class DuplicateCaseError(CaseRegistrationError):
    """Case name already registered on the same definition."""

    def __init__(self, enum_name: str, case_name: str) -> None:
        super().__init__(
            enum_name,
            case_name,
            f"Enum '{enum_name}' already has a case named '{case_name}'.",
        )


class InvalidCaseNameError(CaseRegistrationError):
    """Case name can't be used as a case name at all.

    Attributes:
        reason: Why the name is invalid (must not be empty)
    """

    def __init__(self, enum_name: str, case_name: object, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(
            enum_name,
            case_name,
            f"Invalid case name {case_name!r} for enum '{enum_name}': {reason}",
        )
