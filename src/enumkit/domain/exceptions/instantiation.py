"""Direct case construction exception."""

from enumkit.domain.exceptions.base import EnumKitError


class DirectInstantiationError(EnumKitError):
    """Case constructed outside of registration.

    Cases are created only by EnumDefinition.case().
    Always a programmer error, never recovered.

    Attributes:
        case_type: Name of the case class that was called directly
    """

    def __init__(self, case_type: str) -> None:
        if not case_type:
            raise ValueError("case_type must not be empty")

        self.case_type = case_type
        super().__init__(
            f"{case_type} can't be instantiated directly: register cases with EnumDefinition.case()"
        )
