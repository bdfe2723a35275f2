"""Enum case entity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from enumkit.domain.exceptions.instantiation import DirectInstantiationError

if TYPE_CHECKING:
    from enumkit.domain.model.definition import EnumDefinition


class Case:
    """One named value of an enum definition.

    Cases are created only by EnumDefinition while registering;
    calling the class directly raises DirectInstantiationError.
    Read-only after creation. Equality is identity.

    Attributes:
        name: Case name, unique within its definition
        raw_value: Underlying value (name, registration index, or explicit)
        definition: Owning enum definition
    """

    __slots__ = ("_definition", "_name", "_raw_value")

    _definition: EnumDefinition
    _name: str
    _raw_value: object

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise DirectInstantiationError(type(self).__name__)

    @property
    def name(self) -> str:
        """Case name."""
        return self._name

    @property
    def raw_value(self) -> object:
        """Raw value assigned at registration."""
        return self._raw_value

    @property
    def definition(self) -> EnumDefinition:
        """Enum definition that owns this case."""
        return self._definition

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{self} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self} is read-only")

    def __str__(self) -> str:
        """Format as EnumName.CaseName."""
        return f"{self._definition.name}.{self._name}"

    def __repr__(self) -> str:
        return f"<{self}: {self._raw_value!r}>"


def _new_case(
    case_type: type[Case],
    definition: EnumDefinition,
    name: str,
    raw_value: object,
) -> Case:
    """Build a case without going through Case.__init__.

    Only EnumDefinition calls this.
    """
    case = case_type.__new__(case_type)
    object.__setattr__(case, "_definition", definition)
    object.__setattr__(case, "_name", name)
    object.__setattr__(case, "_raw_value", raw_value)
    return case
