"""Enum definition: registry of cases.

An EnumDefinition is declared once, populated with case() calls,
and optionally frozen. Cases are readable as attributes:

    Color = EnumDefinition("Color")
    Color.case("Blue", "Red")
    Color.Blue.raw_value  # "Blue"

State machine: Open -> Frozen (one-way, via freeze()).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from enumkit.domain.exceptions.naming import NamingConventionViolationError
from enumkit.domain.exceptions.registration import (
    DuplicateCaseError,
    FrozenTypeError,
    InvalidCaseNameError,
)
from enumkit.domain.model.case import Case, _new_case
from enumkit.domain.model.enums import RawValueKind

if TYPE_CHECKING:
    from enumkit.domain.ports.naming_rule import NamingRule

logger = logging.getLogger(__name__)


class EnumDefinition:
    """Named, ordered, append-only set of cases.

    Each definition owns its own case storage; definitions never share
    cases, including definitions created with derive().

    Attributes:
        name: Display name used by str(case)
        kind: Raw value derivation for cases registered without a value
        naming: Rule checked against every case name (None = no rule)
        case_type: Class of the cases created by this definition
    """

    __slots__ = ("_by_name", "_case_type", "_cases", "_frozen", "_kind", "_name", "_naming")

    def __init__(
        self,
        name: str,
        kind: RawValueKind = RawValueKind.TEXT,
        *,
        naming: NamingRule | None = None,
        case_type: type[Case] = Case,
    ) -> None:
        """Initialize an open, empty definition.

        Args:
            name: Definition name (must not be empty)
            kind: Raw value kind
            naming: Optional naming rule for case names
            case_type: Case class to instantiate (Case or a subclass)

        Raises:
            ValueError: If name is empty
            TypeError: If kind is not a RawValueKind or case_type is not a Case subclass
        """
        # FAIL-FIRST: validate required parameters
        if not isinstance(name, str) or not name:
            raise ValueError("name must be a non-empty string")
        if not isinstance(kind, RawValueKind):
            raise TypeError(f"kind must be RawValueKind, got {type(kind).__name__}")
        if not isinstance(case_type, type) or not issubclass(case_type, Case):
            raise TypeError(f"case_type must be a subclass of Case, got {case_type!r}")

        self._name = name
        self._kind = kind
        self._naming = naming
        self._case_type = case_type
        self._cases: list[Case] = []
        self._by_name: dict[str, Case] = {}
        self._frozen = False

    @property
    def name(self) -> str:
        """Definition name."""
        return self._name

    @property
    def kind(self) -> RawValueKind:
        """Raw value kind."""
        return self._kind

    @property
    def naming(self) -> NamingRule | None:
        """Naming rule enforced on case names, if any."""
        return self._naming

    @property
    def case_type(self) -> type[Case]:
        """Class of the cases this definition creates."""
        return self._case_type

    @property
    def is_frozen(self) -> bool:
        """True once freeze() was called."""
        return self._frozen

    @property
    def cases(self) -> tuple[Case, ...]:
        """All cases in registration order."""
        return tuple(self._cases)

    def case(self, *cases: str | Mapping[str, object]) -> EnumDefinition:
        """Register one or more cases.

        Accepts either case names, or a single mapping of name -> raw value
        (mapping order is kept; a None value means "derive the default").

        Names are registered one by one: when a name is rejected,
        names before it in the same call stay registered.

        Args:
            *cases: Case names, or one mapping

        Returns:
            self, for chaining

        Raises:
            ValueError: If no cases given
            TypeError: If a mapping is mixed with other arguments
            CaseRegistrationError: If a name is rejected
        """
        if not cases:
            raise ValueError("at least one case is required")

        first = cases[0]
        if isinstance(first, Mapping):
            if len(cases) > 1:
                raise TypeError("a mapping of cases must be the only argument")
            if not first:
                raise ValueError("at least one case is required")
            for name, raw_value in first.items():
                self._register(name, raw_value)
            return self

        for name in cases:
            self._register(name, None)
        return self

    def case_with_raw_value(self, name: str, raw_value: object = None) -> EnumDefinition:
        """Register a single case with an explicit raw value.

        Args:
            name: Case name
            raw_value: Raw value (None = derive from kind)

        Returns:
            self, for chaining

        Raises:
            CaseRegistrationError: If the name is rejected
        """
        self._register(name, raw_value)
        return self

    def freeze(self) -> EnumDefinition:
        """Reject all further registrations. Irreversible.

        Returns:
            self, for chaining
        """
        if not self._frozen:
            self._frozen = True
            logger.debug("froze enum %r with %d case(s)", self._name, len(self._cases))
        return self

    def from_raw_value(self, raw_value: object) -> Case | None:
        """Find the first case whose raw value equals raw_value.

        Uses ==, except that bools only match bools: 1 never finds
        a case whose raw value is True.

        Args:
            raw_value: Value to look up

        Returns:
            Matching case, or None if there is none
        """
        for case in self._cases:
            if isinstance(case.raw_value, bool) is not isinstance(raw_value, bool):
                continue
            if case.raw_value == raw_value:
                return case
        return None

    def derive(self, name: str) -> EnumDefinition:
        """Create a new open definition with the same configuration.

        Kind, naming rule and case class are shared; cases are not.

        Args:
            name: Name of the new definition

        Returns:
            New empty EnumDefinition
        """
        return type(self)(name, self._kind, naming=self._naming, case_type=self._case_type)

    def _register(self, name: str, raw_value: object) -> None:
        """Validate name, create the case and append it."""
        if self._frozen:
            raise FrozenTypeError(self._name, name)

        self._check_name(name)

        if self._naming is not None and not self._naming.matches(name):
            raise NamingConventionViolationError(self._name, name, str(self._naming))

        if name in self._by_name:
            raise DuplicateCaseError(self._name, name)

        if raw_value is None:
            raw_value = name if self._kind is RawValueKind.TEXT else len(self._cases)

        case = _new_case(self._case_type, self, name, raw_value)
        self._cases.append(case)
        self._by_name[name] = case
        logger.debug("registered case %s = %r", case, raw_value)

    def _check_name(self, name: object) -> None:
        """Reject names that can't be stored or read back as attributes."""
        if not isinstance(name, str):
            raise InvalidCaseNameError(self._name, name, "must be a string")
        if not name:
            raise InvalidCaseNameError(self._name, name, "must not be empty")
        if name.startswith("_"):
            raise InvalidCaseNameError(self._name, name, "must not start with '_'")
        if name in dir(type(self)):
            raise InvalidCaseNameError(
                self._name, name, f"shadows EnumDefinition attribute '{name}'"
            )

    def __getattr__(self, name: str) -> Case:
        # Only called when normal lookup fails: resolves Definition.CaseName
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._by_name[name]
        except KeyError:
            raise AttributeError(f"enum '{self._name}' has no case '{name}'") from None

    def __getitem__(self, name: str) -> Case:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"enum '{self._name}' has no case '{name}'") from None

    def __iter__(self) -> Iterator[Case]:
        return iter(tuple(self._cases))

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Case) and item.definition is self

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<EnumDefinition {self._name!r} ({len(self._cases)} case(s), {state})>"
