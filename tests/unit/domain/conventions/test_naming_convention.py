"""Tests for domain/conventions/naming_convention.py."""

import re

import pytest

from enumkit.domain.conventions import NamingConvention, NamingConventionCase
from enumkit.domain.exceptions import FrozenTypeError, NamingConventionViolationError
from enumkit.domain.model.definition import EnumDefinition
from enumkit.domain.model.enums import RawValueKind


class TestNamingConventionEnum:
    """NamingConvention is itself a frozen enum."""

    def test_is_enum_definition(self) -> None:
        assert isinstance(NamingConvention, EnumDefinition)

    def test_cases_in_order(self) -> None:
        assert [c.name for c in NamingConvention] == ["PascalCase", "ScreamingSnakeCase", "NoRules"]

    def test_cases_are_convention_cases(self) -> None:
        assert all(isinstance(c, NamingConventionCase) for c in NamingConvention)

    def test_is_frozen(self) -> None:
        with pytest.raises(FrozenTypeError):
            NamingConvention.case("CamelCase")

    def test_display(self) -> None:
        assert str(NamingConvention.PascalCase) == "NamingConvention.PascalCase"

    def test_raw_values_are_names(self) -> None:
        assert NamingConvention.from_raw_value("NoRules") is NamingConvention.NoRules

    def test_pattern_is_compiled(self) -> None:
        assert isinstance(NamingConvention.PascalCase.pattern, re.Pattern)


class TestPascalCase:
    """Tests for NamingConvention.PascalCase."""

    def test_accepts_pascal_case(self) -> None:
        assert NamingConvention.PascalCase.matches("PascalCase")

    def test_accepts_single_letter(self) -> None:
        assert NamingConvention.PascalCase.matches("P")

    def test_accepts_all_capitals(self) -> None:
        assert NamingConvention.PascalCase.matches("BLUE")

    def test_rejects_camel_case(self) -> None:
        assert not NamingConvention.PascalCase.matches("camelCase")

    def test_rejects_screaming_snake_case(self) -> None:
        assert not NamingConvention.PascalCase.matches("SNAKE_CASE")

    def test_rejects_mixed_case(self) -> None:
        assert not NamingConvention.PascalCase.matches("Pascal_mixedWith_EVERYTHING")

    def test_rejects_digits(self) -> None:
        assert not NamingConvention.PascalCase.matches("Pascal2")

    def test_rejects_trailing_newline(self) -> None:
        assert not NamingConvention.PascalCase.matches("Pascal\n")

    def test_rejects_empty(self) -> None:
        assert not NamingConvention.PascalCase.matches("")


class TestScreamingSnakeCase:
    """Tests for NamingConvention.ScreamingSnakeCase."""

    def test_rejects_pascal_and_camel_case(self) -> None:
        assert not NamingConvention.ScreamingSnakeCase.matches("PascalCase")
        assert not NamingConvention.ScreamingSnakeCase.matches("camelCase")

    def test_accepts_screaming_snake_case(self) -> None:
        assert NamingConvention.ScreamingSnakeCase.matches("SNAKE_CASE")

    def test_accepts_trailing_underscore(self) -> None:
        assert NamingConvention.ScreamingSnakeCase.matches("SNAKE_")

    def test_rejects_leading_underscore(self) -> None:
        assert not NamingConvention.ScreamingSnakeCase.matches("_SNAKE")

    def test_rejects_mixed_case(self) -> None:
        assert not NamingConvention.ScreamingSnakeCase.matches("Pascal_mixedWith_EVERYTHING")


class TestNoRules:
    """Tests for NamingConvention.NoRules."""

    @pytest.mark.parametrize(
        "candidate",
        ["PascalCase", "camelCase", "SNAKE_CASE", "Pascal_mixedWith_EVERYTHING", "", "with space\n"],
    )
    def test_accepts_anything(self, candidate: str) -> None:
        assert NamingConvention.NoRules.matches(candidate)


class TestMatchesFailFirst:
    """FAIL-FIRST validation of matches()."""

    def test_non_string_raises(self) -> None:
        with pytest.raises(TypeError, match="candidate must be str"):
            NamingConvention.NoRules.matches(None)  # type: ignore[arg-type]


class TestEnumFactory:
    """Tests for enum_factory()."""

    def test_returns_open_definition(self) -> None:
        color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
        assert isinstance(color, EnumDefinition)
        assert color.name == "Color"
        assert not color.is_frozen
        assert color.naming is NamingConvention.ScreamingSnakeCase

    def test_allows_matching_case(self) -> None:
        color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
        color.case("BLUE")
        assert color.BLUE.raw_value == "BLUE"

    def test_allows_all_matching_cases(self) -> None:
        color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
        color.case("BLUE", "RED", "GREEN")
        assert len(color) == 3

    def test_rejects_non_matching_name(self) -> None:
        color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
        with pytest.raises(NamingConventionViolationError, match="Blue"):
            color.case("Blue")
        assert color.cases == ()

    def test_rejects_batch_with_one_non_matching_name(self) -> None:
        color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
        with pytest.raises(NamingConventionViolationError, match="Green"):
            color.case("BLUE", "RED", "Green")

    def test_batch_keeps_names_before_violation(self) -> None:
        color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
        with pytest.raises(NamingConventionViolationError):
            color.case("BLUE", "RED", "Green", "YELLOW")
        assert [c.name for c in color] == ["BLUE", "RED"]

    def test_error_context(self) -> None:
        color = NamingConvention.ScreamingSnakeCase.enum_factory("Color")
        with pytest.raises(NamingConventionViolationError) as exc_info:
            color.case("Blue")
        err = exc_info.value
        assert err.case_name == "Blue"
        assert err.enum_name == "Color"
        assert err.convention == "NamingConvention.ScreamingSnakeCase"
        assert str(err) == (
            "The name 'Blue' for enum 'Color' does not match your required "
            "naming convention (NamingConvention.ScreamingSnakeCase)."
        )

    def test_mapping_names_checked(self) -> None:
        color = NamingConvention.PascalCase.enum_factory("Color")
        with pytest.raises(NamingConventionViolationError, match="blue"):
            color.case({"blue": 0})

    def test_numeric_kind(self) -> None:
        day = NamingConvention.PascalCase.enum_factory("DayOfTheWeek", kind=RawValueKind.NUMERIC)
        day.case("Monday", "Tuesday")
        assert day.Tuesday.raw_value == 1

    def test_derived_definition_inherits_convention(self) -> None:
        base = NamingConvention.ScreamingSnakeCase.enum_factory("CustomEnum")
        color = base.derive("Color")
        color.case("BLUE")
        with pytest.raises(NamingConventionViolationError, match="'Blue' for enum 'Color'"):
            color.case("Blue")

    def test_no_rules_accepts_any_valid_name(self) -> None:
        color = NamingConvention.NoRules.enum_factory("Color")
        color.case("Blue", "RED", "green")
        assert len(color) == 3

    def test_each_call_returns_new_definition(self) -> None:
        first = NamingConvention.PascalCase.enum_factory("Color")
        second = NamingConvention.PascalCase.enum_factory("Color")
        first.case("Blue")
        assert first is not second
        assert second.cases == ()
