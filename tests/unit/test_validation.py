# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for validation rules and the validator."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from univadmin.core.validation import (
    After,
    Integer,
    MalformedValueError,
    MissingRuleParameterError,
    Numeric,
    Outcome,
    Required,
    RuleNotFoundError,
    Validator,
    parse_rules,
)


class TestAfterRule:
    """Tests for the 'after' date rule."""

    def test_later_date_passes(self) -> None:
        """Test a subject after the reference time passes."""
        rule = After(params={"time": "2024-01-01"})

        assert rule.passes("2024-06-01") is True

    def test_earlier_date_fails(self) -> None:
        """Test a subject before the reference time fails."""
        rule = After(params={"time": "2024-06-01"})

        assert rule.passes("2024-01-01") is False

    def test_equal_date_fails(self) -> None:
        """Test the comparison is strict."""
        rule = After(params={"time": "2024-06-01"})

        assert rule.passes("2024-06-01") is False

    def test_unparseable_subject_raises(self) -> None:
        """Test a non-date subject raises instead of returning False."""
        rule = After(params={"time": "2024-01-01"})

        with pytest.raises(MalformedValueError) as exc_info:
            rule.passes("not a date")

        assert exc_info.value.value == "not a date"

    def test_unparseable_time_raises(self) -> None:
        """Test a non-date reference time raises."""
        rule = After(params={"time": "someday"})

        with pytest.raises(MalformedValueError) as exc_info:
            rule.passes("2024-06-01")

        assert exc_info.value.value == "someday"

    def test_check_distinguishes_malformed_from_failed(self) -> None:
        """Test check() reports malformed input separately from a false rule."""
        rule = After(params={"time": "2024-06-01"})

        assert rule.check("garbage").outcome is Outcome.MALFORMED
        assert rule.check("2024-01-01").outcome is Outcome.FAILED
        assert rule.check("2024-12-01").outcome is Outcome.PASSED

    def test_missing_time_parameter_raises(self) -> None:
        """Test the time parameter is required."""
        with pytest.raises(MissingRuleParameterError):
            After().check("2024-06-01")

    def test_accepts_date_and_datetime_values(self) -> None:
        """Test date and datetime instances are valid subjects."""
        rule = After(params={"time": "2024-01-01"})

        assert rule.passes(date(2024, 1, 2)) is True
        assert rule.passes(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)) is True
        assert rule.passes(datetime(2023, 12, 31, 23, 0)) is False

    def test_relative_keywords(self) -> None:
        """Test relative keywords are understood."""
        rule = After(params={"time": "yesterday"})
        tomorrow = (datetime.now(timezone.utc) + timedelta(days=1)).date()

        assert rule.passes(tomorrow.isoformat()) is True
        assert After(params={"time": "tomorrow"}).passes("today") is False

    def test_failure_message(self) -> None:
        """Test the message names the attribute and the time."""
        rule = After(params={"time": "2024-06-01"}, attribute="starts_at")

        result = rule.check("2024-01-01")

        assert result.message == "The starts_at must be a date after 2024-06-01."


class TestRequiredRule:
    """Tests for the 'required' rule."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_absent_values_fail(self, value) -> None:
        """Test absent or blank values fail."""
        assert Required().passes(value) is False

    @pytest.mark.parametrize("value", ["x", 0, 0.0, False, [1], {"a": 1}])
    def test_present_values_pass(self, value) -> None:
        """Test present values pass, including falsy scalars."""
        assert Required().passes(value) is True


class TestNumericRule:
    """Tests for the 'numeric' rule."""

    @pytest.mark.parametrize(
        "value",
        [1, -3, 2.5, Decimal("1.5"), "42", "-7", "+3.5", ".5", "1e3", " 12 ", None],
    )
    def test_numeric_values_pass(self, value) -> None:
        """Test numbers and numeric strings pass; absent values are left to required."""
        assert Numeric().passes(value) is True

    @pytest.mark.parametrize("value", ["abc", "", "12a", "1,5", "0x1A", True, [1]])
    def test_non_numeric_values_fail(self, value) -> None:
        """Test non-numeric values fail."""
        assert Numeric().passes(value) is False


class TestIntegerRule:
    """Tests for the 'integer' rule."""

    @pytest.mark.parametrize("value", [1, -3, "42", " 12 ", "12.0", "1e3", Decimal("7"), 4.0, None])
    def test_whole_numbers_pass(self, value) -> None:
        """Test whole numbers and strings holding them pass."""
        assert Integer().passes(value) is True

    @pytest.mark.parametrize("value", ["1.5", 2.5, Decimal("0.1"), "abc", "", True, float("inf")])
    def test_fractional_or_non_numeric_values_fail(self, value) -> None:
        """Test fractional, non-numeric and boolean values fail."""
        assert Integer().passes(value) is False

    def test_failure_message(self) -> None:
        """Test the failure message names the attribute."""
        validation = Validator().validate({"num_building": "1.5"}, {"num_building": "integer"})

        assert validation.errors == {"num_building": ["The num_building must be an integer."]}


class TestParseRules:
    """Tests for rule declaration parsing."""

    def test_pipe_separated(self) -> None:
        """Test pipe-separated declarations with parameters."""
        assert parse_rules("required|numeric|after:2024-01-01") == [
            ("required", []),
            ("numeric", []),
            ("after", ["2024-01-01"]),
        ]

    def test_time_parameter_with_colons(self) -> None:
        """Test only the first colon separates the rule name from its parameters."""
        assert parse_rules("after:2024-01-01T10:00:00") == [("after", ["2024-01-01T10:00:00"])]

    def test_list_declaration(self) -> None:
        """Test list declarations and blank entries."""
        assert parse_rules(["required", "", "after: now "]) == [
            ("required", []),
            ("after", ["now"]),
        ]


class TestValidator:
    """Tests for the Validator registry and validate()."""

    def test_valid_inputs_pass(self) -> None:
        """Test inputs satisfying every rule pass."""
        validation = Validator().validate(
            {"num_building": "12", "opens_at": "2024-06-01"},
            {"num_building": "required|numeric", "opens_at": "required|after:2024-01-01"},
        )

        assert validation.passes()
        assert validation.errors == {}

    def test_time_parameter_keeps_its_colons(self) -> None:
        """Test a time-of-day parameter reaches the after rule intact."""
        rules = {"opens_at": "required|after:2024-01-01T10:00:00"}

        later = Validator().validate({"opens_at": "2024-01-01T10:00:01"}, rules)
        earlier = Validator().validate({"opens_at": "2024-01-01T09:59:59"}, rules)

        assert later.passes()
        assert earlier.fails()
        assert earlier.errors == {
            "opens_at": ["The opens_at must be a date after 2024-01-01T10:00:00."]
        }

    def test_missing_field_fails_required(self) -> None:
        """Test a field absent from the inputs is validated as None."""
        validation = Validator().validate({}, {"num_building": "required|numeric"})

        assert validation.fails()
        assert validation.errors == {"num_building": ["The num_building is required."]}

    def test_non_numeric_field_fails(self) -> None:
        """Test non-numeric input reports the numeric rule."""
        validation = Validator().validate(
            {"num_building": "abc"}, {"num_building": "required|numeric"}
        )

        assert validation.fails()
        assert validation.errors == {"num_building": ["The num_building must be numeric."]}

    def test_malformed_date_is_a_failure(self) -> None:
        """Test malformed dates fail validation and are reported as malformed."""
        validation = Validator().validate(
            {"opens_at": "soon"}, {"opens_at": "after:2024-01-01"}
        )

        assert validation.fails()
        assert validation.results["opens_at"][0].malformed

    def test_unknown_rule_raises(self) -> None:
        """Test unknown rule names raise RuleNotFoundError."""
        with pytest.raises(RuleNotFoundError) as exc_info:
            Validator().validate({"x": 1}, {"x": "between:1,5"})

        assert exc_info.value.rule == "between"
        assert "after" in exc_info.value.available

    def test_register_duplicate_raises(self) -> None:
        """Test registering an existing rule name raises."""
        with pytest.raises(ValueError, match="already registered"):
            Validator().register(Numeric)

    def test_replace_and_custom_rules(self) -> None:
        """Test custom rules can be registered and replaced."""

        class Even(Numeric):
            name = "even"
            message = "The :attribute must be even."

            def evaluate(self, value):
                return self._result(Outcome.PASSED if int(value) % 2 == 0 else Outcome.FAILED)

        validator = Validator(rules=[])
        validator.register(Even)
        validator.replace(Even)

        assert validator.has("even")
        assert not validator.has("required")
        assert validator.validate({"n": "3"}, {"n": "even"}).errors == {
            "n": ["The n must be even."]
        }
