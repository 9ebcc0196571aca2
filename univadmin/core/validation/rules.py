# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Validation rules.

Every rule checks a single value and reports a RuleResult. A result is one of:
- passed: the value satisfies the rule
- failed: the value was understood and does not satisfy the rule
- malformed: the value (or a rule parameter) could not be interpreted at all

``Rule.check`` always returns a result. ``Rule.passes`` is the boolean form:
it returns True/False for evaluated rules and raises MalformedValueError for
malformed input, so callers cannot mistake garbage for a plain "no".
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Sized
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar

from univadmin.utils.datetime import parse_date


class RuleError(Exception):
    """Base exception for rule evaluation errors."""

    pass


class MissingRuleParameterError(RuleError):
    """Raised when a rule is evaluated without a required parameter."""

    def __init__(self, rule: str, parameter: str) -> None:
        self.rule = rule
        self.parameter = parameter
        super().__init__(f"Missing required parameter '{parameter}' on rule '{rule}'")


class MalformedValueError(RuleError):
    """Raised by ``Rule.passes`` when the input cannot be interpreted.

    Attributes:
        rule: Name of the rule.
        value: The offending value.
    """

    def __init__(self, rule: str, value: Any) -> None:
        self.rule = rule
        self.value = value
        super().__init__(f"Rule '{rule}' cannot interpret value {value!r}")


class Outcome(str, Enum):
    """How a value fared against a rule."""

    PASSED = "passed"
    FAILED = "failed"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class RuleResult:
    """Outcome of checking one value against one rule.

    Attributes:
        rule: Rule name.
        outcome: Evaluation outcome.
        message: Formatted failure message (empty when passed).
        offending_value: For malformed results, the value that could not be
            interpreted (the subject or a parameter).
    """

    rule: str
    outcome: Outcome
    message: str = ""
    offending_value: Any = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED

    @property
    def malformed(self) -> bool:
        return self.outcome is Outcome.MALFORMED


@dataclass
class Rule(ABC):
    """Base class for validation rules.

    Subclasses set ``name``, ``message`` (with ``:attribute`` and
    ``:<param>`` placeholders) and ``fillable_params``, and implement
    ``evaluate``.

    Attributes:
        params: Rule parameters, keyed by name.
        attribute: Field name used when formatting messages.
    """

    name: ClassVar[str]
    message: ClassVar[str] = "The :attribute is invalid."
    fillable_params: ClassVar[tuple[str, ...]] = ()

    params: dict[str, Any] = field(default_factory=dict)
    attribute: str = "value"

    @classmethod
    def from_arguments(cls, arguments: list[str], attribute: str = "value") -> "Rule":
        """Bind positional rule-string arguments to ``fillable_params``."""
        params = dict(zip(cls.fillable_params, arguments))
        return cls(params=params, attribute=attribute)

    def parameter(self, name: str) -> Any:
        return self.params.get(name)

    def require_parameters(self, names: tuple[str, ...]) -> None:
        for name in names:
            if self.params.get(name) is None:
                raise MissingRuleParameterError(self.name, name)

    def format_message(self) -> str:
        text = self.message.replace(":attribute", self.attribute)
        for key, value in self.params.items():
            text = text.replace(f":{key}", str(value))
        return text

    def _result(self, outcome: Outcome, offending_value: Any = None) -> RuleResult:
        message = "" if outcome is Outcome.PASSED else self.format_message()
        return RuleResult(self.name, outcome, message, offending_value)

    def check(self, value: Any) -> RuleResult:
        """Evaluate the rule and report a RuleResult."""
        return self.evaluate(value)

    def passes(self, value: Any) -> bool:
        """Boolean form of ``check``.

        Raises:
            MalformedValueError: If the value cannot be interpreted.
        """
        result = self.check(value)
        if result.malformed:
            raise MalformedValueError(self.name, result.offending_value)
        return result.passed

    @abstractmethod
    def evaluate(self, value: Any) -> RuleResult:
        """Rule-specific evaluation."""
        ...


class Required(Rule):
    """The value must be present and non-blank."""

    name = "required"
    message = "The :attribute is required."

    def evaluate(self, value: Any) -> RuleResult:
        if value is None:
            return self._result(Outcome.FAILED)
        if isinstance(value, str):
            present = bool(value.strip())
        elif isinstance(value, Sized):
            present = len(value) > 0
        else:
            present = True
        return self._result(Outcome.PASSED if present else Outcome.FAILED)


_NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric(value: Any) -> bool:
    """Numbers and numeric strings (sign, decimals, exponent); never bools."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_PATTERN.match(value))
    return False


class Numeric(Rule):
    """The value must be a number or a numeric string.

    Absent values pass; combine with ``required`` to reject them.
    """

    name = "numeric"
    message = "The :attribute must be numeric."

    def evaluate(self, value: Any) -> RuleResult:
        if value is None or is_numeric(value):
            return self._result(Outcome.PASSED)
        return self._result(Outcome.FAILED)


def is_integral(value: Any) -> bool:
    """Numeric values with no fractional part, such as ``12``, ``"12.0"``, ``1e3``."""
    if not is_numeric(value):
        return False
    number = Decimal(value.strip() if isinstance(value, str) else str(value))
    return number.is_finite() and number == number.to_integral_value()


class Integer(Rule):
    """The value must be a whole number or a string holding one.

    Absent values pass; combine with ``required`` to reject them.
    """

    name = "integer"
    message = "The :attribute must be an integer."

    def evaluate(self, value: Any) -> RuleResult:
        if value is None or is_integral(value):
            return self._result(Outcome.PASSED)
        return self._result(Outcome.FAILED)


class After(Rule):
    """The value must be a date strictly after the ``time`` parameter."""

    name = "after"
    message = "The :attribute must be a date after :time."
    fillable_params = ("time",)

    def evaluate(self, value: Any) -> RuleResult:
        self.require_parameters(self.fillable_params)
        time = self.parameter("time")

        subject = parse_date(value)
        if subject is None:
            return self._result(Outcome.MALFORMED, value)

        reference = parse_date(time)
        if reference is None:
            return self._result(Outcome.MALFORMED, time)

        return self._result(Outcome.PASSED if reference < subject else Outcome.FAILED)


DEFAULT_RULES: tuple[type[Rule], ...] = (Required, Numeric, Integer, After)
