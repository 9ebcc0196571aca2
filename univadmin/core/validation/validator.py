# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rule-based input validator.

This module provides:
- Validator: Registry of named rules that validates a mapping of inputs
- Validation: Outcome of one validate() call

Rules are declared per field as pipe-separated rule strings, with
comma-separated parameters after a colon:

    validator = Validator()
    validation = validator.validate(
        {"num_building": "12", "opens_at": "2024-06-01"},
        {"num_building": "required|numeric", "opens_at": "after:2024-01-01"},
    )
    if validation.fails():
        print(validation.errors)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from univadmin.core.validation.rules import DEFAULT_RULES, Rule, RuleResult

logger = logging.getLogger(__name__)


class RuleNotFoundError(Exception):
    """Raised when a rule string names an unregistered rule.

    Attributes:
        rule: The unknown rule name.
        available: Registered rule names.
    """

    def __init__(self, rule: str, available: list[str]) -> None:
        self.rule = rule
        self.available = available
        message = (
            f"Validation rule '{rule}' not registered. "
            f"Available: {', '.join(available) or 'none'}"
        )
        super().__init__(message)


@dataclass
class Validation:
    """Outcome of validating a set of inputs.

    Attributes:
        results: Field name to the results of every rule applied to it.
    """

    results: dict[str, list[RuleResult]] = field(default_factory=dict)

    @property
    def errors(self) -> dict[str, list[str]]:
        """Failure messages per field; fields that passed are omitted."""
        errors: dict[str, list[str]] = {}
        for attribute, results in self.results.items():
            messages = [result.message for result in results if not result.passed]
            if messages:
                errors[attribute] = messages
        return errors

    def passes(self) -> bool:
        return all(result.passed for results in self.results.values() for result in results)

    def fails(self) -> bool:
        return not self.passes()


def parse_rules(definition: str | Iterable[str]) -> list[tuple[str, list[str]]]:
    """Split a rule declaration into (rule name, arguments) pairs.

    Args:
        definition: ``"required|after:2024-01-01"`` or a list of such entries.

    Returns:
        Rule names with their positional arguments, in declaration order.
    """
    entries = definition.split("|") if isinstance(definition, str) else list(definition)
    parsed = []
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        name, _, raw_args = entry.partition(":")
        arguments = [arg.strip() for arg in raw_args.split(",")] if raw_args else []
        parsed.append((name.strip(), arguments))
    return parsed


class Validator:
    """Registry of validation rules.

    The default rules (required, numeric, after) are registered on creation.

    Attributes:
        _rules: Rule name to rule class.
    """

    def __init__(self, rules: Iterable[type[Rule]] = DEFAULT_RULES) -> None:
        self._rules: dict[str, type[Rule]] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: type[Rule]) -> None:
        """Register a rule class under its name.

        Raises:
            ValueError: If a rule with the same name is already registered.
        """
        if rule.name in self._rules:
            raise ValueError(
                f"Validation rule '{rule.name}' is already registered. "
                f"Use replace() to override."
            )
        self._rules[rule.name] = rule

    def replace(self, rule: type[Rule]) -> None:
        """Register or replace a rule class."""
        if rule.name in self._rules:
            logger.debug("Replacing validation rule %s", rule.name)
        self._rules[rule.name] = rule

    def get(self, name: str) -> type[Rule]:
        """Get a rule class by name.

        Raises:
            RuleNotFoundError: If no rule is registered under ``name``.
        """
        if name not in self._rules:
            raise RuleNotFoundError(name, sorted(self._rules))
        return self._rules[name]

    def has(self, name: str) -> bool:
        return name in self._rules

    def make(self, name: str, arguments: list[str], attribute: str = "value") -> Rule:
        """Instantiate the rule ``name`` bound to ``arguments``."""
        return self.get(name).from_arguments(arguments, attribute=attribute)

    def validate(
        self,
        inputs: Mapping[str, Any],
        rules: Mapping[str, str | Iterable[str]],
    ) -> Validation:
        """Validate ``inputs`` against per-field rule declarations.

        Fields missing from ``inputs`` are validated as None. Every declared
        rule runs, so a failing field reports all of its failures.

        Args:
            inputs: Field name to raw value.
            rules: Field name to rule declaration.

        Returns:
            The validation outcome.

        Raises:
            RuleNotFoundError: If a declaration names an unknown rule.
            MissingRuleParameterError: If a rule lacks a required parameter.
        """
        validation = Validation()
        for attribute, definition in rules.items():
            value = inputs.get(attribute)
            results = []
            for name, arguments in parse_rules(definition):
                rule = self.make(name, arguments, attribute=attribute)
                results.append(rule.check(value))
            validation.results[attribute] = results

        if validation.fails():
            logger.debug("Validation failed for fields: %s", ", ".join(validation.errors))

        return validation
