# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Input validation package.

This package provides the rule-based validator used by the data-access
services:
- Validator: Named rule registry and field validation
- Rules: required, numeric, integer, after
"""

from univadmin.core.validation.rules import (
    After,
    Integer,
    MalformedValueError,
    MissingRuleParameterError,
    Numeric,
    Outcome,
    Required,
    Rule,
    RuleError,
    RuleResult,
    is_integral,
    is_numeric,
)
from univadmin.core.validation.validator import (
    RuleNotFoundError,
    Validation,
    Validator,
    parse_rules,
)

__all__ = [
    "Validator",
    "Validation",
    "RuleNotFoundError",
    "parse_rules",
    "Rule",
    "RuleResult",
    "Outcome",
    "RuleError",
    "MalformedValueError",
    "MissingRuleParameterError",
    "Required",
    "Numeric",
    "After",
    "Integer",
    "is_numeric",
    "is_integral",
]
