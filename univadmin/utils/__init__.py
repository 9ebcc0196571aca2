# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cross-cutting utilities.

- logging: Structured logging with structlog
- datetime: Date parsing for validation rules
"""

from univadmin.utils.datetime import ensure_utc, is_valid_date, parse_date, utc_now
from univadmin.utils.logging import get_logger, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    # Datetime
    "utc_now",
    "ensure_utc",
    "parse_date",
    "is_valid_date",
]
