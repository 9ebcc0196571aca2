# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Stored-procedure calls and result decoding.

All business rules live in PostgreSQL functions. A data-access operation is
always a single ``SELECT * FROM "<procedure>"(...)`` statement whose
arguments are bound parameters; values never become part of the SQL text.

Example:
    >>> stmt = procedure_call("add_classroom", 3, 101)
    >>> stmt.text
    'SELECT * FROM "add_classroom"(:arg0, :arg1)'
    >>> rows = fetch_all(await session.execute(stmt))
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Iterator

from sqlalchemy import Result, TextClause, text
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

PROCEDURE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def procedure_call(name: str, *args: Any) -> TextClause:
    """Build the statement calling procedure ``name`` with ``args``.

    The name is always double-quoted so mixed-case procedures
    (``get_num_building_and_class_by_ID``) resolve exactly.

    Raises:
        ValueError: If ``name`` is not a plain SQL identifier.
    """
    if not PROCEDURE_NAME_PATTERN.match(name):
        raise ValueError(f"Invalid stored procedure name: {name!r}")

    binds = {f"arg{index}": value for index, value in enumerate(args)}
    placeholders = ", ".join(f":{key}" for key in binds)
    stmt = text(f'SELECT * FROM "{name}"({placeholders})')
    if binds:
        stmt = stmt.bindparams(**binds)
    return stmt


async def call_procedure(db: AsyncSession, name: str, *args: Any) -> Result[Any]:
    """Execute one stored-procedure call on ``db``.

    Driver and connection errors are not handled here.
    """
    logger.debug("Calling stored procedure %s with %d argument(s)", name, len(args))
    return await db.execute(procedure_call(name, *args))


def fetch_all(result: Result[Any]) -> list[dict[str, Any]]:
    """Decode every row into a column-name mapping. Empty results give []."""
    return [dict(row) for row in result.mappings().all()]


def iter_rows(result: Result[Any]) -> Iterator[dict[str, Any]]:
    """Yield rows one at a time as column-name mappings."""
    for row in result.mappings():
        yield dict(row)


def as_integer(value: Any) -> int:
    """Coerce an identifier argument to int.

    Accepts ints, integral decimals/floats and numeric strings such as
    ``"12"`` or ``" 12.0 "``.

    Raises:
        ValueError: If the value is not an integral number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer, got {value!r}")
    if isinstance(value, int):
        return value

    try:
        number = Decimal(value.strip() if isinstance(value, str) else str(value))
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Expected an integer, got {value!r}") from e

    if not number.is_finite() or number != number.to_integral_value():
        raise ValueError(f"Expected an integer, got {value!r}")

    return int(number)
