# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Position service for teacher positions (job titles).

Example:
    >>> service = PositionService(db_session)
    >>> await service.add_position("Associate professor")
    >>> positions = await service.get_all_teacher_positions()
"""

import logging
from typing import Any, TypedDict

from sqlalchemy.ext.asyncio import AsyncSession

from univadmin.infrastructure.database.procedures import (
    as_integer,
    call_procedure,
    fetch_all,
    iter_rows,
)

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class TeacherPosition(TypedDict):
    teacherPosition: str


class PositionService:
    """Data access for teacher positions.

    Attributes:
        _db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def add_position(self, name: str) -> list[Row]:
        """Add a teacher position.

        Returns:
            The status row chosen by the database ("record added" or
            "record already exists").
        """
        result = await call_procedure(self._db, "add_position", name)
        rows = fetch_all(result)
        await self._db.commit()

        logger.info("add_position executed: %s", name)
        return rows

    async def delete_teacher_position(self, name: str) -> list[Row]:
        """Delete a teacher position by name.

        Returns:
            The status row chosen by the database.
        """
        result = await call_procedure(self._db, "delete_teacher_position", name)
        rows = fetch_all(result)
        await self._db.commit()

        logger.info("delete_teacher_position executed: %s", name)
        return rows

    async def get_position_by_id(self, position_id: Any) -> list[Row]:
        """Look up a position by id; the id is bound as an integer."""
        result = await call_procedure(self._db, "get_position_by_id", as_integer(position_id))
        return fetch_all(result)

    async def get_all_teacher_positions(self) -> list[TeacherPosition]:
        """List all teacher positions, one mapping per row in result order."""
        result = await call_procedure(self._db, "get_all_teacher_positions")
        return [
            TeacherPosition(teacherPosition=row["teachers_positions"])
            for row in iter_rows(result)
        ]
