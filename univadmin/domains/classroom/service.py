# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Classroom service for buildings and classrooms.

This module provides the ClassroomService that handles:
- Building and classroom listings
- Classroom lookup by building
- Adding and deleting classrooms and buildings
- Translating between classroom ids and (building, classroom) numbers

Every operation is one stored-procedure call. Add/delete procedures answer
with a status row chosen by the database ("record added", "record already
exists", ...), which is returned as an ordinary result.

Example:
    >>> service = ClassroomService(db_session)
    >>> classrooms = await service.get_all_classrooms_in_building("3")
    >>> status = await service.add_classroom(3, 101)
"""

import logging
from typing import Any, TypedDict

from sqlalchemy.ext.asyncio import AsyncSession

from univadmin.core.errors import (
    ErrorCatalog,
    ErrorKind,
    InvalidInputError,
    get_error_catalog,
)
from univadmin.core.validation import Validator
from univadmin.infrastructure.database.procedures import (
    as_integer,
    call_procedure,
    fetch_all,
    iter_rows,
)

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class ClassroomLocation(TypedDict):
    """Building and classroom numbers of one classroom."""

    buildingNumber: Any
    classNumber: Any


class ClassroomService:
    """Data access for buildings and classrooms.

    Attributes:
        _db: Async database session.
        _errors: Error catalog used to build client error codes.
        _validator: Validator for request parameters.

    Example:
        >>> service = ClassroomService(db)
        >>> await service.delete_classroom(3, 101)
        [{'delete_classroom': 'Record deleted'}]
    """

    def __init__(
        self,
        db: AsyncSession,
        errors: ErrorCatalog | None = None,
        validator: Validator | None = None,
    ) -> None:
        """Initialize the classroom service.

        Args:
            db: Async database session.
            errors: Error catalog (defaults to the configured one).
            validator: Validator (defaults to one with the built-in rules).
        """
        self._db = db
        self._errors = errors or get_error_catalog()
        self._validator = validator or Validator()

    async def get_all_buildings(self) -> list[Row]:
        """List all buildings."""
        result = await call_procedure(self._db, "get_all_housing")
        return fetch_all(result)

    async def get_all_classrooms(self) -> list[Row]:
        """List all classrooms."""
        result = await call_procedure(self._db, "get_all_classes")
        return fetch_all(result)

    async def get_all_classrooms_in_building(self, building_number: Any) -> list[Row]:
        """List the classrooms of one building.

        Args:
            building_number: Building number as received from the request.

        Returns:
            Classroom rows, unmodified.

        Raises:
            InvalidInputError: If the building number is missing or not a
                whole number. Raised before any query is issued; its code is the
                catalogued invalid-token code.
        """
        validation = self._validator.validate(
            {"num_building": building_number},
            {"num_building": "required|integer"},
        )
        if validation.fails():
            raise self._errors.error(
                ErrorKind.INVALID_TOKEN,
                message="Invalid building number",
                details={"errors": validation.errors},
                error_class=InvalidInputError,
            )

        result = await call_procedure(
            self._db, "get_all_classes_in_building", as_integer(building_number)
        )
        return fetch_all(result)

    async def add_classroom(self, building_number: Any, class_number: Any) -> list[Row]:
        """Add a classroom to a building.

        Returns:
            The status row chosen by the database.
        """
        result = await call_procedure(
            self._db,
            "add_classroom",
            as_integer(building_number),
            as_integer(class_number),
        )
        rows = fetch_all(result)
        await self._db.commit()

        logger.info("add_classroom executed: building=%s class=%s", building_number, class_number)
        return rows

    async def delete_building(self, building_number: Any) -> list[Row]:
        """Delete a building.

        Returns:
            The status row chosen by the database.
        """
        result = await call_procedure(self._db, "delete_building", as_integer(building_number))
        rows = fetch_all(result)
        await self._db.commit()

        logger.info("delete_building executed: building=%s", building_number)
        return rows

    async def delete_classroom(self, building_number: Any, class_number: Any) -> list[Row]:
        """Delete one classroom of a building.

        Returns:
            The status row chosen by the database.
        """
        result = await call_procedure(
            self._db,
            "delete_classroom",
            as_integer(building_number),
            as_integer(class_number),
        )
        rows = fetch_all(result)
        await self._db.commit()

        logger.info("delete_classroom executed: building=%s class=%s", building_number, class_number)
        return rows

    async def get_building_and_class_by_id(self, classroom_id: Any) -> list[ClassroomLocation]:
        """Resolve a classroom id to its building and classroom numbers.

        Returns:
            One location per result row, in result order.
        """
        result = await call_procedure(
            self._db, "get_num_building_and_class_by_ID", as_integer(classroom_id)
        )
        locations: list[ClassroomLocation] = []
        for row in iter_rows(result):
            locations.append(
                ClassroomLocation(
                    buildingNumber=row["num_building"],
                    classNumber=row["num_class"],
                )
            )
        return locations

    async def get_classroom_id(self, building_number: Any, classroom_number: Any) -> list[Row]:
        """Look up the id of a classroom by building and classroom numbers."""
        result = await call_procedure(
            self._db,
            "get_id_classroom",
            as_integer(building_number),
            as_integer(classroom_number),
        )
        return fetch_all(result)
