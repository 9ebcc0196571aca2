# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Classroom domain package.

This package provides building and classroom data access:
- Listings of buildings and classrooms
- Classroom lookup by building (validated)
- Adding and deleting classrooms and buildings
- Id / number translation
"""

from univadmin.domains.classroom.service import ClassroomLocation, ClassroomService

__all__ = [
    "ClassroomService",
    "ClassroomLocation",
]
