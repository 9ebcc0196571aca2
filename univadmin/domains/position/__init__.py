# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher position domain package."""

from univadmin.domains.position.service import PositionService, TeacherPosition

__all__ = [
    "PositionService",
    "TeacherPosition",
]
