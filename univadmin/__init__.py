# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""University administration backend.

Data-access layer over PostgreSQL stored procedures for buildings,
classrooms and teacher positions.
"""

__version__ = "0.1.0"
