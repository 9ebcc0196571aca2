# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure for the PostgreSQL stored-procedure backend.

Example:
    from univadmin.infrastructure.database import get_session, call_procedure, fetch_all

    async with get_session() as session:
        rows = fetch_all(await call_procedure(session, "get_all_housing"))
"""

from univadmin.infrastructure.database.connection import (
    DatabaseError,
    check_database_connection,
    close_database,
    get_engine,
    get_session,
    get_sessionmaker,
    init_database,
)
from univadmin.infrastructure.database.procedures import (
    as_integer,
    call_procedure,
    fetch_all,
    iter_rows,
    procedure_call,
)

__all__ = [
    # Connection lifecycle
    "DatabaseError",
    "check_database_connection",
    "close_database",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_database",
    # Stored procedures
    "as_integer",
    "call_procedure",
    "fetch_all",
    "iter_rows",
    "procedure_call",
]
