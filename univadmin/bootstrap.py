# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application startup and shutdown.

The hosting web layer calls startup() once before serving requests and
shutdown() when it stops:

    errors = await startup()
    try:
        async with get_session() as session:
            classrooms = ClassroomService(session, errors=errors)
            ...
    finally:
        await shutdown()
"""

from univadmin.core.config.repository import ConfigRepository
from univadmin.core.config.settings import Settings, get_settings
from univadmin.core.errors import ErrorCatalog, ErrorKind, get_error_catalog
from univadmin.infrastructure.database.connection import close_database, init_database
from univadmin.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def startup(settings: Settings | None = None) -> ErrorCatalog:
    """Configure logging, load the error catalog and open the database pool.

    The catalog is resolved eagerly so a broken ``errors.yaml`` fails the
    startup instead of the first invalid request.

    Services built without an explicit catalog use ``get_error_catalog()``,
    which follows the cached settings. When ``settings`` is given, its
    ``config_dir`` may differ from those, so pass the returned catalog to the
    services (``ClassroomService(db, errors=catalog)``).

    Args:
        settings: Settings to use (defaults to the cached settings).

    Returns:
        The validated error catalog.

    Raises:
        ConfigKeyError: If the error catalog lacks a catalogued code.
        YAMLLoadError: If the configuration directory cannot be loaded.
        DatabaseError: If the engine cannot be created.
    """
    if settings is None:
        settings = get_settings()
        catalog = get_error_catalog()
    else:
        catalog = ErrorCatalog(ConfigRepository.from_directory(settings.config_dir))

    setup_logging(settings)

    for kind in ErrorKind:
        catalog.code_for(kind)

    await init_database(settings)
    logger.info(
        "Application started",
        environment=settings.environment,
        config_dir=str(settings.config_dir),
    )
    return catalog


async def shutdown() -> None:
    """Close the database pool."""
    await close_database()
    logger.info("Application stopped")
