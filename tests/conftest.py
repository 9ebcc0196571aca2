# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests (mocked AsyncSession)
- Integration tests (running PostgreSQL)
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from univadmin.core.config.repository import ConfigRepository
from univadmin.core.errors import ErrorCatalog


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires PostgreSQL)"
    )


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def error_config() -> dict[str, Any]:
    """Provide the error code catalog as loaded from errors.yaml."""
    return {
        "errors": {
            "connection_prefix": "1",
            "token_prefix": "1",
            "connection": {
                "not_connect_with_data": "1",
                "invalid_login_or_password": "2",
                "error_connect_to_db": "3",
                "empty_login_or_password": "4",
            },
            "token": {
                "update_token": "1",
                "remove_token": "2",
                "invalid_token": "3",
            },
        }
    }


@pytest.fixture
def error_catalog(error_config: dict[str, Any]) -> ErrorCatalog:
    """Provide an error catalog independent of the environment."""
    return ErrorCatalog(ConfigRepository(error_config))


# =============================================================================
# Database Fixtures
# =============================================================================


def make_result(rows: list[dict[str, Any]]) -> MagicMock:
    """Build a mock SQLAlchemy Result yielding ``rows`` as mappings."""
    result = MagicMock()
    result.mappings.return_value.all.return_value = rows
    result.mappings.return_value.__iter__.side_effect = lambda: iter(rows)
    return result


@pytest.fixture
def mock_db() -> AsyncMock:
    """Create mock database session."""
    db = AsyncMock()
    db.execute = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.fixture
def result_factory():
    """Provide the mock Result builder."""
    return make_result
