# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured application errors and the error-code catalog.

Clients of this backend interpret failures through short numeric codes
(``"13"``) looked up in a fixed table. A code is the group prefix followed by
the per-error code, both read from the ``errors`` configuration catalog:

    errors.token_prefix + errors.token.invalid_token -> "1" + "3" -> "13"

This module defines:
- ErrorKind: Machine-readable identifiers for every catalogued error
- ApplicationError: Base exception carrying kind, code and message
- InvalidInputError: Raised when request parameters fail validation
- ErrorCatalog: Resolves an ErrorKind to its client code

Example:
    >>> catalog = ErrorCatalog(get_config())
    >>> raise catalog.error(ErrorKind.INVALID_TOKEN)
"""

from enum import Enum
from functools import lru_cache
from typing import Any

from univadmin.core.config.repository import ConfigRepository, get_config

ERRORS_NAMESPACE = "errors"


class ErrorKind(str, Enum):
    """Catalogued error identifiers, written as ``<group>.<name>``."""

    NOT_CONNECT_WITH_DATA = "connection.not_connect_with_data"
    INVALID_LOGIN_OR_PASSWORD = "connection.invalid_login_or_password"
    ERROR_CONNECT_TO_DB = "connection.error_connect_to_db"
    EMPTY_LOGIN_OR_PASSWORD = "connection.empty_login_or_password"
    UPDATE_TOKEN = "token.update_token"
    REMOVE_TOKEN = "token.remove_token"
    INVALID_TOKEN = "token.invalid_token"

    @property
    def group(self) -> str:
        return self.value.split(".", 1)[0]


class ApplicationError(Exception):
    """Base exception for errors reported to clients by code.

    Attributes:
        kind: Machine-readable error identifier.
        code: Opaque client-facing code (e.g. ``"13"``).
        message: Human-readable error description.
        details: Additional error context.
    """

    def __init__(
        self,
        kind: ErrorKind,
        code: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        self.code = code
        self.message = message or kind.value.replace("_", " ").replace(".", ": ")
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidInputError(ApplicationError):
    """Raised when request parameters fail validation.

    ``details["errors"]`` maps each failing field to its messages.
    """

    pass


class ErrorCatalog:
    """Resolves error kinds to client codes from the ``errors`` catalog.

    Attributes:
        _config: Configuration repository holding the ``errors`` catalog.
    """

    def __init__(self, config: ConfigRepository) -> None:
        self._config = config

    def code_for(self, kind: ErrorKind) -> str:
        """Build the client code for ``kind``.

        Raises:
            ConfigKeyError: If the prefix or the code is not catalogued.
        """
        prefix = self._config.require(f"{ERRORS_NAMESPACE}.{kind.group}_prefix")
        code = self._config.require(f"{ERRORS_NAMESPACE}.{kind.value}")
        return f"{prefix}{code}"

    def error(
        self,
        kind: ErrorKind,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        error_class: type[ApplicationError] = ApplicationError,
    ) -> ApplicationError:
        """Build (not raise) an error of ``error_class`` for ``kind``."""
        return error_class(kind, self.code_for(kind), message, details)


@lru_cache(maxsize=1)
def get_error_catalog() -> ErrorCatalog:
    """Get the catalog backed by the cached configuration repository."""
    return ErrorCatalog(get_config())


def clear_error_catalog_cache() -> None:
    get_error_catalog.cache_clear()
