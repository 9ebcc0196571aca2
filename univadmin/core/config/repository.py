# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Flat dotted-key lookup over the configuration catalogs.

The repository wraps the nested mappings loaded from the configuration
directory and resolves keys such as ``errors.token.invalid_token``: the first
segment names the catalog file, the remaining segments walk into it.

Example:
    >>> config = ConfigRepository({"errors": {"token": {"invalid_token": "3"}}})
    >>> config.get("errors.token.invalid_token")
    '3'
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from univadmin.core.config.settings import get_settings
from univadmin.core.config.yaml_loader import load_yaml_directory

_MISSING = object()


class ConfigKeyError(KeyError):
    """Raised when a required configuration key is absent."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Configuration key '{key}' is not defined")

    def __str__(self) -> str:
        return self.args[0]


class ConfigRepository:
    """Read-only dotted-key view over nested configuration mappings.

    Attributes:
        _items: Catalog name to catalog contents.
    """

    def __init__(self, items: Mapping[str, Any]) -> None:
        self._items = dict(items)

    @classmethod
    def from_directory(cls, path: Path) -> "ConfigRepository":
        """Build a repository from every YAML catalog in ``path``."""
        return cls(load_yaml_directory(path))

    def _lookup(self, key: str) -> Any:
        node: Any = self._items
        for segment in key.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return _MISSING
            node = node[segment]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at ``key`` or ``default`` when it is absent."""
        value = self._lookup(key)
        return default if value is _MISSING else value

    def require(self, key: str) -> Any:
        """Return the value at ``key``.

        Raises:
            ConfigKeyError: If the key is absent.
        """
        value = self._lookup(key)
        if value is _MISSING:
            raise ConfigKeyError(key)
        return value

    def has(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING


@lru_cache(maxsize=1)
def get_config() -> ConfigRepository:
    """Get the cached repository for the configured ``config_dir``."""
    return ConfigRepository.from_directory(get_settings().config_dir)


def clear_config_cache() -> None:
    get_config.cache_clear()
