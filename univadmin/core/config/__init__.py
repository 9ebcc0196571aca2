# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package.

- Settings: Pydantic-based settings loaded from environment variables
- ConfigRepository: Dotted-key lookup over the YAML catalogs
- YAML loader: Loading of the catalog files

Example:
    >>> from univadmin.core.config import get_config
    >>> get_config().get("errors.token_prefix")
    '1'
"""

from univadmin.core.config.repository import (
    ConfigKeyError,
    ConfigRepository,
    clear_config_cache,
    get_config,
)
from univadmin.core.config.settings import (
    DatabaseSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from univadmin.core.config.yaml_loader import (
    YAMLLoadError,
    load_yaml,
    load_yaml_directory,
)

__all__ = [
    # Settings
    "Settings",
    "DatabaseSettings",
    "get_settings",
    "clear_settings_cache",
    # Catalog lookup
    "ConfigRepository",
    "ConfigKeyError",
    "get_config",
    "clear_config_cache",
    # YAML utilities
    "load_yaml",
    "load_yaml_directory",
    "YAMLLoadError",
]
