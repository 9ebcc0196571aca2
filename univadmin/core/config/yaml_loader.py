# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML loading for the configuration catalogs.

Catalogs are plain mappings stored one per file in the configuration
directory (``errors.yaml`` and friends). A directory is loaded into a single
mapping keyed by file stem, so ``errors.yaml`` becomes the ``errors`` key.

Example:
    >>> from pathlib import Path
    >>> from univadmin.core.config.yaml_loader import load_yaml_directory
    >>> catalogs = load_yaml_directory(Path("univadmin/config"))
    >>> catalogs["errors"]["token_prefix"]
    '1'
"""

from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


class YAMLLoadError(Exception):
    """Raised when a catalog file cannot be loaded or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load YAML file '{path}': {reason}")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load one YAML catalog file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed mapping. Empty (or comment-only) files yield an empty dict.

    Raises:
        YAMLLoadError: If the file is missing, unreadable, not valid YAML,
            or its root is not a mapping.
    """
    if not path.is_file():
        reason = "Path is not a file" if path.exists() else "File does not exist"
        raise YAMLLoadError(path, reason)

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise YAMLLoadError(path, f"Cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise YAMLLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, dict):
        raise YAMLLoadError(
            path, f"YAML root must be a mapping, got {type(parsed).__name__}"
        )

    return parsed


def load_yaml_directory(path: Path) -> dict[str, dict[str, Any]]:
    """Load every YAML catalog in a directory, keyed by file stem.

    Args:
        path: Directory containing ``.yaml`` / ``.yml`` files.

    Returns:
        Mapping of file stem to parsed contents, in sorted file order.

    Raises:
        YAMLLoadError: If the path is not a directory or any file fails.
    """
    if not path.is_dir():
        reason = "Path is not a directory" if path.exists() else "Directory does not exist"
        raise YAMLLoadError(path, reason)

    catalogs: dict[str, dict[str, Any]] = {}
    for candidate in sorted(path.iterdir()):
        if candidate.suffix in YAML_SUFFIXES and candidate.is_file():
            catalogs[candidate.stem] = load_yaml(candidate)

    return catalogs
