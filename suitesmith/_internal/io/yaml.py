# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""YAML utilities for suitesmith.

Provides basic YAML operations:
- load_yaml(): Load YAML with no processing
- expand_env_vars(): Recursively expand ${VAR} syntax
- deep_merge(): Deep merge two dictionaries

All implementations are thread-safe and do not mutate os.environ.
"""

import os
from pathlib import Path
from typing import Any

import yaml


def load_yaml(file_path: str | Path) -> dict[str, Any]:
    """Load YAML with no processing (for env var expansion, see expand_env_vars()).

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        yaml.YAMLError: If the YAML is invalid
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge with overlay taking precedence. Recursively merges nested dicts.

    Returns new dict without mutating inputs.
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables (supports ${VAR} and $VAR).

    Leaves undefined variables unchanged (e.g., "${UNDEFINED_VAR}" stays as-is).
    """
    if isinstance(data, str):
        return os.path.expandvars(data)
    elif isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    else:
        return data
