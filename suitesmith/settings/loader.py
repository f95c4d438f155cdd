# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Configuration loading and management for suitesmith."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import patch

from pydantic import ValidationError
from rich.console import Console

from .constants import ENV_LOG_LEVEL, ENV_PREFIX
from .schema import GeneratorConfig

console = Console(stderr=True)


def _is_path_field(key: str) -> bool:
    """Fields ending with _dir or _file are treated as paths."""
    return key.endswith(('_dir', '_file'))


def _resolve_cli_paths(cli_overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve relative paths in CLI overrides to CWD.

    CLI paths resolve relative to where you ran the command, unlike paths from
    the project file which resolve relative to the project directory.
    """
    result = {}
    cwd = Path.cwd()

    for key, value in cli_overrides.items():
        if _is_path_field(key) and value is not None and isinstance(value, (str, Path)):
            path = Path(value)
            result[key] = path if path.is_absolute() else (cwd / path).resolve()
        else:
            result[key] = value

    return result


def load_config(
    project_file: Optional[Path] = None,
    **cli_overrides
) -> GeneratorConfig:
    """Load configuration with hierarchical priority.

    Priority order (highest to lowest):
    1. CLI arguments (passed as kwargs)
    2. Environment variables (SUITESMITH_* prefix)
    3. Project config file (suitesmith.yaml)
    4. Built-in defaults

    SUITESMITH_LOG_LEVEL is accepted as shorthand for SUITESMITH_LOGGING__LEVEL.

    Args:
        project_file: Path to project config file (for non-standard locations)
        **cli_overrides: CLI argument overrides

    Returns:
        GeneratorConfig object
    """
    try:
        cli_overrides = _resolve_cli_paths(cli_overrides)

        if 'logging' not in cli_overrides and ENV_LOG_LEVEL in os.environ:
            cli_overrides['logging'] = {'level': os.environ[ENV_LOG_LEVEL]}

        if project_file:
            cli_overrides['project_file'] = Path(project_file)

        return GeneratorConfig(**cli_overrides)

    except ValidationError as e:
        console.print("[bold red]Configuration validation failed:[/bold red]")
        for error in e.errors():
            field = " → ".join(str(x) for x in error["loc"])
            console.print(f"  [red]{field}: {error['msg']}[/red]")
        raise


@lru_cache(maxsize=1)
def get_config() -> GeneratorConfig:
    """Get cached configuration instance."""
    return load_config()


def reset_config() -> None:
    """Reset the cached configuration (mainly for testing)."""
    get_config.cache_clear()


def get_default_config(**overrides) -> GeneratorConfig:
    """Get a configuration with only default values (no files or env vars)."""
    filtered_env = {
        k: v for k, v in os.environ.items()
        if not k.upper().startswith(ENV_PREFIX)
    }

    with patch.dict(os.environ, filtered_env, clear=True):
        overrides.setdefault('project_dir', Path.cwd())
        return load_config(project_file=Path(os.devnull), **overrides)
