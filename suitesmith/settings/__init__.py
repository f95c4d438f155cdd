# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""suitesmith configuration module.

Provides type-safe configuration management with Pydantic Settings.
"""

from .loader import get_config, get_default_config, load_config, reset_config
from .schema import FrameworkConfig, GeneratorConfig, LoggingConfig

__all__ = [
    "GeneratorConfig",
    "FrameworkConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
    "get_default_config",
]
