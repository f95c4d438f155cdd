# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations  # PEP 563: Postponed evaluation of annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING

# Type hints only - settings imported lazily inside methods
if TYPE_CHECKING:
    from suitesmith.settings import GeneratorConfig

logger = logging.getLogger(__name__)


@dataclass
class ApplicationContext:
    """CLI execution context with GeneratorConfig loading and CLI argument handling."""

    config_file: Path | None = None
    overrides: dict[str, Any] = field(default_factory=dict)

    config: "GeneratorConfig | None" = None

    @classmethod
    def from_cli_args(
        cls,
        config_file: Path | None,
        license_file: Path | None,
        log_level: str | None,
    ) -> "ApplicationContext":
        """Create context from CLI arguments, set up logging and load configuration."""
        from suitesmith._internal.logging import setup_logging

        context = cls(config_file=config_file)

        if license_file is not None:
            context.overrides["license_file"] = license_file
        if log_level is not None:
            context.overrides["logging"] = {"level": log_level}

        context.load_configuration()
        setup_logging(level=context.config.logging.level)
        logger.debug(f"CLI initialized with config_file={config_file}, log_level={log_level}")

        return context

    def load_configuration(self) -> None:
        from suitesmith.settings import load_config

        # Priority (CLI overrides > env > file > defaults) is handled by pydantic
        self.config = load_config(project_file=self.config_file, **self.overrides)

    def get_effective_config(self) -> "GeneratorConfig":
        if not self.config:
            self.load_configuration()
        return self.config
