# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""suitesmith configuration schema using Pydantic.

Configuration Priority
----------------------
Settings are loaded from multiple sources with the following priority (highest to lowest):
1. Keyword arguments (CLI overrides passed to GeneratorConfig)
2. Environment variables (SUITESMITH_* prefix, ``__`` for nesting)
3. Project config file (suitesmith.yaml)
4. Built-in defaults

Path Resolution
---------------
Absolute paths are used as-is. Relative paths resolve against the project
directory: the directory holding suitesmith.yaml, SUITESMITH_PROJECT_DIR, or
the current working directory when neither exists.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from suitesmith._internal.io.yaml import expand_env_vars
from .constants import (
    DEFAULT_GENERATOR_NAME,
    DEFAULT_LICENSE_FILE,
    DEFAULT_SOURCE_EXTENSION,
    ENV_PREFIX,
    ENV_PROJECT_DIR,
    LOG_LEVELS,
    PROJECT_CONFIG_FILE,
)

logger = logging.getLogger(__name__)


def _find_project_config() -> Path | None:
    """Find project configuration file with upward directory walk.

    Search order:
    1. If SUITESMITH_PROJECT_DIR is set, check that directory only
    2. Otherwise, walk up from CWD to find suitesmith.yaml

    Returns:
        Path to config file, or None if not found
    """
    if project_dir_override := os.environ.get(ENV_PROJECT_DIR):
        candidate = Path(project_dir_override).resolve() / PROJECT_CONFIG_FILE
        return candidate if candidate.exists() else None

    current = Path.cwd().resolve()
    while current != current.parent:
        candidate = current / PROJECT_CONFIG_FILE
        if candidate.exists():
            return candidate
        current = current.parent

    return None


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Settings source for the project YAML file.

    Also reports the directory the file was found in as ``project_dir`` so
    relative paths from the file resolve next to it.
    """

    def __init__(self, settings_cls: type[BaseSettings], project_file: Path | None = None):
        super().__init__(settings_cls)
        self.project_file_used: Path | None = None

        if project_file is not None:
            if Path(project_file).exists():
                self.project_file_used = Path(project_file)
        else:
            self.project_file_used = _find_project_config()

        self._data = self._load_yaml_file()

    def _load_yaml_file(self) -> dict[str, Any]:
        """Load the project file, if any.

        Raises:
            yaml.YAMLError: If the config file has syntax errors
        """
        if self.project_file_used is None:
            return {}

        try:
            with open(self.project_file_used, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            if hasattr(e, "problem_mark"):
                mark = e.problem_mark
                location = f"line {mark.line + 1}, column {mark.column + 1}"
            else:
                location = "unknown location"

            raise yaml.YAMLError(
                f"\n\nInvalid YAML in config file: {self.project_file_used}\n"
                f"Error at {location}: {getattr(e, 'problem', None) or str(e)}\n\n"
                f"Fix the syntax error and try again."
            ) from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {self.project_file_used} must contain a mapping")

        logger.debug(f"Loaded project config from {self.project_file_used}")
        return expand_env_vars(data)

    def get_field_value(self, field_name: str, field_info: Any) -> tuple[Any, str, bool]:
        """Get field value from YAML source."""
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from the YAML file."""
        data = self._data.copy()
        if self.project_file_used is not None:
            data.setdefault("project_dir", self.project_file_used.parent.resolve())
        return data


class FrameworkConfig(BaseModel):
    """Fully qualified names of the test framework types generated suites import."""

    test_data_path: str = Field(
        default="com.intellij.testFramework.TestDataPath",
        description="Class-level test data path annotation",
    )
    runner: str = Field(
        default="org.jetbrains.kotlin.test.JUnit3RunnerWithInners",
        description="JUnit runner that also runs inner classes",
    )
    test_utils: str = Field(
        default="org.jetbrains.kotlin.test.KotlinTestUtils",
        description="Test utility class used by generated method bodies",
    )
    target_backend: str = Field(
        default="org.jetbrains.kotlin.test.TargetBackend",
        description="Backend target enum",
    )
    test_metadata: str = Field(
        default="org.jetbrains.kotlin.test.TestMetadata",
        description="Per-entity metadata annotation",
    )
    run_with: str = Field(
        default="org.junit.runner.RunWith",
        description="JUnit run-with annotation",
    )

    model_config = ConfigDict(extra="forbid")

    @staticmethod
    def simple_name(qualified_name: str) -> str:
        """Last segment of a dotted name."""
        return qualified_name.rsplit(".", 1)[-1]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="warning", description="Console verbosity level: error | warning | info | debug"
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return value


class GeneratorConfig(BaseSettings):
    """Configuration schema with hierarchical priority.

    Priority order (highest to lowest):
    1. Keyword arguments (CLI overrides)
    2. Environment variables (SUITESMITH_* prefix)
    3. Project config (suitesmith.yaml)
    4. Built-in defaults
    """

    project_file: Path | None = Field(
        default=None, description="Explicit project config file (skips discovery)", exclude=True
    )
    project_dir: Path | None = Field(
        default=None, description="Base for relative paths (auto-detected when unset)"
    )
    license_file: Path | None = Field(
        default=Path(DEFAULT_LICENSE_FILE),
        description="File whose text opens every generated source (None disables the header)",
    )
    generator_name: str = Field(
        default=DEFAULT_GENERATOR_NAME,
        description="Name referenced by the 'generated by' comment",
    )
    source_extension: str = Field(
        default=DEFAULT_SOURCE_EXTENSION, description="Extension of generated source files"
    )
    framework: FrameworkConfig = Field(
        default_factory=FrameworkConfig, description="Test framework type names"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        validate_assignment=True,
        extra="forbid",
        case_sensitive=False,
        env_file=None,  # Config files are handled by YamlSettingsSource
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources (first source wins)."""
        project_file = init_settings().get("project_file")

        return (
            init_settings,
            env_settings,
            YamlSettingsSource(settings_cls, project_file=project_file),
        )

    @field_validator("source_extension")
    @classmethod
    def _strip_extension_dot(cls, value: str) -> str:
        value = value.lstrip(".")
        if not value:
            raise ValueError("source extension must not be empty")
        return value

    def model_post_init(self, __context: Any) -> None:
        """Resolve all paths to absolute."""
        if self.project_dir is None:
            self.project_dir = Path.cwd().resolve()
        else:
            self.project_dir = Path(self.project_dir).resolve()

        if self.license_file is not None:
            self.license_file = self._resolve(self.license_file, self.project_dir)

    @staticmethod
    def _resolve(path: Path, base: Path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else (base / path).resolve()

    def read_license_header(self) -> str | None:
        """Read the license header text, or None when disabled.

        Raises:
            OSError: If the license file cannot be read
        """
        if self.license_file is None:
            return None
        return self.license_file.read_text(encoding="utf-8")
