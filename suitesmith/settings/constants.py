# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Configuration discovery constants.

Shared by the settings loader and the CLI so both agree on where project
configuration lives.
"""

ENV_PREFIX = "SUITESMITH_"
ENV_PROJECT_DIR = f"{ENV_PREFIX}PROJECT_DIR"
ENV_LOG_LEVEL = f"{ENV_PREFIX}LOG_LEVEL"

PROJECT_CONFIG_FILE = "suitesmith.yaml"

# Defaults matching the Kotlin compiler test infrastructure
DEFAULT_LICENSE_FILE = "license/LICENSE.txt"
DEFAULT_GENERATOR_NAME = "org.jetbrains.kotlin.generators.tests.TestsPackage"
DEFAULT_SOURCE_EXTENSION = "java"

LOG_LEVELS = ("error", "warning", "info", "debug")
