# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""suitesmith command-line interface.

Commands:
  generate   Generate suites listed in a manifest
  config     Inspect the effective configuration

Architecture:
- Commands are registered in commands/__init__.py and loaded lazily
- Configuration managed through ApplicationContext (context.py)
- Commands receive the context via @click.pass_obj

Entry point defined in setup.py.
"""

from .cli import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
