# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""suitesmith CLI commands.

Single source of truth for command registration, used by cli.py's LazyGroup.
"""

# Format: 'command_name': (relative_module, attribute_name)
_COMMAND_REGISTRY = {
    "generate": (".generate", "generate"),
    "config": (".config", "config"),
}

COMMAND_MAP = {
    name: (f"suitesmith.cli.commands{module}", attr)
    for name, (module, attr) in _COMMAND_REGISTRY.items()
}

__all__ = ["COMMAND_MAP"]
