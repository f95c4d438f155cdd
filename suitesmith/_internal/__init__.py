# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Internal utilities for suitesmith.

This package contains private implementation details that are not part of
the public API and may change without notice.

Subpackages:
- io: File writing and YAML loading utilities

Modules:
- logging: Logging configuration
"""
