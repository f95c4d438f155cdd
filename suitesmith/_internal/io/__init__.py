# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""I/O utilities.

Private utilities for loading YAML and writing generated files.
Not part of the public API.
"""
