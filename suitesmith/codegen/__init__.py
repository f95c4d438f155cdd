# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Code generation utilities for test suite sources.

This module provides the indentation-aware Printer that every piece of
generated source text flows through, plus escaping for values spliced into
Java string literals.
"""

from suitesmith.codegen.literals import escape_string_characters, file_path_literal
from suitesmith.codegen.printer import Printer

__all__ = ["Printer", "escape_string_characters", "file_path_literal"]
