# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Error handling for suitesmith.

Library code raises these; the CLI translates them into ``CLIError``
instances at the command boundary. I/O errors are never wrapped.
"""

from pathlib import Path


class SuitesmithError(Exception):
    """Base exception for all suitesmith errors."""
    pass


class ConfigurationError(SuitesmithError):
    """Error in how generators were configured or invoked."""
    pass


class DuplicateOutputPathError(ConfigurationError):
    """Same output file targeted twice within one generation run."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Same test file already generated in current session: {self.path}")


class EmptySuiteError(ConfigurationError):
    """No test class models were supplied for a suite."""
    pass


class GenerationError(SuitesmithError):
    """Error during code generation."""
    pass


class PrinterStateError(GenerationError):
    """Printer used inconsistently (e.g. unbalanced indentation)."""
    pass


class ManifestError(SuitesmithError):
    """Error loading or validating a suite manifest."""
    pass
