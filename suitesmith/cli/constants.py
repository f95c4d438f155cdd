# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from enum import IntEnum

CLI_NAME = "suitesmith"


class ExitCode(IntEnum):
    """Process exit codes (BSD sysexits.h where one fits)."""
    SUCCESS = 0
    USAGE = 64
    DATAERR = 65
    SOFTWARE = 70
    IOERR = 74
    CONFIG = 78
    INTERRUPTED = 130  # Standard SIGINT exit code
