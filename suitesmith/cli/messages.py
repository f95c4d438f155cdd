# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""User-facing messages and strings for CLI output."""

PACKAGE_NAME = "suitesmith"

DUPLICATE_OUTPUT_HINTS = [
    "Each suite must resolve to its own package and class name",
    "Check 'defaults' in the manifest for a package or name shared by several suites",
]

MANIFEST_HINTS = [
    "Every suite needs package, name, base_class and at least one class",
    "Run with --log-level debug for the full validation report",
]

LICENSE_HINTS = [
    "Set license_file in suitesmith.yaml or SUITESMITH_LICENSE_FILE",
    "Set license_file to null to generate sources without a header",
]
