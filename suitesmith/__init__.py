# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
suitesmith: Test Suite Source Generator

Turns a declarative tree of test classes and test methods into the source of
a JUnit test suite, rewriting the file only when its content changes.

Quick Start:
    >>> from suitesmith import TestGenerator, SimpleTestClassModel, RunTestMethodModel
    >>> foo = SimpleTestClassModel(
    ...     name="Foo",
    ...     methods=[RunTestMethodModel("testA", "testData/foo/a.kt", data_string="a.kt")],
    ... )
    >>> generator = TestGenerator(
    ...     "generated", "org.example.tests", "FooTestGenerated",
    ...     "org.example.AbstractFooTest", [foo],
    ... )
    >>> generator.generate_and_save()
    True

From a manifest:
    >>> from suitesmith import load_manifest, generate_suites
    >>> generate_suites(load_manifest("suites.yaml"))
"""

__version__ = "0.1.0"

from .adapters import AggregateTestClassModel, RenamedTestClassModel, wrap_test_class_models
from .errors import (
    ConfigurationError,
    DuplicateOutputPathError,
    EmptySuiteError,
    GenerationError,
    ManifestError,
    PrinterStateError,
    SuitesmithError,
)
from .generator import BaseTestClass, TestGenerator
from .manifest import generate_suites, load_manifest
from .models import (
    AllFilesPresentMethodModel,
    MethodModel,
    RunTestMethodModel,
    SimpleTestClassModel,
    TestClassModel,
    TestEntityModel,
)
from .registry import (
    GeneratedFilesRegistry,
    get_generated_files_registry,
    reset_generated_files_registry,
)

__all__ = [
    "__version__",
    # Generation
    "TestGenerator",
    "BaseTestClass",
    "generate_suites",
    "load_manifest",
    # Models
    "MethodModel",
    "TestClassModel",
    "TestEntityModel",
    "RunTestMethodModel",
    "AllFilesPresentMethodModel",
    "SimpleTestClassModel",
    "RenamedTestClassModel",
    "AggregateTestClassModel",
    "wrap_test_class_models",
    # Registry
    "GeneratedFilesRegistry",
    "get_generated_files_registry",
    "reset_generated_files_registry",
    # Errors
    "SuitesmithError",
    "ConfigurationError",
    "DuplicateOutputPathError",
    "EmptySuiteError",
    "GenerationError",
    "PrinterStateError",
    "ManifestError",
]
