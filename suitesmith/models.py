# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Test entity models consumed by the test generator.

The generator only depends on the two protocols defined here:

    - MethodModel: a single generated test method
    - TestClassModel: a (possibly nested) generated test class

Upstream collaborators (test data discovery, manifests) construct the model
tree; the generator walks it read-only. The plain variants at the bottom of
this module cover the common shapes:

    - RunTestMethodModel: ``runTest("<file>")`` against one test data file
    - AllFilesPresentMethodModel: asserts every test data file has a test
    - SimpleTestClassModel: immutable class node with methods and children

Example:
    >>> cls = SimpleTestClassModel(
    ...     name="Foo",
    ...     methods=(RunTestMethodModel("testA", "testData/foo/a.kt", data_string="a.kt"),),
    ...     data_string="testData/foo",
    ... )
    >>> cls.is_empty()
    False
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Sequence, runtime_checkable

from suitesmith.codegen.literals import escape_string_characters, file_path_literal

if TYPE_CHECKING:
    from suitesmith.codegen import Printer


@runtime_checkable
class TestEntityModel(Protocol):
    """Anything that can carry a ``@TestMetadata`` annotation."""

    @property
    def data_string(self) -> Optional[str]:
        """Test data location backing this entity, or None for no annotation."""
        ...


@runtime_checkable
class MethodModel(TestEntityModel, Protocol):
    """Generated test method.

    Required members:
    - name
    - data_string
    - should_be_generated() → bool
    - generate_signature(printer)
    - generate_body(printer)
    """

    @property
    def name(self) -> str:
        ...

    def should_be_generated(self) -> bool:
        """False to skip the method entirely."""
        ...

    def generate_signature(self, printer: "Printer") -> None:
        """Start a new line with the method signature, leaving it open."""
        ...

    def generate_body(self, printer: "Printer") -> None:
        """Emit complete body lines at the printer's current indentation."""
        ...


@runtime_checkable
class TestClassModel(TestEntityModel, Protocol):
    """Generated test class; inner classes form a finite, acyclic tree."""

    @property
    def name(self) -> str:
        ...

    @property
    def methods(self) -> Sequence[MethodModel]:
        ...

    @property
    def inner_test_classes(self) -> Sequence["TestClassModel"]:
        ...

    @property
    def data_path_root(self) -> Optional[str]:
        """Root for ``@TestDataPath``, or None for no annotation."""
        ...

    def is_empty(self) -> bool:
        """True if nothing in this subtree would be emitted."""
        ...


# ============================================================================
# Plain model variants
# ============================================================================

@dataclass(frozen=True)
class RunTestMethodModel:
    """Test method delegating to ``runTest`` on a single test data file."""
    name: str
    test_data_file: str
    data_string: Optional[str] = None
    skip: bool = False

    def should_be_generated(self) -> bool:
        return not self.skip

    def generate_signature(self, printer: "Printer") -> None:
        printer.print("public void ", self.name, "() throws Exception")

    def generate_body(self, printer: "Printer") -> None:
        printer.println('runTest("', file_path_literal(self.test_data_file), '");')


@dataclass(frozen=True)
class AllFilesPresentMethodModel:
    """Test method checking that every matching test data file is covered.

    The emitted body relies on the ``File``, ``Pattern`` and ``TargetBackend``
    imports every generated suite carries. Directory and pattern are escaped
    as Java string literals; the directory uses forward slashes.
    """
    class_name: str
    test_data_dir: str
    file_pattern: str
    target_backend: str = "ANY"
    recursive: bool = True
    utils_class: str = "KotlinTestUtils"

    @property
    def name(self) -> str:
        return f"testAllFilesPresentIn{self.class_name}"

    @property
    def data_string(self) -> Optional[str]:
        return None

    def should_be_generated(self) -> bool:
        return True

    def generate_signature(self, printer: "Printer") -> None:
        printer.print("public void ", self.name, "() throws Exception")

    def generate_body(self, printer: "Printer") -> None:
        printer.println(
            self.utils_class, ".assertAllTestsPresentByMetadata(this.getClass(), ",
            'new File("', file_path_literal(self.test_data_dir), '"), ',
            'Pattern.compile("', escape_string_characters(self.file_pattern), '"), ',
            "TargetBackend.", self.target_backend, ", ",
            "true" if self.recursive else "false", ");",
        )


@dataclass(frozen=True)
class SimpleTestClassModel:
    """Immutable test class node.

    A class is empty when none of its methods would be generated and all of
    its inner classes are empty themselves.
    """
    name: str
    methods: tuple[MethodModel, ...] = ()
    inner_test_classes: tuple[TestClassModel, ...] = ()
    data_string: Optional[str] = None
    data_path_root: Optional[str] = None

    def __post_init__(self):
        # Accept any sequence, store tuples so instances stay hashable
        object.__setattr__(self, "methods", tuple(self.methods))
        object.__setattr__(self, "inner_test_classes", tuple(self.inner_test_classes))

    def is_empty(self) -> bool:
        if any(method.should_be_generated() for method in self.methods):
            return False
        return all(inner.is_empty() for inner in self.inner_test_classes)
