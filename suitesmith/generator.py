# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Test suite source generator.

Turns a collection of test class models into one JUnit source file: a single
model becomes the suite class itself, several models become static inner
classes of the suite class. The file is only rewritten when its content
changes, and each output path may be claimed by one generator per run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from suitesmith._internal.io.files import content_changed, write_file_if_content_changed
from suitesmith.adapters import wrap_test_class_models
from suitesmith.codegen import Printer
from suitesmith.errors import EmptySuiteError
from suitesmith.models import MethodModel, TestClassModel, TestEntityModel
from suitesmith.registry import GeneratedFilesRegistry, get_generated_files_registry
from suitesmith.settings import GeneratorConfig, get_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaseTestClass:
    """Class every generated test class extends."""
    package: str
    simple_name: str

    @classmethod
    def parse(cls, qualified_name: str) -> "BaseTestClass":
        """Split ``org.example.AbstractFooTest`` into package and simple name."""
        package, _, simple_name = qualified_name.rpartition(".")
        return cls(package=package, simple_name=simple_name)

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.simple_name}" if self.package else self.simple_name


class TestGenerator:
    """Generator for one test suite source file.

    Construction claims the output path in the registry, so misconfigured
    builds fail before any text is generated. ``generate_and_save()`` does
    the actual work.
    """

    __test__ = False  # Not a pytest test class

    def __init__(
        self,
        base_dir: str | Path,
        suite_class_package: str,
        suite_class_name: str,
        base_test_class: BaseTestClass | str,
        test_class_models: Iterable[TestClassModel],
        *,
        registry: Optional[GeneratedFilesRegistry] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Initialize TestGenerator.

        Args:
            base_dir: Root directory of generated sources
            suite_class_package: Package of the suite class
            suite_class_name: Simple name of the suite class
            base_test_class: Base class (or its dotted name) for every generated class
            test_class_models: Models to generate, in emission order
            registry: Output registry shared by one run (process default if None)
            config: Generator configuration (cached global config if None)

        Raises:
            EmptySuiteError: If no models were supplied
            DuplicateOutputPathError: If the output path was already claimed
        """
        if isinstance(base_test_class, str):
            base_test_class = BaseTestClass.parse(base_test_class)

        self.config = config if config is not None else get_config()
        self.suite_class_package = suite_class_package
        self.suite_class_name = suite_class_name
        self.base_test_class = base_test_class
        self.test_class_models = list(test_class_models)

        if not self.test_class_models:
            raise EmptySuiteError(
                f"No test class models supplied for suite "
                f"'{suite_class_package}.{suite_class_name}'"
            )

        self.test_source_file_path = (
            Path(base_dir).absolute()
            / Path(*suite_class_package.split("."))
            / f"{suite_class_name}.{self.config.source_extension}"
        )

        self.registry = registry if registry is not None else get_generated_files_registry()
        self.registry.register(self.test_source_file_path)

    def generate(self) -> str:
        """Generate the full source text of the suite.

        Raises:
            OSError: If the license header cannot be read
        """
        framework = self.config.framework
        p = Printer()

        license_header = self.config.read_license_header()
        if license_header is not None:
            p.println(license_header)
        p.println("package ", self.suite_class_package, ";")
        p.println()
        p.println("import ", framework.test_data_path, ";")
        p.println("import ", framework.runner, ";")
        p.println("import ", framework.test_utils, ";")
        p.println("import ", framework.target_backend, ";")
        if self.suite_class_package != self.base_test_class.package:
            p.println("import ", self.base_test_class.qualified_name, ";")
        p.println("import ", framework.test_metadata, ";")
        p.println("import ", framework.run_with, ";")
        p.println()
        p.println("import java.io.File;")
        p.println("import java.util.regex.Pattern;")
        p.println()
        p.println(
            "/** This class is generated by {@link ", self.config.generator_name,
            "}. DO NOT MODIFY MANUALLY */"
        )
        p.println('@SuppressWarnings("all")')

        model = wrap_test_class_models(self.suite_class_name, self.test_class_models)
        self._generate_test_class(p, model, is_static=False, is_inner=False)

        return p.getvalue()

    def generate_and_save(self, dry_run: bool = False) -> bool:
        """Generate the suite and write it if the content changed.

        Args:
            dry_run: Only report whether the file would change

        Returns:
            True if the file was (or would be) rewritten
        """
        content = self.generate()
        if dry_run:
            path = self.test_source_file_path
            changed = content_changed(path, content)
            logger.info(f"{'Would write' if changed else 'Not changed'}: {path}")
            return changed
        return write_file_if_content_changed(self.test_source_file_path, content)

    def _generate_test_class(
        self,
        p: Printer,
        test_class_model: TestClassModel,
        is_static: bool,
        is_inner: bool,
    ) -> None:
        framework = self.config.framework
        static_modifier = "static " if is_static else ""

        self._generate_metadata(p, test_class_model)
        if test_class_model.data_path_root is not None:
            p.println(
                "@", framework.simple_name(framework.test_data_path),
                '("', test_class_model.data_path_root, '")'
            )
        if not is_inner:
            p.println(
                "@", framework.simple_name(framework.run_with),
                "(", framework.simple_name(framework.runner), ".class)"
            )
        p.println(
            "public ", static_modifier, "class ", test_class_model.name,
            " extends ", self.base_test_class.simple_name, " {"
        )

        with p.indented():
            first = True

            for method_model in test_class_model.methods:
                if not method_model.should_be_generated():
                    continue
                if first:
                    first = False
                else:
                    p.println()
                self._generate_test_method(p, method_model)

            for inner_test_class in test_class_model.inner_test_classes:
                if inner_test_class.is_empty():
                    logger.debug(f"Skipping empty test class {inner_test_class.name}")
                    continue
                if first:
                    first = False
                else:
                    p.println()
                self._generate_test_class(p, inner_test_class, is_static=True, is_inner=True)

        p.println("}")

    def _generate_test_method(self, p: Printer, method_model: MethodModel) -> None:
        self._generate_metadata(p, method_model)

        method_model.generate_signature(p)
        p.print_with_no_indent(" {")
        p.println()

        with p.indented():
            method_model.generate_body(p)

        p.println("}")

    def _generate_metadata(self, p: Printer, entity: TestEntityModel) -> None:
        if entity.data_string is not None:
            annotation = self.config.framework.simple_name(self.config.framework.test_metadata)
            p.println("@", annotation, '("', entity.data_string, '")')
