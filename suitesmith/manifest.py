# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Declarative suite manifests.

A manifest lists the suites to generate in one run and spells out their test
classes explicitly:

    base_dir: generated
    defaults:
      base_class: org.example.AbstractFooTest
    suites:
      - package: org.example.tests
        name: FooTestGenerated
        classes:
          - name: Foo
            data_string: testData/foo
            data_path_root: $PROJECT_ROOT
            all_files_present: {test_data_dir: testData/foo, pattern: '^(.+)\\.kt$'}
            methods:
              - {name: testA, test_data_file: testData/foo/a.kt, data_string: a.kt}

``defaults`` is deep-merged under every suite entry. All suites of a manifest
share one output registry, so two suites resolving to the same file fail
before anything is written.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from suitesmith._internal.io.yaml import deep_merge, load_yaml
from suitesmith.errors import ManifestError
from suitesmith.generator import TestGenerator
from suitesmith.models import AllFilesPresentMethodModel, RunTestMethodModel, SimpleTestClassModel
from suitesmith.registry import GeneratedFilesRegistry
from suitesmith.settings import GeneratorConfig, get_config

logger = logging.getLogger(__name__)


class MethodSpec(BaseModel):
    """One ``runTest`` method."""
    name: str
    test_data_file: str
    data_string: Optional[str] = None
    skip: bool = False

    model_config = ConfigDict(extra="forbid")

    def to_model(self) -> RunTestMethodModel:
        return RunTestMethodModel(
            name=self.name,
            test_data_file=self.test_data_file,
            data_string=self.data_string,
            skip=self.skip,
        )


class AllFilesPresentSpec(BaseModel):
    """Coverage check over a test data directory."""
    test_data_dir: str
    pattern: str
    target_backend: str = "ANY"
    recursive: bool = True

    model_config = ConfigDict(extra="forbid")


class ClassSpec(BaseModel):
    """Test class with its methods and inner classes."""
    name: str
    data_string: Optional[str] = None
    data_path_root: Optional[str] = None
    all_files_present: Optional[AllFilesPresentSpec] = None
    methods: list[MethodSpec] = Field(default_factory=list)
    inner: list["ClassSpec"] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_model(self, utils_class: str) -> SimpleTestClassModel:
        """Build the class model; the coverage check comes first when present."""
        methods = []
        if self.all_files_present is not None:
            check = self.all_files_present
            methods.append(AllFilesPresentMethodModel(
                class_name=self.name,
                test_data_dir=check.test_data_dir,
                file_pattern=check.pattern,
                target_backend=check.target_backend,
                recursive=check.recursive,
                utils_class=utils_class,
            ))
        methods.extend(method.to_model() for method in self.methods)

        return SimpleTestClassModel(
            name=self.name,
            methods=methods,
            inner_test_classes=[inner.to_model(utils_class) for inner in self.inner],
            data_string=self.data_string,
            data_path_root=self.data_path_root,
        )


class SuiteSpec(BaseModel):
    """One generated source file."""
    package: str
    name: str
    base_class: str
    classes: list[ClassSpec] = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class SuiteManifest(BaseModel):
    """All suites generated in one run."""
    base_dir: Path = Path("generated")
    defaults: dict[str, Any] = Field(default_factory=dict)
    suites: list[SuiteSpec]

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        defaults = data.get("defaults") or {}
        suites = data.get("suites")
        if defaults and isinstance(suites, list):
            data = dict(data)
            data["suites"] = [
                deep_merge(defaults, suite) if isinstance(suite, dict) else suite
                for suite in suites
            ]
        return data


def load_manifest(path: str | Path) -> SuiteManifest:
    """Load and validate a manifest file.

    Relative ``base_dir`` values resolve against the manifest's directory.

    Raises:
        FileNotFoundError: If the manifest doesn't exist
        ManifestError: If the manifest is not valid YAML or fails validation
    """
    path = Path(path)
    try:
        data = load_yaml(path)
        manifest = SuiteManifest.model_validate(data)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in manifest {path}: {e}") from e
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise ManifestError(f"Invalid manifest {path}: {problems}") from e

    if not manifest.base_dir.is_absolute():
        manifest.base_dir = (path.parent / manifest.base_dir).resolve()

    logger.debug(f"Loaded manifest {path} with {len(manifest.suites)} suites")
    return manifest


def create_generators(
    manifest: SuiteManifest,
    base_dir: Optional[Path] = None,
    registry: Optional[GeneratedFilesRegistry] = None,
    config: Optional[GeneratorConfig] = None,
) -> list[TestGenerator]:
    """Construct one generator per suite, claiming every output path.

    Raises:
        DuplicateOutputPathError: If two suites target the same file
    """
    config = config if config is not None else get_config()
    utils_class = config.framework.simple_name(config.framework.test_utils)
    base_dir = base_dir if base_dir is not None else manifest.base_dir

    return [
        TestGenerator(
            base_dir,
            suite.package,
            suite.name,
            suite.base_class,
            [cls.to_model(utils_class) for cls in suite.classes],
            registry=registry,
            config=config,
        )
        for suite in manifest.suites
    ]


def generate_suites(
    manifest: SuiteManifest,
    base_dir: Optional[Path] = None,
    registry: Optional[GeneratedFilesRegistry] = None,
    config: Optional[GeneratorConfig] = None,
    dry_run: bool = False,
) -> dict[Path, bool]:
    """Generate every suite of a manifest.

    All generators are constructed before any is run, so a duplicate output
    path aborts the run without writing anything.

    Returns:
        Mapping of output path to whether the file changed
    """
    generators = create_generators(manifest, base_dir=base_dir, registry=registry, config=config)

    results = {}
    for generator in generators:
        results[generator.test_source_file_path] = generator.generate_and_save(dry_run=dry_run)

    changed = sum(results.values())
    logger.info(f"Generated {len(results)} suites, {changed} changed")
    return results
