"""Tests for suite manifests."""

import re
from textwrap import dedent

import pytest

from suitesmith.errors import DuplicateOutputPathError, ManifestError
from suitesmith.manifest import create_generators, generate_suites, load_manifest
from suitesmith.models import AllFilesPresentMethodModel, RunTestMethodModel

MANIFEST = dedent("""\
    base_dir: out
    defaults:
      package: org.example.tests
      base_class: org.example.AbstractFooTest
    suites:
      - name: FooTestGenerated
        classes:
          - name: Foo
            data_string: testData/foo
            data_path_root: $PROJECT_ROOT
            all_files_present: {test_data_dir: testData/foo, pattern: '^(.+)\\.kt$'}
            methods:
              - {name: testA, test_data_file: testData/foo/a.kt, data_string: a.kt}
              - {name: testB, test_data_file: testData/foo/b.kt, skip: true}
            inner:
              - name: Nested
                methods:
                  - {name: testC, test_data_file: testData/foo/nested/c.kt}
      - name: BarTestGenerated
        package: org.example.other
        classes:
          - name: One
            methods: [{name: testOne, test_data_file: one.kt}]
          - name: Two
            methods: [{name: testTwo, test_data_file: two.kt}]
""")


@pytest.fixture
def manifest_file(tmp_path):
    path = tmp_path / "suites.yaml"
    path.write_text(MANIFEST, encoding="utf-8")
    return path


class TestLoadManifest:

    def test_defaults_merged_into_suites(self, manifest_file):
        manifest = load_manifest(manifest_file)
        first, second = manifest.suites
        assert first.package == "org.example.tests"
        assert second.package == "org.example.other"
        assert second.base_class == "org.example.AbstractFooTest"

    def test_base_dir_relative_to_manifest(self, manifest_file, tmp_path):
        assert load_manifest(manifest_file).base_dir == (tmp_path / "out").resolve()

    def test_class_spec_to_model(self, manifest_file):
        foo = load_manifest(manifest_file).suites[0].classes[0].to_model("KotlinTestUtils")

        assert isinstance(foo.methods[0], AllFilesPresentMethodModel)
        assert foo.methods[0].name == "testAllFilesPresentInFoo"
        assert foo.methods[0].file_pattern == r"^(.+)\.kt$"
        assert isinstance(foo.methods[1], RunTestMethodModel)
        assert not foo.methods[2].should_be_generated()
        assert foo.data_path_root == "$PROJECT_ROOT"
        assert foo.inner_test_classes[0].name == "Nested"

    def test_missing_required_field(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("suites:\n  - name: X\n    classes: [{name: A}]\n", encoding="utf-8")
        with pytest.raises(ManifestError, match="package"):
            load_manifest(path)

    def test_suite_without_classes_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "suites:\n  - {name: X, package: p, base_class: p.B, classes: []}\n", encoding="utf-8"
        )
        with pytest.raises(ManifestError, match="classes"):
            load_manifest(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("suites: [unclosed\n", encoding="utf-8")
        with pytest.raises(ManifestError, match="Invalid YAML"):
            load_manifest(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_manifest(tmp_path / "missing.yaml")


class TestGenerateSuites:

    def test_generates_every_suite(self, manifest_file, tmp_path, registry, config):
        results = generate_suites(load_manifest(manifest_file), registry=registry, config=config)

        foo_path = (tmp_path / "out" / "org" / "example" / "tests" / "FooTestGenerated.java").resolve()
        bar_path = (tmp_path / "out" / "org" / "example" / "other" / "BarTestGenerated.java").resolve()
        assert results == {foo_path: True, bar_path: True}

        foo_text = foo_path.read_text(encoding="utf-8")
        assert "public class FooTestGenerated extends AbstractFooTest {" in foo_text
        assert "public static class Nested extends AbstractFooTest {" in foo_text
        assert "testB" not in foo_text
        assert r'Pattern.compile("^(.+)\\.kt$")' in foo_text

        bar_text = bar_path.read_text(encoding="utf-8")
        assert "public static class One extends AbstractFooTest {" in bar_text
        assert "public static class Two extends AbstractFooTest {" in bar_text

    def test_second_run_changes_nothing(self, manifest_file, config):
        from suitesmith.registry import GeneratedFilesRegistry

        manifest = load_manifest(manifest_file)
        generate_suites(manifest, registry=GeneratedFilesRegistry(), config=config)
        results = generate_suites(manifest, registry=GeneratedFilesRegistry(), config=config)
        assert not any(results.values())

    def test_base_dir_override(self, manifest_file, tmp_path, registry, config):
        results = generate_suites(
            load_manifest(manifest_file), base_dir=tmp_path / "elsewhere", registry=registry, config=config
        )
        assert all(str(path).startswith(str(tmp_path / "elsewhere")) for path in results)

    def test_duplicate_suites_abort_before_writing(self, tmp_path, registry, config):
        path = tmp_path / "dup.yaml"
        path.write_text(dedent("""\
            defaults: {package: org.example, base_class: org.example.Base}
            suites:
              - name: Same
                classes: [{name: A, methods: [{name: testA, test_data_file: a.kt}]}]
              - name: Same
                classes: [{name: B, methods: [{name: testB, test_data_file: b.kt}]}]
        """), encoding="utf-8")

        with pytest.raises(DuplicateOutputPathError):
            generate_suites(load_manifest(path), registry=registry, config=config)
        assert not (tmp_path / "generated").exists()

    def test_create_generators_uses_configured_utils_class(self, manifest_file, registry):
        from suitesmith.settings import get_default_config

        config = get_default_config(license_file=None, framework={"test_utils": "org.acme.Utils"})
        generators = create_generators(load_manifest(manifest_file), registry=registry, config=config)
        text = generators[0].generate()
        assert "Utils.assertAllTestsPresentByMetadata(" in text
        assert "KotlinTestUtils" not in text

    def test_generated_string_literals_use_legal_escapes(self, manifest_file, registry, config):
        illegal_escape = re.compile(r'\\[^btnfr"\'\\u]')

        for generator in create_generators(load_manifest(manifest_file), registry=registry, config=config):
            for line in generator.generate().splitlines():
                # Drop valid escape pairs first so "\\." is not read as "\."
                stripped = re.sub(r'\\[btnfr"\'\\]', "", line)
                assert not illegal_escape.search(stripped), line
