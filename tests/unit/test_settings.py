"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from suitesmith.settings import FrameworkConfig, get_config, get_default_config, load_config, reset_config


class TestDefaults:

    def test_default_values(self, tmp_path):
        config = get_default_config()
        assert config.project_dir == Path.cwd().resolve()
        assert config.license_file == (Path.cwd() / "license" / "LICENSE.txt").resolve()
        assert config.generator_name == "org.jetbrains.kotlin.generators.tests.TestsPackage"
        assert config.source_extension == "java"
        assert config.framework.runner == "org.jetbrains.kotlin.test.JUnit3RunnerWithInners"
        assert config.logging.level == "warning"

    def test_simple_name(self):
        assert FrameworkConfig.simple_name("org.junit.runner.RunWith") == "RunWith"
        assert FrameworkConfig.simple_name("Bare") == "Bare"

    def test_default_config_ignores_environment(self, monkeypatch):
        monkeypatch.setenv("SUITESMITH_GENERATOR_NAME", "FromEnv")
        assert get_default_config().generator_name != "FromEnv"


class TestPriority:

    def test_project_file_discovered_upward(self, tmp_path, monkeypatch):
        (tmp_path / "suitesmith.yaml").write_text(
            "generator_name: FromYaml\nlicense_file: headers/license.txt\n", encoding="utf-8"
        )
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = load_config()
        assert config.generator_name == "FromYaml"
        assert config.project_dir == tmp_path.resolve()
        assert config.license_file == (tmp_path / "headers" / "license.txt").resolve()

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "suitesmith.yaml").write_text("generator_name: FromYaml\n", encoding="utf-8")
        monkeypatch.setenv("SUITESMITH_GENERATOR_NAME", "FromEnv")
        assert load_config().generator_name == "FromEnv"

    def test_nested_env(self, monkeypatch):
        monkeypatch.setenv("SUITESMITH_FRAMEWORK__RUNNER", "org.acme.Runner")
        assert load_config().framework.runner == "org.acme.Runner"

    def test_kwargs_override_env(self, monkeypatch):
        monkeypatch.setenv("SUITESMITH_GENERATOR_NAME", "FromEnv")
        assert load_config(generator_name="FromArgs").generator_name == "FromArgs"

    def test_log_level_shorthand(self, monkeypatch):
        monkeypatch.setenv("SUITESMITH_LOG_LEVEL", "DEBUG")
        assert load_config().logging.level == "debug"

    def test_explicit_project_file(self, tmp_path):
        config_dir = tmp_path / "conf"
        config_dir.mkdir()
        project_file = config_dir / "custom.yaml"
        project_file.write_text("source_extension: kt\nlicense_file: null\n", encoding="utf-8")

        config = load_config(project_file=project_file)
        assert config.source_extension == "kt"
        assert config.license_file is None
        assert config.project_dir == config_dir.resolve()


class TestValidation:

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            load_config(logging={"level": "loud"})

    def test_unknown_field_rejected(self, tmp_path):
        (tmp_path / "suitesmith.yaml").write_text("not_a_setting: 1\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config()

    def test_invalid_yaml_reports_location(self, tmp_path):
        (tmp_path / "suitesmith.yaml").write_text("generator_name: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError, match="Invalid YAML in config file"):
            load_config()

    def test_empty_extension_rejected(self):
        with pytest.raises(ValidationError):
            load_config(source_extension=".")


class TestLicenseHeader:

    def test_read_license_header(self, license_file):
        config = load_config(license_file=license_file)
        assert config.read_license_header() == "/*\n * Copyright example\n */\n"

    def test_disabled_license_header(self):
        assert load_config(license_file=None).read_license_header() is None


class TestCaching:

    def test_get_config_is_cached_until_reset(self, monkeypatch):
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first
