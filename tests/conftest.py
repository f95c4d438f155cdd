"""Global pytest configuration and fixtures."""

import pytest

from suitesmith.registry import GeneratedFilesRegistry, reset_generated_files_registry
from suitesmith.settings import get_default_config, reset_config


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test in a scratch directory with no suitesmith env or cached state."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("SUITESMITH_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    reset_config()
    reset_generated_files_registry()
    yield
    reset_config()
    reset_generated_files_registry()


@pytest.fixture
def registry():
    """Fresh output registry for one generation run."""
    return GeneratedFilesRegistry()


@pytest.fixture
def config():
    """Default configuration without a license header."""
    return get_default_config(license_file=None)


@pytest.fixture
def license_file(tmp_path):
    """License header file."""
    path = tmp_path / "license" / "LICENSE.txt"
    path.parent.mkdir()
    path.write_text("/*\n * Copyright example\n */\n", encoding="utf-8")
    return path


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "generated"
