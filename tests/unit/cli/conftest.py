"""Fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from stackmap.core.demo import DemoManager


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """An empty working directory with no config file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def seed_path(project_dir):
    """A demo catalog at the default location of an initialized project."""
    return DemoManager(project_dir).provision()
