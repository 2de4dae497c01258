"""Fixtures for adr command tests: a project directory with .adr.json."""

import json

import pytest
from click.testing import CliRunner

from adrcli.cli import main


@pytest.fixture
def project(tmp_path, monkeypatch):
    """An initialized project whose ADR directory is docs/adr, used as cwd."""
    (tmp_path / ".adr.json").write_text(json.dumps({"dir": "docs/adr"}))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def adr_path(project):
    return project / "docs" / "adr"


@pytest.fixture
def invoke():
    def _invoke(*args):
        return CliRunner().invoke(main, list(args))
    return _invoke
