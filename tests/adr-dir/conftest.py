"""Helpers for building ADR directories in tests."""

import pytest

from adrcli.record.renderer import render


def _write_adr(directory, filename, text=None):
    """Write an ADR file. Without text, a rendered record matching the filename is used."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    if text is None:
        index = int(filename[:4])
        path.write_bytes(render(f"Decision {index}", index, "2024-01-01"))
    else:
        path.write_text(text)
    return path


@pytest.fixture
def write_adr():
    return _write_adr


@pytest.fixture
def adr_dir(tmp_path):
    return tmp_path / "docs" / "adr"
