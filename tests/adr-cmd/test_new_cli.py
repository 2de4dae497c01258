"""CLI tests for adr new."""

from unittest.mock import patch

import pytest

from adrcli.adr_dir.adr_files import read_record


@pytest.mark.unit
class TestNewCreatesFile:

    def test_first_record_gets_index_one(self, adr_path, invoke):
        result = invoke("new", "--no-edit", "Use", "PostgreSQL", "everywhere!")

        assert result.exit_code == 0
        path = adr_path / "0001-use-postgresql-everywhere.md"
        assert path.is_file()
        assert f"Created ADR: {path}" in result.stdout

    def test_title_words_are_joined(self, adr_path, invoke):
        invoke("new", "--no-edit", "Use", "PostgreSQL")

        record = read_record(str(adr_path / "0001-use-postgresql.md"))

        assert record.title == "Use PostgreSQL"
        assert record.current_status.status == "Proposed"

    def test_indices_increase(self, adr_path, invoke):
        invoke("new", "--no-edit", "First")
        invoke("new", "--no-edit", "Second")

        assert sorted(p.name for p in adr_path.iterdir()) == ["0001-first.md", "0002-second.md"]

    def test_missing_title_fails(self, project, invoke):
        result = invoke("new")
        assert result.exit_code != 0

    def test_without_config_fails(self, tmp_path, monkeypatch, invoke):
        monkeypatch.chdir(tmp_path)

        result = invoke("new", "--no-edit", "Title")

        assert result.exit_code == 1
        assert "adr init" in result.stderr

    def test_adr_dir_that_is_a_file_fails(self, project, invoke):
        (project / "docs").mkdir()
        (project / "docs" / "adr").write_text("not a directory")

        result = invoke("new", "--no-edit", "Title")

        assert result.exit_code == 1


@pytest.mark.unit
class TestNewLaunchesEditor:

    def test_opens_created_file(self, adr_path, invoke):
        with patch("adrcli.adr_cmd.new_cmd.launch_editor") as mock_launch:
            result = invoke("new", "Title")

        assert result.exit_code == 0
        path, editors = mock_launch.call_args[0]
        assert path == str(adr_path / "0001-title.md")
        assert editors == ["nvim", "vim", "pico", "nano"]

    def test_no_edit_skips_editor(self, project, invoke):
        with patch("adrcli.adr_cmd.new_cmd.launch_editor") as mock_launch:
            invoke("new", "--no-edit", "Title")
        mock_launch.assert_not_called()

    def test_editor_failure_keeps_file(self, adr_path, invoke):
        with patch("adrcli.adr_cmd.new_cmd.launch_editor", side_effect=RuntimeError("No editor found")):
            result = invoke("new", "Title")

        assert result.exit_code == 1
        assert "No editor found" in result.stderr
        assert (adr_path / "0001-title.md").is_file()
