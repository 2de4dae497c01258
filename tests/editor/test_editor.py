"""Tests for editor detection and launching."""

import pytest

from adrcli.editor import detect_editor, launch_editor


@pytest.fixture
def no_editor_env(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)


@pytest.mark.unit
class TestEditorDetection:

    def test_visual_takes_priority(self, monkeypatch):
        monkeypatch.setenv("VISUAL", "subl -w")
        monkeypatch.setenv("EDITOR", "nano")
        assert detect_editor() == ["subl", "-w"]

    def test_falls_back_to_editor(self, monkeypatch):
        monkeypatch.delenv("VISUAL", raising=False)
        monkeypatch.setenv("EDITOR", "nano")
        assert detect_editor() == ["nano"]

    def test_first_candidate_on_path_wins(self, monkeypatch, no_editor_env):
        monkeypatch.setattr("shutil.which", lambda cmd: f"/usr/bin/{cmd}" if cmd in ("vim", "nano") else None)
        assert detect_editor(["nvim", "vim", "nano"]) == ["vim"]

    def test_uses_injected_candidates(self, monkeypatch, no_editor_env):
        monkeypatch.setattr("shutil.which", lambda cmd: "/usr/bin/micro" if cmd == "micro" else None)
        assert detect_editor(["micro"]) == ["micro"]

    def test_no_editor_found(self, monkeypatch, no_editor_env):
        monkeypatch.setattr("shutil.which", lambda cmd: None)
        with pytest.raises(RuntimeError, match="No editor found"):
            detect_editor(["nvim", "vim"])


@pytest.mark.unit
class TestLaunchEditor:

    def test_runs_editor_with_file(self, monkeypatch):
        monkeypatch.setenv("VISUAL", "myedit")
        calls = []

        launch_editor("/tmp/0001-x.md", run_editor=lambda cmd: calls.append(cmd) or 0)

        assert calls == [["myedit", "/tmp/0001-x.md"]]

    def test_nonzero_exit_raises(self, monkeypatch):
        monkeypatch.setenv("VISUAL", "myedit")
        with pytest.raises(RuntimeError, match="exited with code 2"):
            launch_editor("/tmp/0001-x.md", run_editor=lambda cmd: 2)
