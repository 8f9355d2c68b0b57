import subprocess
from unittest import mock

import pytest

from ghmirror.config import Config
from ghmirror.precheck import PrecheckError, git_base_exists, has_git, precheck_self


def _completed(code):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_has_git_true_on_success():
    with mock.patch("ghmirror.precheck.subprocess.run", return_value=_completed(0)) as run:
        assert has_git() is True
    assert run.call_args.args[0] == ["git", "--version"]


def test_has_git_false_on_failure(capsys):
    with mock.patch("ghmirror.precheck.subprocess.run", return_value=_completed(1)):
        assert has_git() is False
    assert "git is not installed or not found in PATH" in capsys.readouterr().err


def test_has_git_false_when_missing():
    with mock.patch("ghmirror.precheck.subprocess.run", side_effect=FileNotFoundError):
        assert has_git() is False


def test_git_base_exists_directory(tmp_path):
    assert git_base_exists(str(tmp_path)) is True


def test_git_base_exists_file_and_missing(tmp_path, capsys):
    file_path = tmp_path / "file"
    file_path.write_text("x")
    assert git_base_exists(str(file_path)) is False
    missing = tmp_path / "missing"
    assert git_base_exists(str(missing)) is False
    assert str(missing) in capsys.readouterr().err


def test_precheck_self_passes(tmp_path):
    with mock.patch("ghmirror.precheck.subprocess.run", return_value=_completed(0)) as run:
        assert precheck_self(Config(git_base=str(tmp_path))) is None
    assert run.call_count == 1


def test_precheck_self_without_git(tmp_path):
    with mock.patch("ghmirror.precheck.subprocess.run", return_value=_completed(127)):
        with pytest.raises(PrecheckError):
            precheck_self(Config(git_base=str(tmp_path)))


def test_precheck_self_missing_base(tmp_path):
    with mock.patch("ghmirror.precheck.subprocess.run", return_value=_completed(0)):
        with pytest.raises(PrecheckError, match="does not exist"):
            precheck_self(Config(git_base=str(tmp_path / "nope")))