import os

import pytest

from pipex.paths import PipexError
from pipex.pipeline import main, run_pipeline

TEXT = "hello\nworld\nhello again\n"


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text(TEXT)
    return path


def test_grep_then_cat(infile, tmp_path, env):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["grep hello", "cat"], str(out), env)
    assert status == 0
    assert out.read_text() == "hello\nhello again\n"


def test_three_stages_copy_input(infile, tmp_path, env):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "cat", "cat"], str(out), env)
    assert status == 0
    assert out.read_text() == TEXT


def test_outfile_is_truncated(infile, tmp_path, env):
    out = tmp_path / "out.txt"
    out.write_text("old content that is much longer than the result\n" * 10)
    run_pipeline(str(infile), ["grep world", "cat"], str(out), env)
    assert out.read_text() == "world\n"


def test_missing_last_command_gives_127(infile, tmp_path, env, capsys):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "no-such-command-here"], str(out), env)
    assert status == 127
    assert out.read_text() == ""
    assert "command not found" in capsys.readouterr().err


def test_missing_first_command_keeps_running(infile, tmp_path, env):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["no-such-command-here", "cat"], str(out), env)
    assert status == 0
    assert out.read_text() == ""


def test_status_of_last_command_is_returned(infile, tmp_path, env):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "grep nomatch"], str(out), env)
    assert status == 1


def test_missing_infile_still_creates_outfile(tmp_path, env):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError) as info:
        run_pipeline(str(tmp_path / "absent.txt"), ["cat", "cat"], str(out), env)
    assert info.value.message == "Infile or outfile error"
    assert info.value.status == 1
    assert out.exists()


def test_missing_path_variable(infile, tmp_path):
    with pytest.raises(PipexError) as info:
        run_pipeline(str(infile), ["cat", "cat"], str(tmp_path / "o"), {"HOME": "/"})
    assert info.value.message == "Path error"


def test_main_rejects_too_few_arguments(capsys):
    assert main(["in", "cat", "out"]) == 1
    assert "Invalid number of arguments" in capsys.readouterr().err


def test_main_runs_pipeline(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), "grep again", "cat", str(out)]) == 0
    assert out.read_text() == "hello again\n"


def test_main_reports_file_error(tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert main([str(tmp_path / "absent"), "cat", "cat", str(out)]) == 1
    assert "Infile or outfile error" in capsys.readouterr().err