import pytest

from pipex.config import NPipex, Pipex
from pipex.report import describe_npipex, describe_pipex, describe_tokens


@pytest.fixture
def files(tmp_path):
    src = open(tmp_path / "in", "wb+")
    dst = open(tmp_path / "out", "wb")
    yield src, dst
    src.close()
    dst.close()


def test_describe_pipex_none():
    assert describe_pipex(None) == "t_pipex is NULL.\n"


def test_describe_pipex_contents(files):
    src, dst = files
    lines = describe_pipex(Pipex(src, dst, "ls -l", None)).splitlines()
    assert lines[0] == "=== t_pipex Contents ==="
    assert lines[1] == f"input_fd:  {src.fileno()}"
    assert lines[2] == f"output_fd: {dst.fileno()}"
    assert lines[3] == "cmd1:      ls -l"
    assert lines[4] == "cmd2:      (null)"
    assert lines[5] == "========================"


def test_describe_tokens():
    assert describe_tokens(["ls", "-l"]) == "token[0]: ls\ntoken[1]: -l\n"


def test_describe_tokens_none_and_empty():
    assert describe_tokens(None) == "No tokens to print.\n"
    assert describe_tokens([]) == ""


def test_describe_npipex_none():
    assert describe_npipex(None) == "t_npipex pointer is NULL\n"


def test_describe_npipex_contents(files):
    src, dst = files
    text = describe_npipex(NPipex(False, None, src, dst, ["cat", "wc"]))
    lines = text.splitlines()
    assert lines[0] == "== npipex =="
    assert "heredoc_on: 0" in lines
    assert "limiter: (null)" in lines
    assert f"input_fd: {src.fileno()}" in lines
    assert "cmd_count: 2" in lines
    assert lines[-4:] == ["cmds:", "  [0]: cat", "  [1]: wc", "============"]


def test_describe_npipex_heredoc_limiter_keeps_newline(files):
    src, dst = files
    text = describe_npipex(NPipex(True, "EOF\n", src, dst, []))
    assert "heredoc_on: 1\n" in text
    assert "limiter: EOF\n\n" in text
    assert text.endswith("cmds:\n============\n")


def test_describe_npipex_closed_file_reports_minus_one(files):
    src, dst = files
    src.close()
    text = describe_npipex(NPipex(False, None, src, dst, ["x"]))
    assert "input_fd: -1\n" in text