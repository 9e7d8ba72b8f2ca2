import pytest

from labutil.riscv import MAXARG
from labutil.xargs import MESGSIZE, build_commands


def test_one_command_per_line():
    assert build_commands(["echo", "hi"], "a\nb\n") == [
        ["echo", "hi", "a"],
        ["echo", "hi", "b"],
    ]


def test_trailing_text_without_newline_is_ignored():
    assert build_commands(["echo"], "one\ntwo") == [["echo", "one"]]


def test_empty_line_gives_empty_argument():
    assert build_commands(["echo"], "\n") == [["echo", ""]]


def test_only_first_mesgsize_characters_read():
    data = "x" * MESGSIZE + "\n"
    assert build_commands(["echo"], data) == []
    data = "y" * (MESGSIZE - 1) + "\n" + "z\n"
    assert build_commands(["echo"], data) == [["echo", "y" * (MESGSIZE - 1)]]


def test_bytes_input():
    assert build_commands(["grep", "k"], b"f1\nf2\n") == [
        ["grep", "k", "f1"],
        ["grep", "k", "f2"],
    ]


def test_no_fixed_args_runs_line_itself():
    assert build_commands([], "ls\n") == [["ls"]]


def test_arguments_are_not_accumulated():
    result = build_commands(["cmd"], "a\nb\nc\n")
    assert all(len(argv) == 2 for argv in result)


def test_too_many_arguments():
    with pytest.raises(ValueError):
        build_commands(["x"] * (MAXARG - 1), "a\n")