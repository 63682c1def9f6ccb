"""Tests for examples.py — demo scenarios."""

import pytest

from run_command import examples, process


def _failed(stderr="error"):
    return process.RunOutput(stdout="", stderr=stderr, code=1, success=False)


def test_example_names_in_order():
    assert list(examples.EXAMPLES) == [
        "simple_use_case",
        "with_args",
        "with_cwd",
        "with_env",
        "with_realtime_output_handler",
        "with_success_status",
        "with_exit_code_check",
    ]


def test_with_args(mock_process):
    examples.run_example("with_args")
    command, opts = mock_process.calls[0]
    assert command == "ls"
    assert opts.args == ["-a"]


def test_with_cwd(mock_process):
    examples.run_example("with_cwd")
    assert mock_process.calls[0][1].cwd == "/var/log"


def test_with_env(mock_process):
    examples.run_example("with_env")
    command, opts = mock_process.calls[0]
    assert command == "/bin/sh"
    assert opts.env == {"SOME_VARIABLE": "Hello, World!"}


def test_with_realtime_output_handler(capsys):
    result = examples.run_example("with_realtime_output_handler")
    assert result.success
    captured = capsys.readouterr()
    assert "fetching..." in captured.out
    assert "done" in captured.out
    assert "warning: nothing to fetch" in captured.err


def test_with_success_status(mock_process, capsys):
    mock_process.responses.append(process.RunOutput(stdout="", stderr="", code=0, success=True))
    mock_process.responses.append(_failed("The directory /non/existent/directory does not exist"))
    result = examples.run_example("with_success_status")
    assert not result.success
    assert mock_process.calls[1][1].cwd == "/non/existent/directory"
    out = capsys.readouterr().out
    assert "✓ Command was successful" in out
    assert "✗ Command failed" in out


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, "✓ Command was successful"),
        (1, "✗ Command failed"),
        (2, "Command exited with code: 2"),
    ],
)
def test_with_exit_code_check(mock_process, capsys, code, expected):
    mock_process.responses.append(process.RunOutput(stdout="", stderr="", code=code, success=code == 0))
    examples.run_example("with_exit_code_check")
    assert expected in capsys.readouterr().out


def test_run_example_unknown():
    with pytest.raises(KeyError):
        examples.run_example("nope")


def test_run_all(mock_process):
    results = examples.run_all()
    assert len(results) == len(examples.EXAMPLES)
    # with_success_status runs twice
    assert len(mock_process.calls) == len(examples.EXAMPLES) + 1


def test_banner(mock_process, capsys):
    examples.run_example("simple_use_case")
    out = capsys.readouterr().out
    assert "Example:" in out
    assert "simple_use_case" in out
    assert "A simple use case" in out
