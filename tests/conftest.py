"""Shared test fixtures."""

import pytest


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run for tests; records (command, RunOptions) per call."""
    from run_command import process

    calls = []
    responses = []

    def fake_run(command, options=None, **kwargs):
        opts = options if options is not None else process.RunOptions(**kwargs)
        calls.append((command, opts))
        if responses:
            return responses.pop(0)
        return process.RunOutput(stdout="", stderr="", code=0, success=True)

    monkeypatch.setattr(process, "run", fake_run)

    return type("MockProcess", (), {"calls": calls, "responses": responses})()
