"""Demo scenarios for process.run, runnable via `run-command examples`."""

import click

from run_command import log, process


def _banner(name: str, description: str) -> None:
    click.echo()
    label = click.style("Example:", bg="bright_magenta", bold=True)
    click.echo(f"{label} {click.style(name, fg='bright_yellow', bold=True)}")
    click.echo(click.style(description, fg="bright_cyan", italic=True))
    click.echo()


def simple_use_case() -> process.RunOutput:
    """Run a bare command."""
    _banner("simple_use_case", "A simple use case")
    return process.run("ls")


def with_args() -> process.RunOutput:
    _banner("with_args", "Running a command with arguments")
    return process.run("ls", args=["-a"])


def with_cwd() -> process.RunOutput:
    _banner("with_cwd", "Running a command in a different directory")
    return process.run("ls", args=["-a"], cwd="/var/log")


def with_env() -> process.RunOutput:
    _banner("with_env", "Running a command with environment variables")
    return process.run(
        "/bin/sh",
        args=["-c", "echo $SOME_VARIABLE"],
        env={"SOME_VARIABLE": "Hello, World!"},
    )


def with_realtime_output_handler() -> process.RunOutput:
    """Colour each chunk as it arrives instead of echoing it raw."""
    _banner("with_realtime_output_handler", "Running a command with a real-time output handler")
    return process.run(
        "/bin/sh",
        args=["-c", "echo fetching...; echo 'warning: nothing to fetch' >&2; echo done"],
        on_stdout=lambda chunk: click.echo(click.style(chunk, fg="bright_green"), nl=False),
        on_stderr=lambda chunk: click.echo(click.style(chunk, fg="bright_red"), nl=False, err=True),
    )


def with_success_status() -> process.RunOutput:
    _banner("with_success_status", "Running a command and checking the success status")

    log.info("Running a command that should succeed:")
    result = process.run("ls")
    _report(result.success)

    log.info("Running a command that should fail:")
    result = process.run("ls", cwd="/non/existent/directory")
    _report(result.success)
    return result


def with_exit_code_check() -> process.RunOutput:
    _banner("with_exit_code_check", "Running a command and checking the exit code")
    result = process.run("ls")
    if result.code == 0:
        log.success("Command was successful")
    elif result.code == 1:
        log.failure("Command failed")
    else:
        log.info(f"Command exited with code: {result.code}")
    return result


def _report(ok: bool) -> None:
    if ok:
        log.success("Command was successful")
    else:
        log.failure("Command failed")


EXAMPLES = {
    "simple_use_case": simple_use_case,
    "with_args": with_args,
    "with_cwd": with_cwd,
    "with_env": with_env,
    "with_realtime_output_handler": with_realtime_output_handler,
    "with_success_status": with_success_status,
    "with_exit_code_check": with_exit_code_check,
}


def run_example(name: str) -> process.RunOutput:
    """Run one example by name. Raises KeyError for unknown names."""
    return EXAMPLES[name]()


def run_all() -> list[process.RunOutput]:
    """Run every example in declaration order."""
    return [fn() for fn in EXAMPLES.values()]
