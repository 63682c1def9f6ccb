"""Click entry point — all commands."""

import sys

import click

from run_command import __version__, config, log, process
from run_command import examples as examples_mod


@click.group()
@click.version_option(version=__version__, prog_name="run-command")
def main():
    """Run external commands with live, captured output."""


def _parse_env(pairs: tuple[str, ...]) -> dict[str, str]:
    env = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--env")
        env[key] = value
    return env


@main.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
@click.option("--cwd", default=None, help="Working directory for the command")
@click.option("--env", "env_pairs", multiple=True, metavar="KEY=VALUE", help="Set an environment variable")
@click.option("--hide-output", is_flag=True, help="Capture output without echoing it")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML run profile; command-line values override it",
)
@click.argument("command", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def run(cwd, env_pairs, hide_output, config_path, command, args):
    """Run COMMAND with ARGS and exit with its exit code."""
    env = _parse_env(env_pairs)

    if config_path:
        try:
            profile_command, options = config.load_profile(config_path)
        except config.ConfigError as e:
            log.error(str(e))
            sys.exit(1)
    else:
        profile_command, options = None, process.RunOptions()

    if command:
        options.args = list(args)
    else:
        command = profile_command
    if not command:
        raise click.UsageError("No command specified")

    if cwd is not None:
        options.cwd = cwd
    if env:
        options.env = {**(options.env or {}), **env}
    options.hide_output = options.hide_output or hide_output

    result = process.run(command, options)
    sys.exit(result.code)


@main.command()
@click.argument("names", nargs=-1)
@click.option("--list", "list_only", is_flag=True, help="List example names and exit")
def examples(names, list_only):
    """Run the demo examples (all of them unless NAMES are given)."""
    if list_only:
        for name in examples_mod.EXAMPLES:
            click.echo(name)
        return

    unknown = [n for n in names if n not in examples_mod.EXAMPLES]
    if unknown:
        log.error(f"Unknown example(s): {', '.join(unknown)}")
        sys.exit(1)

    log.header("examples")
    if names:
        for name in names:
            examples_mod.run_example(name)
    else:
        examples_mod.run_all()
    log.footer("examples complete")


if __name__ == "__main__":
    main()
