"""Parse YAML run profiles into (command, RunOptions)."""

import yaml

from run_command.process import RunOptions

KNOWN_KEYS = {"command", "args", "cwd", "env", "hide_output"}


class ConfigError(ValueError):
    """Raised for unreadable or malformed run profiles."""


def load_profile(path: str) -> tuple[str, RunOptions]:
    """Read a YAML run profile from disk."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read profile {path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    return parse_profile(data)


def parse_profile(data) -> tuple[str, RunOptions]:
    """Validate a profile dict and build the command + RunOptions.

    Only `command` is required. `args` items and `env` keys/values are
    coerced to strings, since YAML happily turns `1` or `yes` into non-strings.
    """
    if not isinstance(data, dict):
        raise ConfigError("profile must be a mapping")

    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown profile keys: {', '.join(unknown)}")

    command = data.get("command")
    if not isinstance(command, str) or not command:
        raise ConfigError("profile needs a non-empty 'command' string")

    args = data.get("args") or []
    if not isinstance(args, list):
        raise ConfigError("'args' must be a list")

    env = data.get("env")
    if env is not None:
        if not isinstance(env, dict):
            raise ConfigError("'env' must be a mapping")
        env = {str(k): "" if v is None else str(v) for k, v in env.items()}

    cwd = data.get("cwd")
    if cwd is not None and not isinstance(cwd, str):
        raise ConfigError("'cwd' must be a string")

    hide_output = data.get("hide_output", False)
    if not isinstance(hide_output, bool):
        raise ConfigError("'hide_output' must be true or false")

    return command, RunOptions(
        args=[str(a) for a in args],
        cwd=cwd,
        env=env,
        hide_output=hide_output,
    )
