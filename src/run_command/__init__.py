try:
    from importlib.metadata import version

    __version__ = version("run-command")
except Exception:
    __version__ = "0.0.0"

from run_command.process import RunOptions, RunOutput, run  # noqa: E402

__all__ = ["RunOptions", "RunOutput", "run", "__version__"]
