"""Console sinks for streamed output + timestamped status lines."""

import os
import sys
from datetime import datetime


def out(chunk: str) -> None:
    """Echo a stdout chunk verbatim."""
    sys.stdout.write(chunk)
    sys.stdout.flush()


def err(chunk: str) -> None:
    """Echo a stderr chunk verbatim."""
    sys.stderr.write(chunk)
    sys.stderr.flush()


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def info(msg: str) -> None:
    print(f"[{_timestamp()}] {msg}", flush=True)


def _rule(title: str) -> str:
    return f"── {title} " + "─" * max(0, 45 - len(title))


def header(title: str) -> None:
    if _is_github_actions():
        print(f"::group::{title}", flush=True)
    info(_rule(title))


def footer(title: str) -> None:
    info(_rule(title))
    if _is_github_actions():
        print("::endgroup::", flush=True)


def success(msg: str) -> None:
    info(f"  ✓ {msg}")


def failure(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    info(f"  ✗ {msg}")


def error(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
