"""Subprocess runner — streams stdout/stderr live and returns a RunOutput."""

import codecs
import errno
import os
import signal as signals
import subprocess
import threading
from dataclasses import dataclass, field
from typing import IO, Callable

from run_command import log

CHUNK_SIZE = 64 * 1024
SPAWN_FAILURE_CODE = 1

Handler = Callable[[str], None]


@dataclass
class RunOptions:
    args: list[str] = field(default_factory=list)
    cwd: str | os.PathLike | None = None
    env: dict[str, str] | None = None
    on_stdout: Handler | None = None
    on_stderr: Handler | None = None
    hide_output: bool = False


@dataclass(frozen=True)
class RunOutput:
    stdout: str
    stderr: str
    code: int
    success: bool
    signal: str | None = None


class _Drain:
    """Reads one pipe to EOF on its own thread.

    Every decoded chunk is appended to the accumulator, then handed to the
    sink (the caller's handler, else the console echo, else nothing).
    """

    def __init__(self, stream: IO[bytes], sink: Handler | None):
        self._stream = stream
        self._sink = sink
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._chunks: list[str] = []
        self._thread = threading.Thread(target=self._read, daemon=True)
        self.error: Exception | None = None

    def start(self) -> None:
        self._thread.start()

    def join(self) -> str:
        self._thread.join()
        return "".join(self._chunks)

    def _read(self) -> None:
        while True:
            data = self._stream.read(CHUNK_SIZE)
            if not data:
                break
            self._emit(self._decoder.decode(data))
        # Trailing incomplete bytes flush as a final "\ufffd" chunk.
        self._emit(self._decoder.decode(b"", final=True))

    def _emit(self, chunk: str) -> None:
        # A read can end mid-character; the decoder holds those bytes back.
        if not chunk:
            return
        self._chunks.append(chunk)
        if self._sink is None or self.error is not None:
            return
        try:
            self._sink(chunk)
        except Exception as e:
            # Keep draining so the child never blocks on a full pipe.
            self.error = e


def run(command: str, options: RunOptions | None = None, **kwargs) -> RunOutput:
    """Run a command, streaming its output as it arrives. Never raises on spawn failure.

    Options may be given as a RunOptions or as keyword arguments, not both.
    Each stdout/stderr chunk goes to on_stdout/on_stderr when set, otherwise it
    is echoed to the console unless hide_output is set. A process that cannot
    be started yields code=1, success=False and the error text in stderr.
    """
    if options is not None and kwargs:
        raise TypeError("pass either a RunOptions or keyword options, not both")
    opts = options if options is not None else RunOptions(**kwargs)

    merged_env = None
    if opts.env is not None:
        merged_env = {**os.environ, **opts.env}

    try:
        proc = subprocess.Popen(
            [command, *(opts.args or [])],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            bufsize=0,
            env=merged_env,
            cwd=opts.cwd,
        )
    except (OSError, ValueError) as e:
        return _spawn_failure(e, opts)

    with proc:
        out = _Drain(proc.stdout, opts.on_stdout or _echo(log.out, opts))
        err = _Drain(proc.stderr, opts.on_stderr or _echo(log.err, opts))
        out.start()
        err.start()
        returncode = proc.wait()
        stdout = out.join()
        stderr = err.join()

    for drain in (out, err):
        if drain.error is not None:
            raise drain.error

    return _result(stdout, stderr, returncode)


def _echo(sink: Handler, opts: RunOptions) -> Handler | None:
    return None if opts.hide_output else sink


def _spawn_failure(exc: Exception, opts: RunOptions) -> RunOutput:
    """Turn a spawn-time error into a failed RunOutput, reporting it like stderr output."""
    message = str(exc)
    if isinstance(exc, OSError) and exc.errno == errno.ENOENT and opts.cwd:
        message = f"The directory {os.fsdecode(opts.cwd)} does not exist"

    if opts.on_stderr is not None:
        opts.on_stderr(message)
    elif not opts.hide_output:
        log.err(message + "\n")

    return RunOutput(stdout="", stderr=message, code=SPAWN_FAILURE_CODE, success=False)


def _result(stdout: str, stderr: str, returncode: int) -> RunOutput:
    # Popen reports death by signal N as returncode -N.
    if returncode < 0:
        signum = -returncode
        return RunOutput(
            stdout=stdout,
            stderr=stderr,
            code=128 + signum,
            success=False,
            signal=signal_name(signum),
        )
    return RunOutput(stdout=stdout, stderr=stderr, code=returncode, success=returncode == 0)


def signal_name(signum: int) -> str:
    """Return the symbolic name of a signal number, e.g. 15 -> 'SIGTERM'."""
    try:
        return signals.Signals(signum).name
    except ValueError:
        return f"SIG{signum}"
