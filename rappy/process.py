"""A child process with its standard streams connected through pipes."""

from __future__ import annotations

import os
import signal
import subprocess
from enum import Enum
from typing import Any

from rappy.socket_io import NO_BLOCK, Socket

FAIL_CODE = 127

_QUOTES = "'\""


class ProcessState(Enum):
    STOPPED = 0  # Not running.
    RUNNING = 1  # Actively running.
    DEAD = 2  # Was running.


def split_command(command: str) -> list[str]:
    """Split a command line on spaces, keeping quoted text together.

    The outermost quotes are removed; a different quote inside them is kept.
    """
    if not command:
        raise ValueError("Empty command")
    arguments: list[str] = []
    current: list[str] = []
    stack: list[str] = []

    def flush() -> None:
        if current:
            arguments.append("".join(current))
            current.clear()

    for char in command:
        if char == " " and not stack:
            flush()
        elif char in _QUOTES:
            if not stack:
                stack.append(char)
                flush()
            elif stack[-1] != char:
                stack.append(char)
                current.append(char)
            else:
                stack.pop()
                if stack:
                    current.append(char)
                else:
                    flush()
        else:
            current.append(char)

    if stack:
        raise ValueError(f"Bad command format: {command}")
    flush()
    if not arguments:
        raise ValueError("Empty command")
    return arguments


class Process:
    """Runs a command and exchanges data with it over pipes."""

    def __init__(self, command: str) -> None:
        if not command:
            raise ValueError("Empty command")
        self.command = command
        self.arguments = split_command(command)
        self._popen: subprocess.Popen[bytes] | None = None
        self._in: Socket | None = None
        self._out: Socket | None = None
        self._err: Socket | None = None

    @property
    def pid(self) -> int | None:
        """The child's process id, or None when stopped."""
        return self._popen.pid if self._popen is not None else None

    def state(self) -> ProcessState:
        if self._popen is None:
            return ProcessState.STOPPED
        if self._popen.poll() is not None:
            return ProcessState.DEAD
        return ProcessState.RUNNING

    def run(self) -> None:
        """Start the command unless it is already running."""
        current = self.state()
        if current is ProcessState.RUNNING:
            return
        if current is ProcessState.DEAD:
            self.stop()

        in_read, in_write = os.pipe()
        out_read, out_write = os.pipe()
        err_read, err_write = os.pipe()
        parent_ends = (in_write, out_read, err_read)
        try:
            popen = subprocess.Popen(
                self.arguments, stdin=in_read, stdout=out_write, stderr=err_write
            )
        except OSError as error:
            for fd in parent_ends:
                os.close(fd)
            raise ValueError(f"Failed to execute command: {self.command}") from error
        finally:
            for fd in (in_read, out_write, err_write):
                os.close(fd)

        self._popen = popen
        self._in = Socket(in_write)
        self._out = Socket(out_read)
        self._err = Socket(err_read)

    def stop(self) -> int:
        """Interrupt the command, wait for it and return its exit status."""
        popen = self._popen
        if popen is None:
            return 0

        popen.send_signal(signal.SIGINT)
        returncode = popen.wait()
        status = returncode if returncode >= 0 else 0

        for sock in (self._in, self._out, self._err):
            if sock is not None:
                sock.close()
        self._popen = None
        self._in = self._out = self._err = None

        if status == FAIL_CODE:
            raise ValueError(f"Failed to execute command: {self.command}")
        return status

    def _stream(self, sock: Socket | None) -> Socket:
        if self._popen is None or sock is None:
            raise RuntimeError("Process is not running")
        return sock

    def write_in(self, data: str | bytes, wait_for: int = NO_BLOCK) -> bool:
        """Send data to the command's standard input."""
        sock = self._stream(self._in)
        payload = data.encode() if isinstance(data, str) else data
        return sock.write(payload, wait_for)

    def read_out(self, wait_for: int = NO_BLOCK) -> str:
        """Read what the command has written to standard output."""
        return self._stream(self._out).read(wait_for).decode("utf-8", errors="replace")

    def read_err(self, wait_for: int = NO_BLOCK) -> str:
        """Read what the command has written to standard error."""
        return self._stream(self._err).read(wait_for).decode("utf-8", errors="replace")

    def __enter__(self) -> Process:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.stop()