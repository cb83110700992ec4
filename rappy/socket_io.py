"""Non-blocking reads and writes on a file descriptor, driven by poll."""

from __future__ import annotations

import os
import select
import socket as _socket
from enum import Enum
from typing import Any

BLOCK = -1
NO_BLOCK = 0

_CHUNK = 1024


class _IoType(Enum):
    IN = select.POLLIN
    OUT = select.POLLOUT
    CLOSE = select.POLLERR | select.POLLHUP


def _check_for(fd: int, kind: _IoType, timeout: int = NO_BLOCK) -> bool:
    """Poll ``fd`` for ``kind`` for up to ``timeout`` ms (-1 blocks)."""
    poller = select.poll()
    events = kind.value
    poller.register(fd, events)
    ready = poller.poll(timeout)
    return any(revents & events for _, revents in ready)


class Socket:
    """Owns a file descriptor and closes it when done."""

    def __init__(self, fd: int) -> None:
        if fd < 0:
            raise ValueError("Invalid file descriptor")
        self._fd = fd

    @classmethod
    def create(cls, domain: int, kind: int, protocol: int = 0) -> Socket:
        """Open a new socket and take ownership of its descriptor."""
        sock = _socket.socket(domain, kind, protocol)
        return cls(sock.detach())

    def fileno(self) -> int:
        return self._fd

    def _require_open(self) -> int:
        if self._fd < 0:
            raise ValueError("Socket is closed")
        return self._fd

    def is_closed(self) -> bool:
        """True when poll reports the descriptor writable without waiting."""
        return _check_for(self._require_open(), _IoType.OUT)

    def write(self, data: bytes | bytearray | memoryview, wait_for: int = NO_BLOCK) -> bool:
        """Write ``data``; ``wait_for`` is in ms. True if every byte was written."""
        fd = self._require_open()
        if wait_for != BLOCK and not _check_for(fd, _IoType.OUT, wait_for):
            return False
        written = os.write(fd, data)
        return written == len(data)

    def read(self, wait_for: int = NO_BLOCK) -> bytes:
        """Read everything available, waiting up to ``wait_for`` ms for each chunk."""
        fd = self._require_open()
        chunks: list[bytes] = []
        while _check_for(fd, _IoType.IN, wait_for):
            chunk = os.read(fd, _CHUNK)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        """Close the descriptor; closing twice does nothing."""
        if self._fd >= 0:
            fd, self._fd = self._fd, -1
            os.close(fd)

    def __int__(self) -> int:
        return self._fd

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()