"""TCP client for the game server: text lines, packed floats and ints."""

from __future__ import annotations

import socket
import struct
from typing import Iterable, Optional

_FLOAT = struct.Struct("<f")
_INT = struct.Struct("<i")


class ClientSocket:
    """A connected TCP socket with line-based text and fixed-size binary helpers."""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        *,
        sock: Optional[socket.socket] = None,
    ) -> None:
        self._sock = sock
        if host is not None and port is not None:
            self.connect(host, port)

    def __enter__(self) -> "ClientSocket":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _socket(self) -> socket.socket:
        if self._sock is None:
            raise OSError("socket is not connected")
        return self._sock

    def connect(self, host: str, port: int) -> None:
        """Open a TCP connection; raises OSError on failure."""
        self._sock = socket.create_connection((host, port))

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def send_text(self, text: str) -> None:
        self._socket().sendall(text.encode("utf-8"))

    def recv_line(self) -> str:
        """Read up to and including a newline; at end of stream return what was read."""
        sock = self._socket()
        data = bytearray()
        while True:
            byte = sock.recv(1)
            if not byte:
                break
            data += byte
            if byte == b"\n":
                break
        return data.decode("utf-8", "replace")

    def _recv_exact(self, size: int) -> bytes:
        sock = self._socket()
        data = bytearray()
        while len(data) < size:
            chunk = sock.recv(size - len(data))
            if not chunk:
                raise ConnectionError(f"connection closed after {len(data)} of {size} bytes")
            data += chunk
        return bytes(data)

    def send_floats(self, values: Iterable[float]) -> None:
        """Send values as consecutive 32-bit little-endian floats."""
        items = list(values)
        self._socket().sendall(struct.pack(f"<{len(items)}f", *items))

    def recv_floats(self, count: int) -> list[float]:
        """Receive ``count`` 32-bit little-endian floats."""
        data = self._recv_exact(count * _FLOAT.size)
        return list(struct.unpack(f"<{count}f", data))

    def send_int(self, value: int) -> None:
        self._socket().sendall(_INT.pack(value))

    def recv_int(self) -> int:
        return _INT.unpack(self._recv_exact(_INT.size))[0]