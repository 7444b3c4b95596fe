"""Local TCP listener for client connections."""

from __future__ import annotations

import socket
import threading

from timeping.tlog import common


class NetCore:
    """Listens on 127.0.0.1 at the given port."""

    def __init__(self, port: int) -> None:
        try:
            self._sock = socket.create_server(("127.0.0.1", port))
        except OSError:
            common("Listen error", "netcore")
            raise
        self._sock.settimeout(0.2)
        self._closed = False

    @property
    def address(self) -> tuple[str, int]:
        """The bound host and port."""
        return self._sock.getsockname()[:2]

    def run(self, stop_event: threading.Event | None = None) -> None:
        """Accept connections until ``stop_event`` is set or the listener is closed."""
        while not self._closed and not (stop_event and stop_event.is_set()):
            try:
                conn, _ = self._sock.accept()
            except TimeoutError:
                continue
            except OSError:
                if not self._closed:
                    common("Accept error", "netcore")
                continue
            conn.close()

    def close(self) -> None:
        """Stop listening."""
        self._closed = True
        self._sock.close()