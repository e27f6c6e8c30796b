"""Convex hull server with one thread per client."""

from __future__ import annotations

import socket
import sys
import threading
import time
from functools import partial
from typing import Any, Callable, Sequence

from chull.select_server import (
    _BUFFER_SIZE,
    _POLL_INTERVAL,
    _answer,
    _ListeningServer,
    _parse_args,
    _run_server,
)
from chull.session import DEFAULT_PORT, CommandSession


class ThreadedServer(_ListeningServer):
    """Accepts clients on a background thread and serves each on its own thread."""

    def __init__(
        self,
        host: str | None = None,
        port: int = DEFAULT_PORT,
        session: CommandSession | None = None,
    ) -> None:
        super().__init__(host, port, session)
        self._running = threading.Event()

    @property
    def running(self) -> bool:
        """Whether the server is accepting and serving clients."""
        return self._running.is_set()

    def bind(self) -> None:
        """Create the listening socket."""
        super().bind()
        assert self.listener is not None
        self.listener.settimeout(_POLL_INTERVAL)

    def start(self) -> threading.Thread:
        """Start accepting clients in the background; return the accepting thread."""
        if self.listener is None:
            self.bind()
        assert self.listener is not None
        self._running.set()
        thread = self._launch(self.listener, self._accept_clients)
        self._acceptor_started(thread)
        return thread

    def _launch(
        self, sock: socket.socket, func: Callable[[socket.socket], Any]
    ) -> threading.Thread:
        thread = threading.Thread(target=func, args=(sock,), daemon=True)
        thread.start()
        return thread

    def _acceptor_started(self, thread: threading.Thread) -> None:
        print(f"accepting-thread, ID: {thread.ident} started.\n")

    def _client_started(self, thread: threading.Thread, fd: int) -> None:
        print(f"client-thread, ID: {thread.ident} started with socket {fd}\n")

    def _accept_clients(self, listener: socket.socket) -> None:
        print(f"Accepted connection THREAD, listening on socket {listener.fileno()}")
        while self.running:
            try:
                conn, _ = listener.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if not self.running:
                    break
                print(f"accept: {exc}", file=sys.stderr)
                continue
            conn.settimeout(_POLL_INTERVAL)
            fd = conn.fileno()
            self._client_started(self._launch(conn, self._serve_client), fd)

    def _serve_client(self, conn: socket.socket) -> None:
        hangup = f"Socket {conn.fileno()} hung up"
        with conn:
            while self.running and _answer(self.session, conn, _BUFFER_SIZE - 1, hangup):
                pass

    def stop(self) -> None:
        """Stop serving and close the listening socket."""
        self._running.clear()
        self._close_listener()
        print("Server stopped.")


def _serve_until_stopped(server: ThreadedServer) -> None:
    server.start()
    while server.running:
        time.sleep(1)


def _main_for(server_class: type[ThreadedServer], description: str, name: str,
              argv: Sequence[str] | None) -> int:
    args = _parse_args(description, argv)
    server = server_class(args.host, args.port)
    banner = f"Starting Convex Hull {name} Server on port {args.port}"
    return _run_server(server, banner, partial(_serve_until_stopped, server))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the multithreaded convex hull server."""
    return _main_for(
        ThreadedServer, "Convex hull server with a thread per client.", "Multithreading", argv
    )


if __name__ == "__main__":
    sys.exit(main())