"""Single-threaded convex hull server multiplexing clients with select."""

from __future__ import annotations

import argparse
import select
import socket
import sys
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Sequence

from chull.session import (
    DEFAULT_PORT,
    CommandSession,
    _install_shutdown_handlers,
    create_listener,
)

_BUFFER_SIZE = 256
_POLL_INTERVAL = 0.1


def _answer(
    session: CommandSession, sock: socket.socket, size: int, hangup_message: str
) -> bool:
    """Read one message, send the session's reply; False once the connection is over."""
    try:
        data = sock.recv(size)
    except socket.timeout:
        return True
    except OSError as exc:
        print(f"recv: {exc}", file=sys.stderr)
        return False
    if not data:
        print(hangup_message)
        return False
    reply = session.handle(data.decode("utf-8", errors="replace"))
    try:
        sock.sendall(reply.encode("utf-8"))
    except OSError as exc:
        print(f"send: {exc}", file=sys.stderr)
        return False
    return True


def _parse_args(description: str, argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=None, help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="TCP port")
    return parser.parse_args(argv)


def _run_server(server, banner: str, serve: Callable[[], object]) -> int:
    """Print the banner, install signal handlers and run ``serve``."""
    print(banner)
    _install_shutdown_handlers(server.stop)
    try:
        serve()
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


class _ListeningServer:
    """Holds the address, the shared session and the listening socket."""

    def __init__(
        self,
        host: str | None,
        port: int,
        session: CommandSession | None,
    ) -> None:
        self.host = host
        self.port = port
        self.session = session if session is not None else CommandSession()
        self.listener: socket.socket | None = None

    def bind(self) -> None:
        """Create the listening socket."""
        self.listener = create_listener(self.host, self.port)

    def _close_listener(self) -> None:
        if self.listener is not None:
            self.listener.close()
            self.listener = None


class _MultiplexedServer(_ListeningServer):
    """Keeps the connected client sockets of a single serving loop."""

    _recv_size = _BUFFER_SIZE - 1
    _hangup = "Socket {fd} hung up"

    def __init__(
        self,
        host: str | None,
        port: int,
        session: CommandSession | None,
    ) -> None:
        super().__init__(host, port, session)
        self._clients: dict[int, socket.socket] = {}
        self._lock = threading.Lock()
        self._serving = False

    @contextmanager
    def _serving_session(self) -> Iterator[socket.socket]:
        if self.listener is None:
            self.bind()
        assert self.listener is not None
        self._serving = True
        try:
            yield self.listener
        finally:
            self._serving = False
            self._close_all()

    def _register(self, conn: socket.socket) -> None:
        with self._lock:
            self._clients[conn.fileno()] = conn

    def _serve_client(self, fd: int) -> None:
        with self._lock:
            sock = self._clients.get(fd)
        if sock is None:
            return
        if not _answer(self.session, sock, self._recv_size, self._hangup.format(fd=fd)):
            self._drop(fd)

    def _drop(self, fd: int) -> None:
        with self._lock:
            sock = self._clients.pop(fd, None)
        if sock is None:
            return
        sock.close()
        self._forget(fd)

    def _forget(self, fd: int) -> None:
        """Hook called after a client socket has been closed."""

    def _close_all(self) -> None:
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for sock in clients:
            sock.close()
        self._close_listener()

    def _finish_stop(self) -> None:
        self.session.reset()
        if not self._serving:
            self._close_all()
        print("Server shutdown complete")


class SelectServer(_MultiplexedServer):
    """Serves one shared command session to every connected client."""

    def __init__(
        self,
        host: str | None = None,
        port: int = DEFAULT_PORT,
        session: CommandSession | None = None,
    ) -> None:
        super().__init__(host, port, session)
        self._stopped = threading.Event()

    def bind(self) -> None:
        """Create the listening socket."""
        super().bind()

    def serve_forever(self) -> None:
        """Accept clients and answer their messages until ``stop`` is called."""
        with self._serving_session() as listener:
            print(f"Convex Hull server started on port {listener.getsockname()[1]}")
            print("Waiting for connections...")
            while not self._stopped.is_set():
                with self._lock:
                    watched = [listener, *self._clients.values()]
                readable, _, _ = select.select(watched, [], [], _POLL_INTERVAL)
                for sock in sorted(readable, key=lambda s: s.fileno()):
                    if sock is listener:
                        self._accept(listener)
                    else:
                        self._serve_client(sock.fileno())

    def _accept(self, listener: socket.socket) -> None:
        try:
            conn, address = listener.accept()
        except OSError as exc:
            print(f"accept: {exc}", file=sys.stderr)
            return
        self._register(conn)
        print(f"New connection from {address[0]} on socket {conn.fileno()}")

    def stop(self) -> None:
        """Ask the server loop to end and reset the session."""
        self._stopped.set()
        self._finish_stop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the select-based convex hull server."""
    args = _parse_args("Convex hull server using select.", argv)
    server = SelectServer(args.host, args.port)
    return _run_server(
        server, f"Starting Convex Hull Server on port {args.port}", server.serve_forever
    )


if __name__ == "__main__":
    sys.exit(main())