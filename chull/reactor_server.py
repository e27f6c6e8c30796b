"""Convex hull server dispatching client sockets through a Reactor."""

from __future__ import annotations

import sys
from typing import Sequence

from chull.reactor import Reactor
from chull.select_server import (
    _BUFFER_SIZE,
    _MultiplexedServer,
    _parse_args,
    _run_server,
)
from chull.session import DEFAULT_PORT, CommandSession


class ReactorServer(_MultiplexedServer):
    """Serves one shared command session, with a reactor calling per-socket handlers."""

    _recv_size = _BUFFER_SIZE
    _hangup = "selectserver: socket {fd} hung up"

    def __init__(
        self,
        host: str | None = None,
        port: int = DEFAULT_PORT,
        session: CommandSession | None = None,
    ) -> None:
        super().__init__(host, port, session)
        self.reactor = Reactor()

    def bind(self) -> None:
        """Create the listening socket."""
        super().bind()

    def serve_forever(self) -> None:
        """Register the listener with the reactor and run it until ``stop``."""
        with self._serving_session() as listener:
            self.reactor.add_fd(listener.fileno(), self._accept)
            self.reactor.run()

    def _accept(self, fd: int) -> None:
        listener = self.listener
        if listener is None:
            return
        try:
            conn, _ = listener.accept()
        except OSError as exc:
            print(f"accept: {exc}", file=sys.stderr)
            return
        try:
            self.reactor.add_fd(conn.fileno(), self._serve_client)
        except ValueError as exc:
            print(f"reactor: {exc}", file=sys.stderr)
            conn.close()
            return
        self._register(conn)

    def _forget(self, fd: int) -> None:
        self.reactor.remove_fd(fd)

    def stop(self) -> None:
        """Stop the reactor, reset the session and release the sockets."""
        print("Reactor server shutting down")
        self.reactor.stop()
        self._finish_stop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the reactor-based convex hull server."""
    args = _parse_args("Convex hull server using a reactor.", argv)
    server = ReactorServer(args.host, args.port)
    return _run_server(
        server,
        f"Starting Convex Hull Reactor Server on port {args.port}",
        server.serve_forever,
    )


if __name__ == "__main__":
    sys.exit(main())