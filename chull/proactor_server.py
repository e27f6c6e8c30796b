"""Convex hull server running its accept loop and clients through proactors."""

from __future__ import annotations

import socket
import sys
import threading
from typing import Any, Callable, Sequence

from chull.proactor import start_proactor
from chull.session import DEFAULT_PORT, CommandSession
from chull.threaded_server import ThreadedServer, _main_for


class ProactorServer(ThreadedServer):
    """Threaded server whose accepting and client threads are started as proactors."""

    def __init__(
        self,
        host: str | None = None,
        port: int = DEFAULT_PORT,
        session: CommandSession | None = None,
    ) -> None:
        super().__init__(host, port, session)

    def bind(self) -> None:
        """Create the listening socket."""
        super().bind()

    def start(self) -> threading.Thread:
        """Start the accepting proactor; return its thread."""
        return super().start()

    def _launch(
        self, sock: socket.socket, func: Callable[[socket.socket], Any]
    ) -> threading.Thread:
        return start_proactor(sock, func)

    def _acceptor_started(self, thread: threading.Thread) -> None:
        print(f"accepting-thread, Address: {id(thread):#x} started.\n")

    def _client_started(self, thread: threading.Thread, fd: int) -> None:
        print(f"client-thread, address: {id(thread):#x} started with socket {fd}\n")

    def stop(self) -> None:
        """Stop serving and close the listening socket."""
        super().stop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the proactor-based convex hull server."""
    return _main_for(ProactorServer, "Convex hull server using proactors.", "Proactor", argv)


if __name__ == "__main__":
    sys.exit(main())