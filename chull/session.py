"""Shared command session and listening socket for the convex hull servers."""

from __future__ import annotations

import re
import signal
import socket
import sys
import threading
from typing import Callable

from chull.calculator import ConvexHullCalculator

DEFAULT_PORT = 9034
BACKLOG = 10

POINTS_PROMPT = "Insert points as x, y. line by line."
NEWGRAPH_USAGE = "Invalid Newgraph command. Usage: Newgraph n"
POINT_FORMAT_ERROR = "Error. Insert point as x, y."

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_COUNT = re.compile(r"\s*([+-]?\d+)")


def _read_count(text: str) -> int | None:
    """Read a leading integer; None when absent or out of ``int`` range."""
    match = _COUNT.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


class CommandSession:
    """Network command state: a calculator plus the number of points still expected.

    ``Newgraph n`` resizes the graph to ``n`` points and then takes the next
    ``n`` messages as points to add, one per message.
    """

    def __init__(self, calculator: ConvexHullCalculator | None = None) -> None:
        self.calculator = calculator if calculator is not None else ConvexHullCalculator()
        self.waiting_for_points = 0
        self._lock = threading.Lock()

    def handle(self, text: str) -> str:
        """Answer one received message; the reply ends with a newline."""
        with self._lock:
            return self._answer(text) + "\n"

    def _answer(self, text: str) -> str:
        words = text.split(maxsplit=1)
        word = words[0] if words else ""
        rest = words[1] if len(words) > 1 else ""

        if self.waiting_for_points:
            if "," not in text:
                return POINT_FORMAT_ERROR
            self.calculator.add_point(word)
            self.waiting_for_points -= 1
            return f"Point ({word}) was added."

        if word == "Newgraph":
            count = _read_count(rest)
            if count is None or count < 0:
                return NEWGRAPH_USAGE
            self.calculator.new_graph(count)
            self.waiting_for_points = count
            return POINTS_PROMPT

        return self.calculator.process_command(text)

    def reset(self) -> None:
        """Stop waiting for points."""
        with self._lock:
            self.waiting_for_points = 0


def create_listener(host: str | None = None, port: int = DEFAULT_PORT) -> socket.socket:
    """Bind a listening TCP socket on the first usable address for ``host``."""
    infos = socket.getaddrinfo(
        host, port, socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
    )
    last_error: OSError | None = None
    for family, socktype, proto, _, address in infos:
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            last_error = exc
            continue
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind(address)
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        try:
            sock.listen(BACKLOG)
        except OSError:
            sock.close()
            raise
        return sock
    raise OSError(f"failed to bind to port {port}") from last_error


def _install_shutdown_handlers(stop: Callable[[], None]) -> None:
    """On SIGINT or SIGTERM, call ``stop`` and exit with the signal number."""

    def handler(signum: int, frame: object) -> None:
        print(f"\nInterrupt signal ({signum}) received.")
        print("Shutting down server...")
        stop()
        sys.exit(signum)

    signal.signal(signal.SIGINT, handler)
    signal.signal(signal.SIGTERM, handler)