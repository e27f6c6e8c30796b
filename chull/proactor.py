"""Run a handler on its own thread for a socket."""

from __future__ import annotations

import socket
import threading
from typing import Any, Callable


def start_proactor(
    sock: socket.socket, func: Callable[[socket.socket], Any]
) -> threading.Thread:
    """Start a daemon thread running ``func(sock)`` and return it.

    If the thread cannot be started the socket is closed and the error raised.
    """
    thread = threading.Thread(target=func, args=(sock,), daemon=True)
    try:
        thread.start()
    except RuntimeError:
        sock.close()
        raise
    return thread