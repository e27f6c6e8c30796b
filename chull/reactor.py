"""A select-based reactor calling a handler when a file descriptor is readable."""

from __future__ import annotations

import select
import threading
import time
from typing import Callable

MAX_FDS = 1024

Handler = Callable[[int], None]

_POLL_INTERVAL = 0.1


class Reactor:
    """Watches file descriptors and dispatches to their handlers in fd order."""

    def __init__(self) -> None:
        self.max_fd = -1
        self.running = True
        self._handlers: dict[int, Handler] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _check_fd(fd: int) -> None:
        if not 0 <= fd < MAX_FDS:
            raise ValueError(f"file descriptor out of range: {fd}")

    def add_fd(self, fd: int, func: Handler) -> None:
        """Watch ``fd`` and call ``func(fd)`` whenever it is readable."""
        self._check_fd(fd)
        if not callable(func):
            raise ValueError("handler must be callable")
        with self._lock:
            self._handlers[fd] = func
            self.max_fd = max(self.max_fd, fd)

    def remove_fd(self, fd: int) -> int:
        """Stop watching ``fd``; return the new highest watched fd, or -1."""
        self._check_fd(fd)
        with self._lock:
            self._handlers.pop(fd, None)
            if fd == self.max_fd:
                self.max_fd = max((f for f in self._handlers if f < fd), default=-1)
            max_fd = self.max_fd
        print(f"removed client from socket {fd}. max socket is {max_fd}")
        return max_fd

    def run(self) -> None:
        """Dispatch readable file descriptors until ``stop`` is called."""
        while self.running:
            with self._lock:
                watched = sorted(self._handlers)
            if not watched:
                time.sleep(_POLL_INTERVAL)
                continue
            readable, _, _ = select.select(watched, [], [], _POLL_INTERVAL)
            for fd in sorted(readable):
                with self._lock:
                    handler = self._handlers.get(fd)
                if handler is not None:
                    handler(fd)

    def stop(self) -> None:
        """End the event loop and forget every watched file descriptor."""
        with self._lock:
            self.running = False
            self._handlers.clear()
            self.max_fd = -1