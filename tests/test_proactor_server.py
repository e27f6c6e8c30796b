import socket

import pytest

from chull.proactor_server import ProactorServer
from chull.session import NEWGRAPH_USAGE, POINT_FORMAT_ERROR, POINTS_PROMPT


def _reply(sock, text):
    sock.sendall(text.encode())
    chunks = []
    while not chunks or not chunks[-1].endswith(b"\n"):
        chunk = sock.recv(1024)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode()


@pytest.fixture
def proactor():
    server = ProactorServer("127.0.0.1", 0)
    server.bind()
    address = server.listener.getsockname()
    thread = server.start()
    yield server, address, thread
    server.stop()
    thread.join(timeout=5)


@pytest.mark.parametrize(
    "messages, expected",
    [
        (
            ["Newgraph 3", "0,0", "4,0", "0,3", "CH"],
            [
                POINTS_PROMPT,
                "Point (0,0) was added.",
                "Point (4,0) was added.",
                "Point (0,3) was added.",
                "6.000000",
            ],
        ),
        (["Newgraph"], [NEWGRAPH_USAGE]),
        (["Newgraph 1", "7"], [POINTS_PROMPT, POINT_FORMAT_ERROR]),
        (["bogus"], ["Unknown command."]),
    ],
    ids=["triangle", "usage", "no-comma", "unknown"],
)
def test_dialogue(proactor, messages, expected):
    _, address, _ = proactor
    with socket.create_connection(address, timeout=5) as client:
        replies = [_reply(client, text) for text in messages]
    assert replies == [line + "\n" for line in expected]


def test_accepting_thread_is_daemon_and_stops(proactor):
    server, address, thread = proactor
    assert thread.daemon is True
    assert thread.is_alive()
    server.stop()
    thread.join(timeout=5)
    assert not thread.is_alive()
    with pytest.raises(OSError):
        socket.create_connection(address, timeout=1)