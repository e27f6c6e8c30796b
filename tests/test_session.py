import socket

from chull.calculator import ConvexHullCalculator
from chull.geometry import Point
from chull.session import (
    NEWGRAPH_USAGE,
    POINT_FORMAT_ERROR,
    POINTS_PROMPT,
    CommandSession,
    create_listener,
)


def test_newgraph_prompts_and_waits_for_points():
    session = CommandSession()
    assert session.handle("Newgraph 2") == POINTS_PROMPT + "\n"
    assert session.waiting_for_points == 2


def test_points_are_added_while_waiting():
    session = CommandSession()
    session.handle("Newgraph 2")
    assert session.handle("1,2\n") == "Point (1,2) was added.\n"
    assert session.waiting_for_points == 1
    assert session.calculator.points[-1] == Point(1.0, 2.0)


def test_newgraph_resizes_before_collecting_points():
    session = CommandSession()
    session.handle("Newgraph 3")
    for line in ("0,0", "4,0", "0,3"):
        session.handle(line)
    assert session.waiting_for_points == 0
    assert len(session.calculator.points) == 6
    assert session.handle("CH") == "6.000000\n"


def test_message_without_comma_while_waiting_is_rejected():
    session = CommandSession()
    session.handle("Newgraph 1")
    assert session.handle("CH") == POINT_FORMAT_ERROR + "\n"
    assert session.waiting_for_points == 1


def test_only_first_word_is_taken_as_point():
    session = CommandSession()
    session.handle("Newgraph 1")
    assert session.handle("1, 2") == "Point (1,) was added.\n"
    assert session.calculator.points[-1] == Point()


def test_newgraph_without_count_reports_usage():
    session = CommandSession()
    assert session.handle("Newgraph") == NEWGRAPH_USAGE + "\n"
    assert session.handle("Newgraph abc") == NEWGRAPH_USAGE + "\n"
    assert session.waiting_for_points == 0


def test_negative_newgraph_reports_usage():
    session = CommandSession()
    assert session.handle("Newgraph -1") == NEWGRAPH_USAGE + "\n"
    assert session.waiting_for_points == 0


def test_other_commands_go_to_calculator():
    session = CommandSession()
    assert session.handle("CH") == "0.000000\n"
    assert session.handle("Newpoint 1,2") == "Point added.\n"
    assert session.handle("Removepoint 5,5") == "Point not found.\n"
    assert session.handle("Removepoint 1,2") == "Point removed.\n"
    assert session.handle("bogus") == "Unknown command.\n"


def test_session_uses_given_calculator():
    calculator = ConvexHullCalculator()
    session = CommandSession(calculator)
    session.handle("Newpoint 3,4")
    assert calculator.points == [Point(3.0, 4.0)]


def test_reset_stops_waiting():
    session = CommandSession()
    session.handle("Newgraph 4")
    session.reset()
    assert session.waiting_for_points == 0
    assert session.handle("Newpoint 1,1") == "Point added.\n"


def test_create_listener_accepts_connections():
    listener = create_listener("127.0.0.1", 0)
    try:
        port = listener.getsockname()[1]
        assert port > 0
        assert listener.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) != 0
        with socket.create_connection(("127.0.0.1", port), timeout=5):
            conn, _ = listener.accept()
            conn.close()
    finally:
        listener.close()