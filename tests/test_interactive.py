import io

from chull.calculator import ConvexHullCalculator
from chull.geometry import Point
from chull.interactive import main, run_session


def test_newgraph_then_ch():
    replies = list(run_session(["Newgraph 3", "0,0", "4,0", "0,3", "CH"]))
    assert replies == ["Graph created with 3 points.", "6.000000"]


def test_stops_at_exit():
    calc = ConvexHullCalculator()
    replies = list(run_session(["Newpoint 1,1", "exit", "Newpoint 2,2"], calc))
    assert replies == ["Point added."]
    assert calc.points == [Point(1, 1)]


def test_stops_at_empty_line():
    replies = list(run_session(["Newpoint 1,1\n", "\n", "CH\n"]))
    assert replies == ["Point added."]


def test_newgraph_consumes_following_lines():
    calc = ConvexHullCalculator()
    replies = list(run_session(["Newgraph 1", "CH", "Newpoint 2,2"], calc))
    assert replies == ["Graph created with 1 points.", "Point added."]
    assert calc.points == [Point(), Point(2, 2)]


def test_newgraph_stops_at_end_of_input():
    calc = ConvexHullCalculator()
    replies = list(run_session(["Newgraph 5", "1,1"], calc))
    assert replies == ["Graph created with 5 points."]
    assert calc.points == [Point(1, 1)]


def test_newgraph_replaces_points():
    calc = ConvexHullCalculator()
    calc.add_point("9,9")
    list(run_session(["Newgraph 2\n", "1,1\n", "2,2\n"], calc))
    assert calc.points == [Point(1, 1), Point(2, 2)]


def test_unknown_and_remove():
    replies = list(
        run_session(["bogus", "Newpoint 1,2", "Removepoint 1,2", "Removepoint 1,2"])
    )
    assert replies == [
        "Unknown command.",
        "Point added.",
        "Point removed.",
        "Point not found.",
    ]


def test_ch_matches_calculator():
    calc = ConvexHullCalculator()
    replies = list(run_session(["Newgraph 3", "0,0", "5,1", "1,5", "CH"], calc))
    assert replies[-1] == f"{calc.calculate_hull():f}"


def test_main_prints_replies(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Newpoint 1,1\nbogus\nexit\nCH\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["Point added.", "Unknown command."]