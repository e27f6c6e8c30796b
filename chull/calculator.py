"""A stateful convex hull calculator driven by text commands."""

from __future__ import annotations

import re
import sys
from itertools import islice
from typing import Iterable

from chull.geometry import Point, graham_scan, hull_area

HELP_TEXT = "Commands: Newgraph n, CH, Newpoint x,y, Removepoint x,y, help, exit"
UNKNOWN_COMMAND = "Unknown command."
UNKNOWN_COMMAND_HINT = "Unknown command. Type 'help' for available commands."
EXIT = "exit"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_COMMAND = re.compile(r"\s*(\S*)(.*)", re.DOTALL)


def _parse_number(text: str) -> float:
    """Parse the leading number of ``text``; raise ValueError if out of range."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    literal = match.group(1)
    value = float(literal)
    lowered = literal.lower()
    if value in (float("inf"), float("-inf")) and "inf" not in lowered:
        raise ValueError(f"number out of range: {literal!r}")
    if value == 0.0:
        mantissa = re.split(r"[eE]", literal, maxsplit=1)[0]
        if any(ch in "123456789" for ch in mantissa):
            raise ValueError(f"number out of range: {literal!r}")
    return value


def _parse_count(text: str) -> int:
    """Read a leading integer as a stream extraction would; 0 when absent."""
    match = _INTEGER.match(text)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


def _split_command(command: str) -> tuple[str, str]:
    """Split a command line into its first word and the rest of the line."""
    match = _COMMAND.match(command)
    assert match is not None
    rest = match.group(2).split("\n", 1)[0]
    return match.group(1), rest


def parse_point(text: str) -> Point:
    """Parse ``"x,y"`` into a Point; malformed text gives the origin."""
    x_text, comma, y_text = text.partition(",")
    if comma:
        try:
            return Point(_parse_number(x_text), _parse_number(y_text))
        except ValueError:
            print(f"Error parsing point: {text}", file=sys.stderr)
    return Point()


class ConvexHullCalculator:
    """Holds a set of points and answers commands about their convex hull."""

    def __init__(self) -> None:
        self.points: list[Point] = []

    def new_graph(self, n: int, point_lines: Iterable[str] | None = None) -> None:
        """Start a new graph.

        With ``point_lines`` the graph holds the first ``n`` of them, parsed.
        Without, the current points are truncated or padded with the origin
        to exactly ``n`` points.
        """
        if point_lines is None:
            if n < 0:
                raise ValueError(f"negative point count: {n}")
            del self.points[n:]
            self.points.extend(Point() for _ in range(n - len(self.points)))
            return
        self.points = [parse_point(line) for line in islice(point_lines, max(n, 0))]

    def calculate_hull(self) -> float:
        """Area of the convex hull of the current points."""
        if not self.points:
            return 0.0
        return hull_area(graham_scan(self.points))

    def add_point(self, text: str) -> None:
        """Parse ``text`` as a point and add it to the graph."""
        self.points.append(parse_point(text.lstrip(" \t")))

    def add(self, point: Point) -> None:
        """Add a point to the graph."""
        self.points.append(point)

    def remove_point(self, text: str) -> bool:
        """Remove the first point matching ``text``; return whether one was found."""
        target = parse_point(text.lstrip(" \t"))
        for index, point in enumerate(self.points):
            if point.matches(target):
                del self.points[index]
                return True
        return False

    def process_command(
        self, command: str, followup_lines: Iterable[str] | None = None
    ) -> str:
        """Run one text command and return the reply.

        When ``followup_lines`` is given, ``Newgraph n`` takes its points from
        them and ``help`` is understood; otherwise ``Newgraph n`` resizes the
        current graph and an empty command means ``exit``.
        """
        cmd, rest = _split_command(command)
        with_followups = followup_lines is not None

        if cmd == "Newgraph":
            n = _parse_count(rest)
            self.new_graph(n, followup_lines)
            return f"Graph created with {n} points."
        if cmd == "CH":
            return f"{self.calculate_hull():f}"
        if cmd == "Newpoint":
            self.add_point(rest)
            return "Point added."
        if cmd == "Removepoint":
            return "Point removed." if self.remove_point(rest) else "Point not found."
        if with_followups:
            if cmd == "help":
                return HELP_TEXT
            if cmd == "exit":
                return EXIT
            return UNKNOWN_COMMAND_HINT
        if cmd in ("exit", ""):
            return EXIT
        return UNKNOWN_COMMAND