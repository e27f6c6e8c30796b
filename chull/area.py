"""Read points from standard input and print the area of their convex hull."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Sequence

from chull.geometry import Point, graham_scan, hull_area

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_number(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def _parse_line(line: str) -> Point:
    line = line.rstrip("\r\n")
    x_text, comma, y_text = line.partition(",")
    if not comma:
        return Point()
    return Point(_parse_number(x_text), _parse_number(y_text))


def read_points(stream: Iterable[str]) -> list[Point]:
    """Read a point count line followed by that many ``x,y`` lines.

    Lines without a comma, and lines missing at the end of the input,
    stand for the origin.
    """
    lines = iter(stream)
    tokens = next(lines, "").split()
    if not tokens:
        raise ValueError("missing point count")
    count = int(tokens[0])
    if count < 0:
        raise ValueError(f"negative point count: {count}")
    return [_parse_line(next(lines, "")) for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the convex hull area of the points given on standard input."""
    parser = argparse.ArgumentParser(
        description="Print the area of the convex hull of points read from stdin."
    )
    parser.parse_args(argv)
    points = read_points(sys.stdin)
    print(f"{hull_area(graham_scan(points)):g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())