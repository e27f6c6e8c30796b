"""Interactive convex hull session reading commands line by line."""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from typing import Iterable, Iterator, Sequence

from chull.calculator import EXIT, ConvexHullCalculator, _parse_count, _split_command


def _chomp(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def run_session(
    lines: Iterable[str], calculator: ConvexHullCalculator | None = None
) -> Iterator[str]:
    """Yield the reply to each command in ``lines`` until ``exit`` or an empty line.

    ``Newgraph n`` takes the next ``n`` lines as its points.
    """
    calc = calculator if calculator is not None else ConvexHullCalculator()
    source = (_chomp(line) for line in lines)
    for line in source:
        cmd, rest = _split_command(line)
        if cmd == "Newgraph":
            count = _parse_count(rest)
            followups = list(islice(source, max(count, 0)))
            reply = calc.process_command(line, followups)
        else:
            reply = calc.process_command(line)
        if reply == EXIT:
            return
        yield reply


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Answer convex hull commands read from stdin."
    )
    parser.parse_args(argv)
    for reply in run_session(sys.stdin):
        print(reply, flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())