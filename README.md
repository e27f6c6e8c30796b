# chull

Computes the area of the convex hull of a set of 2D points using the Graham
scan, and serves the same calculation over TCP in several concurrency styles.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Batch area

`chull-area` reads a point count on the first line of standard input, followed
by one point per line written as `x,y`, and prints the area of the hull.
A line without a comma, or a line missing at the end of the input, counts as
the point `0,0`.

```
printf '4\n0,0\n4,0\n4,3\n0,3\n' | chull-area
```

prints `12`.

## Interactive commands

`chull-interactive` reads commands line by line from standard input and prints
one reply per command:

| Command           | Effect                                                    | Reply                              |
|-------------------|-----------------------------------------------------------|------------------------------------|
| `Newgraph n`      | start a new graph; the next `n` lines are its points      | `Graph created with n points.`     |
| `CH`              | area of the convex hull of the current points             | the area, six decimals             |
| `Newpoint x,y`    | add a point                                               | `Point added.`                     |
| `Removepoint x,y` | remove the first matching point, if there is one          | `Point removed.` / `Point not found.` |
| `exit`            | end the session (an empty line does the same)             | none                               |

Any other command gets `Unknown command.`. A point that cannot be parsed is
taken as `0,0` and an error is written to standard error.

```
$ chull-interactive
Newgraph 3
0,0
2,0
0,2
Graph created with 3 points.
CH
2.000000
```

## Servers

Each server listens on TCP port 9034 by default and speaks the same command
language; `--host` and `--port` choose another address.

```
chull-select-server     # single thread, select() loop
chull-reactor-server    # single thread, callbacks registered with a reactor
chull-threaded-server   # one thread per client
chull-proactor-server   # one thread per client, started through a proactor
```

Every received message is one command and every reply ends with a newline.
All clients share one graph, and commands are answered one at a time.

`Newgraph n` first resizes the current graph to `n` points, padding it with
`0,0` or dropping points from the end, and replies
`Insert points as x, y. line by line.`; the next `n` messages are then each
added as a point (`Point (x,y) was added.`). A message without a comma while
points are expected gets `Error. Insert point as x, y.`. A `Newgraph` without
a valid non-negative count gets `Invalid Newgraph command. Usage: Newgraph n`.
The other commands behave as in the interactive session.

Connect with any line-oriented TCP client, for example `nc localhost 9034`.
Stop a server with Ctrl+C or SIGTERM.

The graph lives in memory only: nothing is saved between runs, and clients
cannot keep separate graphs.

## Library use

```python
from chull.geometry import Point, graham_scan, hull_area
from chull.calculator import ConvexHullCalculator

hull = graham_scan([Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3), Point(2, 1)])
print(hull_area(hull))  # 12.0

calc = ConvexHullCalculator()
calc.add_point("0,0")
calc.add_point("1,0")
calc.add_point("0,1")
print(calc.calculate_hull())  # 0.5
print(calc.process_command("CH"))  # 0.500000
```

Other building blocks:

- `chull.session.CommandSession` answers server messages; `create_listener`
  binds a listening socket.
- `chull.reactor.Reactor` calls a handler whenever a watched file descriptor
  is readable.
- `chull.proactor.start_proactor` runs a handler for a socket on its own
  daemon thread.
- `SelectServer`, `ReactorServer`, `ThreadedServer` and `ProactorServer` are
  the server classes behind the commands above.