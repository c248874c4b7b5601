# labsuite

Six small programs, each usable as a library module or as a command that
reads whitespace-separated tokens from standard input and prints its
answers to standard output. None of them needs anything beyond the
standard library.

| Command | Module | What it does |
| --- | --- | --- |
| `labsuite-battle` | `labsuite.avengers` | Battle simulation between heroes and enemies wearing suits |
| `labsuite-events` | `labsuite.events` | Highest total profit from non-overlapping events |
| `labsuite-graph-queries` | `labsuite.graph_algorithms` | Cycle check, strongly connected components, ordering and best hype path on a directed graph |
| `labsuite-graph` | `labsuite.undirected` | Undirected graph with union, intersection, complement and reachability |
| `labsuite-library` | `labsuite.library` | Books, members, borrowing and returning |
| `labsuite-poly` | `labsuite.polynomial` | Polynomial multiplication (Karatsuba), evaluation and differentiation |

## Installing

```
pip install .
```

## Using the commands

Each command reads all of standard input, for example:

```
labsuite-events < events.txt
labsuite-graph-queries < queries.txt
```

### `labsuite-battle`

Input: `k n m`, then `k` suits as `power durability energy heat` (a suit
with durability of zero or less repeats the previous suit), then `n`
heroes and `m` enemies as `name strength`. A fighter for whom no suit is
left is reported as `<name> is out of fight`. After `BattleBegin` come
commands until `End`: `Attack A B`, `Repair NAME X`,
`BoostPowerByFactor NAME Y`, `BoostPower NAME P D E H`,
`AvengerStatus NAME`, `Upgrade NAME`, `PrintBattleLog` and
`BattleStatus`.

### `labsuite-events`

Input: a count, then one event per line starting with its kind:
`1 start end ticket_price tickets_sold artist_fee logistic_cost` (concert),
`2 start end base_price total_seats venue_cost` (theatre show), any
other kind `start end base_amount decoration_cost guest_count venue_cost`
(wedding). Prints the best total profit with two decimals.

### `labsuite-graph-queries`

Input: `N M`, `N` hype scores, `M` directed edges `u v` numbered from 1,
then a query count and the queries: `1` prints `YES`/`NO` for a cycle,
`2` the number of strongly connected components and the size of the
largest, `3` the smallest-first topological order or `NO`, and any other
number the best total hype along a path of components.

### `labsuite-graph`

Commands until `end`: `Graph n e u1 v1 ...`, `union NAME n e ...`,
`intersection NAME n e ...`, `complement`, `isReachable u v`,
`add_edge u v`, `remove_edge u v` and `printGraph`. Vertices are
numbered from 0.

### `labsuite-library`

Commands until `Done`: `Book None`, `Book ExistingBook OLD_ISBN NEW_ISBN`,
`Book TITLE AUTHOR ISBN AVAILABLE TOTAL`, `UpdateCopiesCount ISBN N`,
`Member NoBorrowLimit ID NAME`, `Member ID NAME LIMIT`,
`Borrow ID ISBN`, `Return ID ISBN`, `PrintBook ISBN`, `PrintMember ID`
and `PrintLibrary`. A refused request prints `Invalid request! <reason>`.

### `labsuite-poly`

Input: a query count, then queries of the form `op datatype ...`.
`1` multiplies two polynomials (`integer`, `float`, or otherwise
complex numbers given as `real imag` pairs); `2` evaluates one at an
integer `x` (`integer`, `float`, or otherwise words repeated `x**i`
times); `3` differentiates one (`integer`, otherwise `float`). Each
polynomial is its length followed by its coefficients, lowest degree
first. Floats are printed with six decimals.

## Using the modules

```python
from labsuite.events import Concert, Wedding, EventScheduler

scheduler = EventScheduler()
scheduler.add_event(Concert(1, 3, 100, 50, 500, 200))
scheduler.add_event(Wedding(3, 5, 10000, 500, 50, 1000))
print(f"{scheduler.net_profit():.2f}")
```

```python
from labsuite.graph_algorithms import DependencyGraph

graph = DependencyGraph([5, 3, 2], [(1, 2), (2, 3)])
graph.has_cycle()    # False
graph.components()   # (3, 1)
graph.valid_order()  # [1, 2, 3]
graph.max_hype()     # 10
```

```python
from labsuite.polynomial import karatsuba, multiply, evaluate, differentiate

multiply([1, 1], [1, 1])   # [1, 2, 1]
evaluate([1, 2, 3], 2)     # 17
differentiate([5, 3, 2])   # [3, 4]
```

```python
from labsuite.undirected import Graph

g = Graph(3)
g.add_edge(0, 1)
g.is_reachable(0, 1)  # True
print(g.render())
```

```python
from labsuite.library import Book, Library, LibraryError, Member

library = Library()
library.add_book(Book("Dune", "Herbert", "isbn-1", 1, 1))
library.register_member(Member("m1", "Ann"))
library.borrow_book("m1", "isbn-1")
try:
    library.borrow_book("m1", "isbn-1")
except LibraryError as error:
    print(error)  # Copy of book not available
```

```python
from labsuite.avengers import Battle, Suit

battle = Battle()
battle.add_suit(Suit())
battle.add_suit(Suit())
battle.add_hero("Stark", 100)
battle.add_enemy("Ultron", 50)
battle.run("Attack Stark Ultron BattleStatus End".split())  # ['heroes are winning']
```

## What it does not do

Everything is held in memory for the run of one command: the library,
the battle and the graphs are not saved anywhere, and there is no
interactive prompt or server.

## Running the tests

```
pip install .[test]
pytest
```