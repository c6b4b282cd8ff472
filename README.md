# graphdata

`graphdata` is an interactive console tool and a small library for
undirected weighted graphs built from binary files of ID pairs.

In a `pairs<N>.bin` file, each record holds two identifiers and then a
weight. Each identifier takes 12 bytes and is padded with NUL bytes. The
weight is a 4-byte little-endian float. A pair whose weight is at most a
chosen threshold becomes an edge in both directions. The threshold is
compared at single precision. An incomplete record at the end of a file
is ignored.

## Installing

```
pip install .
```

Install the test extra to run the tests:

```
pip install .[test]
pytest
```

## Running

```
graphdata
```

The tool reads whitespace-separated tokens from standard input. It reads
files from the current directory and writes its reports there too. The
menu offers these choices:

- **1** builds a graph and its connected components.
  - It asks for a threshold in (0,1]. Text that contains a letter, or that
    does not start with a number, is asked for again. A number outside the
    range is asked for again with the message `### It is NOT in (0,1] ###`.
  - It then asks for a file number. `0` cancels.
  - It reads `pairs<N>.bin` and prints the number of IDs and of
    adjacency-list entries.
  - It writes the adjacency lists to `pairs<N>_<threshold>.adj`.
  - It writes the connected components to `pairs<N>_<threshold>.cc`. The
    components are listed largest first. Components of the same size come
    in order of their smallest ID, greatest first.
  - A threshold of exactly 1 gives the file names `pairs<N>_1..adj` and
    `pairs<N>_1..cc`.
- **2** asks for IDs one at a time. For each ID it appends the shortest
  distance to every other vertex of that ID's component to
  `pairs<N>_<threshold>.ds`. A threshold of 1 gives the name
  `pairs<N>_1.ds` for this file. An unknown ID gives a message, and the
  tool asks again. `0` returns to the menu.
- **3** prints the minimum spanning tree cost of every connected component,
  in the same order as the `.cc` report.
- **0** quits. The session also ends when the input runs out.

Choices 2 and 3 need a graph built with choice 1 first.

## Using the library

```python
from graphdata.binfile import read_relations, write_relations
from graphdata.graph import AdjacencyList, Message
from graphdata.components import ConnectedComponentAnalyzer
from graphdata.paths import dijkstra_shortest_path, prim_costs, format_path
from graphdata.report import format_adjacency_list, output_name

write_relations("pairs1.bin", [Message("A", "B", 0.25), Message("B", "C", 0.5)])

graph = AdjacencyList()
for message in read_relations("pairs1.bin", 0.5):
    graph.insert(message)

print(format_adjacency_list(graph))

analyzer = ConnectedComponentAnalyzer()
analyzer.compute(graph)
print(analyzer.format_results())

path = dijkstra_shortest_path(graph, analyzer.find("A"), "A")
print(format_path("A", path))
print(prim_costs(graph, analyzer))
print(output_name("1", 0.5, "cc"))   # pairs1_0.5.cc
```

### Modules

- **`graphdata.graph`** provides `Message`, `Edge` and `AdjacencyList`.
  - An `AdjacencyList` iterates over its vertex IDs in ascending order.
  - `items()` yields each vertex with its edges. The edges are sorted by
    neighbour ID.
  - `node_count()` counts all adjacency-list entries.
- **`graphdata.binfile`** provides `read_relations(path, threshold)` and
  `write_relations(path, messages)`.
- **`graphdata.components`** provides `ConnectedComponentAnalyzer`.
  - `compute()` finds the components of a graph.
  - `find()` returns the component that holds a vertex. It raises
    `ComponentNotFoundError` if no component holds it.
  - `format_results()` renders the `.cc` report.
- **`graphdata.paths`** provides the following:
  - `dijkstra_shortest_path` returns the settled vertices as `Edge`
    values, in the order they are settled, each with its distance.
  - `prim_costs` returns one minimum spanning tree cost per component.
  - `format_path` renders the `.ds` entries.
- **`graphdata.report`** provides the following:
  - `format_float` gives the shortest single-precision text form of a value.
  - `output_name` gives the name of a report file.
  - `format_adjacency_list` renders the `.adj` report.
- **`graphdata.cli`** provides `GraphSystem`, which runs the menu over any
  pair of text streams and a working directory. It also provides `main`.

## Limits

Shortest paths are reported as distances only. The routes themselves are
not recorded.