"""Interactive menu for building relation graphs and querying them."""

from __future__ import annotations

import argparse
import os
import re
import struct
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

from graphdata.binfile import read_relations
from graphdata.components import ConnectedComponentAnalyzer
from graphdata.graph import AdjacencyList, Message
from graphdata.paths import dijkstra_shortest_path, format_path, prim_costs
from graphdata.report import format_adjacency_list, format_float, output_name

PROMPT = (
    "**********  Graph data applications  *********\n"
    "* 1. Build a graph and connected components  *\n"
    "* 2. Find shortest paths by Dijkstra         *\n"
    "* 3. Generate minimum spanning tree(s)       *\n"
    "**********************************************\n"
    "Input a choice(0, 1, 2, 3) [0: QUIT]: "
)

_REAL_PROMPT = "\nInput a real number in (0,1]: "
_NUMBER_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")
_FLOAT32 = struct.Struct("<f")
_INT_MAX = 2**31 - 1


def parse_real_number(text: str) -> float | None:
    """Parse the leading decimal number of ``text`` at single precision.

    Text holding any letter, or not starting with a number, gives ``None``,
    as does a value outside the single-precision range.
    """
    if any(char.isalpha() for char in text):
        return None
    match = _NUMBER_PATTERN.match(text)
    if match is None:
        return None
    parsed = float(match.group())
    try:
        (value,) = _FLOAT32.unpack(_FLOAT32.pack(parsed))
    except OverflowError:
        return None
    if value == 0 and parsed != 0:
        return None
    return value


def _command_number(command: str) -> int:
    value = int(command) if command else 0
    return value if value <= _INT_MAX else 0


class GraphSystem:
    """Menu-driven session over one graph, reading tokens from ``stdin``."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        workdir: str | os.PathLike[str] | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._workdir = Path(workdir) if workdir is not None else Path.cwd()
        self._tokens = self._read_tokens()
        self._messages: list[Message] = []
        self._graph = AdjacencyList()
        self._analyzer = ConnectedComponentAnalyzer()
        self._file_number = ""
        self._threshold = 0.0

    def _read_tokens(self) -> Iterator[str]:
        for line in self._stdin:
            yield from line.split()

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _scan(self, prompt: str) -> str:
        self._write(prompt)
        token = next(self._tokens, None)
        if token is None:
            raise EOFError("input exhausted")
        return token

    def execute_command(self, command: str) -> bool:
        """Run one menu command; return False when the session should end."""
        if not all(char in "0123456789" for char in command):
            self._write("\nThe command does not exist!\n\n")
            return True
        number = _command_number(command)
        if number == 0:
            return False
        if number == 1:
            self.build_graph()
            self.calculate_connected_components()
        elif number == 2:
            self.find_shortest_path()
        elif number == 3:
            self.generate_minimum_spanning_tree()
        else:
            self._write("\nThe command does not exist!\n\n")
        return True

    def _scan_real_number(self) -> float:
        value = parse_real_number(self._scan(_REAL_PROMPT))
        while value is None or not 0 < value <= 1:
            if value is not None and value >= 0:
                self._write("\n### It is NOT in (0,1] ###\n")
            value = parse_real_number(self._scan(_REAL_PROMPT))
        return value

    def build_graph(self) -> None:
        """Read a relation file below a weight threshold and write its lists."""
        self._messages.clear()
        self._graph.clear()

        threshold = self._scan_real_number()
        file_number = self._scan("\nInput a file number ([0] Quit): ")
        file_name = f"pairs{file_number}.bin"
        if file_number == "0":
            return
        source = self._workdir / file_name
        if not source.exists():
            self._write(f"\n### {file_name} does not exist! ###\n")
            return

        self._messages = read_relations(source, threshold)
        for message in self._messages:
            self._graph.insert(message)
        nodes = self._graph.node_count()
        self._write(
            f"\n<<< There are {len(self._graph)} IDs in total. >>>\n\n"
            f"<<< There are {nodes} nodes in adjacency lists. >>>\n\n"
        )
        target = self._workdir / output_name(file_number, threshold, "adj")
        target.write_text(format_adjacency_list(self._graph))

        self._file_number = file_number
        self._threshold = threshold

    def calculate_connected_components(self) -> None:
        """Compute components of the current graph and write their report."""
        if not self._graph:
            self._write("### There is no graph and try it again. ###\n\n")
            return
        self._analyzer.compute(self._graph)
        target = self._workdir / output_name(self._file_number, self._threshold, "cc")
        target.write_text(self._analyzer.format_results())

        lines = [
            f"<<< There are {len(self._analyzer)} connected components in total. >>>\n"
        ]
        for count, component in enumerate(self._analyzer, start=1):
            lines.append(
                f"{{{count:>2}}} Connected Component: size = {len(component)}\n"
            )
        lines.append("\n")
        self._write("".join(lines))

    def _print_all(self) -> None:
        self._write("\n" + "".join(f"{vertex:>12}" for vertex in self._graph))

    def find_shortest_path(self) -> None:
        """Ask for ids and append their shortest-path distances to a report."""
        if not self._graph:
            self._write("### There is no graph and choose 1 first. ###\n\n")
            return
        name = f"pairs{self._file_number}_{format_float(self._threshold)}.ds"
        with open(self._workdir / name, "a") as out:
            while True:
                self._print_all()
                vertex = self._scan("\nInput a student ID [0: exit] ")
                if vertex == "0":
                    self._write("\n")
                    return
                if vertex not in self._graph:
                    self._write("\n### the student id does not exist! ###\n")
                    continue
                self._write("\n")
                component = self._analyzer.find(vertex)
                path = dijkstra_shortest_path(self._graph, component, vertex)
                out.write(format_path(vertex, path))

    def generate_minimum_spanning_tree(self) -> None:
        """Print the minimum spanning tree cost of every component."""
        if not self._graph:
            self._write("### There is no graph and choose 1 first. ###\n\n")
            return
        lines = [
            f"The MST cost of connected component {{{count:>2}}} = {cost:.2f}\n"
            for count, cost in enumerate(
                prim_costs(self._graph, self._analyzer), start=1
            )
        ]
        lines.append("\n")
        self._write("".join(lines))

    def run(self) -> None:
        """Show the menu and run commands until quit or end of input."""
        try:
            while self.execute_command(self._scan(PROMPT)):
                pass
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="graphdata",
        description="Build relation graphs and query components, paths and trees.",
    )
    parser.parse_args(argv)
    GraphSystem(sys.stdin, sys.stdout, Path.cwd()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())