"""Connected components of an adjacency-list graph."""

from __future__ import annotations

from collections.abc import Iterator

from graphdata.graph import AdjacencyList

Component = tuple[str, ...]


class ComponentNotFoundError(LookupError):
    """No computed component holds the requested vertex."""


class ConnectedComponentAnalyzer:
    """Computes components, largest first, ties broken by greatest first id."""

    def __init__(self) -> None:
        self._components: list[Component] = []

    def compute(self, graph: AdjacencyList) -> None:
        """Replace the stored components with those of ``graph``."""
        visited: set[str] = set()
        components = []
        for vertex in graph:
            if vertex not in visited:
                components.append(tuple(sorted(self._explore(vertex, graph, visited))))
        components.sort(key=lambda c: (len(c), c[0]), reverse=True)
        self._components = components

    @staticmethod
    def _explore(start: str, graph: AdjacencyList, visited: set[str]) -> list[str]:
        members = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            members.append(vertex)
            stack.extend(
                edge.id for edge in graph.edges(vertex) if edge.id not in visited
            )
        return members

    def find(self, vertex_id: str) -> Component:
        """Return the component holding ``vertex_id``."""
        for component in self._components:
            if vertex_id in component:
                return component
        raise ComponentNotFoundError(vertex_id)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def format_results(self) -> str:
        """Render the components in the report file layout."""
        lines = [
            f"<<< There are {len(self._components)} connected components in total. >>>\n"
        ]
        for count, component in enumerate(self._components, start=1):
            lines.append(
                f"{{{count:>2}}} Connected Component: size = {len(component)}\n"
            )
            for position, vertex in enumerate(component, start=1):
                lines.append(f" \t({position:>3}) {vertex}")
                if position % 8 == 0:
                    lines.append("\n")
            lines.append("\n")
        return "".join(lines)