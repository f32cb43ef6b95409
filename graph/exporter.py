"""Node/edge projection of the stored combination graph."""

from __future__ import annotations

from graph.triple_store import TripleStore
from graph.types import Edge, GraphExport, Triple


class GraphExporter:
    """Flattens stored triples for visualization consumers.

    Read-only: each export takes a fresh snapshot of the store and may run
    alongside any number of concurrent resolutions.
    """

    def __init__(self, store: TripleStore) -> None:
        self.store = store

    def explore(self) -> list[Triple]:
        """Return the raw stored triples."""
        return self.store.all()

    def export_graph(self) -> GraphExport:
        """Every name becomes a node; each triple adds ``a -> c`` and ``b -> c``."""
        graph = GraphExport()
        for triple in self.store.all():
            graph.nodes.update((triple.a, triple.b, triple.c))
            graph.edges.append(Edge(source=triple.a, target=triple.c))
            graph.edges.append(Edge(source=triple.b, target=triple.c))
        return graph
