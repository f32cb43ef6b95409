"""Graph export tests."""

from __future__ import annotations

from pathlib import Path

from graph.exporter import GraphExporter
from graph.stores.sql_store import SQLStore
from graph.triple_store import TripleStore
from graph.types import Edge


def build_exporter(tmp_path: Path) -> tuple[TripleStore, GraphExporter]:
    store = TripleStore(SQLStore(db_path=tmp_path / "wg.db"))
    return store, GraphExporter(store)


def test_export_nodes_and_edges(tmp_path: Path) -> None:
    store, exporter = build_exporter(tmp_path)
    store.insert("Fire", "Water", "Steam")
    store.insert("Fire", "Earth", "Lava")

    graph = exporter.export_graph()

    assert graph.nodes == {"Fire", "Water", "Steam", "Earth", "Lava"}
    assert set(graph.edges) == {
        Edge(source="Fire", target="Steam"),
        Edge(source="Water", target="Steam"),
        Edge(source="Fire", target="Lava"),
        Edge(source="Earth", target="Lava"),
    }
    assert len(graph.edges) == 4


def test_no_edge_between_inputs(tmp_path: Path) -> None:
    store, exporter = build_exporter(tmp_path)
    store.insert("Fire", "Water", "Steam")

    edges = {(e.source, e.target) for e in exporter.export_graph().edges}
    assert ("Fire", "Water") not in edges
    assert ("Water", "Fire") not in edges


def test_self_combination_yields_two_edges(tmp_path: Path) -> None:
    store, exporter = build_exporter(tmp_path)
    store.insert("Fire", "Fire", "Inferno")

    graph = exporter.export_graph()
    assert graph.nodes == {"Fire", "Inferno"}
    assert graph.edges == [
        Edge(source="Fire", target="Inferno"),
        Edge(source="Fire", target="Inferno"),
    ]


def test_empty_store_exports_empty_graph(tmp_path: Path) -> None:
    _, exporter = build_exporter(tmp_path)
    graph = exporter.export_graph()
    assert graph.to_dict() == {"nodes": [], "edges": []}


def test_export_does_not_mutate_store(tmp_path: Path) -> None:
    store, exporter = build_exporter(tmp_path)
    store.insert("Wind", "Water", "Wave")

    exporter.export_graph()
    exporter.export_graph()

    assert store.count() == 1
    assert exporter.explore() == store.all()


def test_to_dict_sorts_nodes(tmp_path: Path) -> None:
    store, exporter = build_exporter(tmp_path)
    store.insert("Fire", "Water", "Steam")

    payload = exporter.export_graph().to_dict()
    assert payload["nodes"] == ["Fire", "Steam", "Water"]
    assert {"source": "Fire", "target": "Steam"} in payload["edges"]
