"""Graph export models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Edge(BaseModel):
    """Directed edge from an input element to the element it produced."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str


class GraphExport(BaseModel):
    """Node/edge view of every stored combination."""

    nodes: set[str] = Field(default_factory=set)
    edges: list[Edge] = Field(default_factory=list)

    def to_dict(self) -> dict[str, list]:
        return {
            "nodes": sorted(self.nodes),
            "edges": [edge.model_dump() for edge in self.edges],
        }
