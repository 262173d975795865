"""
D3 backend: accumulates nodes and relationships for a force-directed page.
"""

from typing import Any, Dict, List, TextIO

from ...schema import DEFAULT_TITLE, D3Node, D3Relationship, OutputType
from ..graph_renderer import render_graph_html
from ..scale import d3_radius, size_label
from .base import GraphBackend, register_backend


@register_backend(OutputType.D3)
class D3Backend(GraphBackend):
    """Ordered node and relationship lists rendered as a standalone HTML page.

    Relationships are never de-duplicated: a foreign key repeated towards the
    same table produces one entry per occurrence.
    """

    extension = ".html"

    def __init__(self, title: str = DEFAULT_TITLE):
        super().__init__(title=title)
        self.nodes: List[D3Node] = []
        self.relationships: List[D3Relationship] = []

    def add_node(self, name: str, weight: int) -> None:
        self.nodes.append(
            D3Node(
                id=name,
                labels=[name],
                properties={"size": size_label(weight)},
                nodeRadius=d3_radius(weight),
            )
        )

    def add_edge(self, source: str, target: str, label: str) -> bool:
        self.relationships.append(
            D3Relationship(
                id=str(len(self.relationships)),
                type=label,
                source=source,
                target=target,
                labels=[label],
                properties={"from": source, "to": target},
            )
        )
        return True

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.relationships)

    def graph_data(self) -> Dict[str, Any]:
        return {
            "nodes": [node.model_dump() for node in self.nodes],
            "relationships": [rel.model_dump() for rel in self.relationships],
        }

    def render(self, sink: TextIO) -> None:
        render_graph_html(self.graph_data(), sink, title=self.title)
