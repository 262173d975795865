"""
Graphviz DOT backend.

Tables are held in a ``networkx.DiGraph`` keyed by table name and turned
into a ``graphviz.Digraph`` only when rendering.
"""

import logging
from typing import TextIO

import graphviz
import networkx as nx

from ...errors import ConstructionError, RenderError
from ...schema import DEFAULT_TITLE, OutputType
from ..scale import dot_area
from .base import GraphBackend, register_backend

_log = logging.getLogger(__name__)

GRAPH_ATTRIBUTES = {
    "overlap": "false",
    "splines": "true",
    "fixedsize": "true",
}


@register_backend(OutputType.GRAPHVIZ)
class DotBackend(GraphBackend):
    """Directed graph rendered as DOT text."""

    extension = ".gv"

    def __init__(self, title: str = DEFAULT_TITLE):
        super().__init__(title=title)
        self.graph = nx.DiGraph()

    def add_node(self, name: str, weight: int) -> None:
        area = str(dot_area(weight))
        # Re-adding a name merges into the existing node.
        self.graph.add_node(
            name,
            weight=weight,
            comment=name,
            shape="circle",
            width=area,
            height=area,
        )

    def add_edge(self, source: str, target: str, label: str) -> bool:
        for vertex in (source, target):
            if vertex not in self.graph:
                raise ConstructionError(f"vertex not found: {vertex}")
        if self.graph.has_edge(source, target):
            existing = self.graph.edges[source, target]["comment"]
            _log.info(
                "Edge %s -> %s already exists (fk col: %s), skipping fk col: %s",
                source, target, existing, label,
            )
            return False
        self.graph.add_edge(source, target, comment=label)
        return True

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def to_digraph(self) -> graphviz.Digraph:
        """Build the graphviz representation, nodes then edges in insertion order."""
        dot = graphviz.Digraph(comment=self.title, graph_attr=GRAPH_ATTRIBUTES)
        for name, attrs in self.graph.nodes(data=True):
            dot.node(
                name,
                comment=attrs["comment"],
                shape=attrs["shape"],
                weight=str(attrs["weight"]),
                width=attrs["width"],
                height=attrs["height"],
            )
        for source, target, attrs in self.graph.edges(data=True):
            dot.edge(source, target, label=attrs["comment"], comment=attrs["comment"])
        return dot

    def render(self, sink: TextIO) -> None:
        try:
            source = self.to_digraph().source
        except (TypeError, ValueError) as e:
            raise RenderError(f"Error drawing graph: {e}") from e
        sink.write(source)
