"""Visualization helpers for rendering table relationship graphs."""

from .graph_renderer import render_graph_html
from .scale import d3_radius, dot_area, size_label

__all__ = ["render_graph_html", "d3_radius", "dot_area", "size_label"]
