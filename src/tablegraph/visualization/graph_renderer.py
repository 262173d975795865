from __future__ import annotations

import html
import json
from typing import Any, Dict, TextIO

from ..errors import RenderError


def render_graph_html(
    graph_data: Dict[str, Any], sink: TextIO, title: str = "Table relationships"
) -> None:
    """Write an interactive D3 force-directed page for ``graph_data`` to ``sink``."""

    try:
        safe_json = json.dumps(graph_data).replace("</", "<\\/")
    except (TypeError, ValueError) as e:
        raise RenderError(f"Error drawing graph: {e}") from e
    page = HTML_TEMPLATE.replace("__TITLE__", html.escape(title)).replace(
        "__GRAPH_DATA__", safe_json
    )
    sink.write(page)


HTML_TEMPLATE_BASE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>__TITLE__</title>
  <script src="https://d3js.org/d3.v7.min.js"></script>
  <style>
    body {{
      font-family: Arial, Helvetica, sans-serif;
      margin: 0;
      overflow: hidden;
      background: #fafafa;
    }}
    svg {{
      width: 100vw;
      height: 100vh;
    }}
    .node circle {{
      fill: #4f81bd;
      stroke: #fff;
      stroke-width: 1.5px;
    }}
    .node text {{
      font-size: 11px;
      pointer-events: none;
    }}
    .link {{
      stroke: #999;
      stroke-opacity: 0.7;
    }}
    .link-label {{
      font-size: 9px;
      fill: #ad1457;
      pointer-events: none;
    }}
    #tooltip {{
      position: absolute;
      padding: 0.4rem 0.6rem;
      background: #fff;
      border: 1px solid #ddd;
      border-radius: 3px;
      font-size: 0.85rem;
      display: none;
    }}
  </style>
</head>
<body>
  <svg></svg>
  <div id="tooltip"></div>

  <script>
    const graphData = __GRAPH_DATA__;
    const minRadius = 4;
    const svg = d3.select('svg');
    const width = window.innerWidth;
    const height = window.innerHeight;
    const tooltip = d3.select('#tooltip');
    const container = svg.append('g');

    svg.call(d3.zoom().on('zoom', (event) => {{
      container.attr('transform', event.transform);
    }}));

    svg.append('defs').append('marker')
      .attr('id', 'arrow')
      .attr('viewBox', '0 -5 10 10')
      .attr('refX', 10)
      .attr('markerWidth', 6)
      .attr('markerHeight', 6)
      .attr('orient', 'auto')
      .append('path')
      .attr('d', 'M0,-5L10,0L0,5')
      .attr('fill', '#999');

    const radius = d => Math.max(d.nodeRadius, minRadius);

    const simulation = d3.forceSimulation(graphData.nodes)
      .force('link', d3.forceLink(graphData.relationships).id(d => d.id).distance(120))
      .force('charge', d3.forceManyBody().strength(-300))
      .force('center', d3.forceCenter(width / 2, height / 2))
      .force('collide', d3.forceCollide().radius(d => radius(d) + 4));

    const link = container.append('g')
      .selectAll('line')
      .data(graphData.relationships)
      .join('line')
      .attr('class', 'link')
      .attr('marker-end', 'url(#arrow)');

    const linkLabel = container.append('g')
      .selectAll('text')
      .data(graphData.relationships)
      .join('text')
      .attr('class', 'link-label')
      .text(d => d.type);

    const node = container.append('g')
      .selectAll('g')
      .data(graphData.nodes)
      .join('g')
      .attr('class', 'node')
      .call(d3.drag()
        .on('start', (event, d) => {{
          if (!event.active) simulation.alphaTarget(0.3).restart();
          d.fx = d.x;
          d.fy = d.y;
        }})
        .on('drag', (event, d) => {{
          d.fx = event.x;
          d.fy = event.y;
        }})
        .on('end', (event, d) => {{
          if (!event.active) simulation.alphaTarget(0);
          d.fx = null;
          d.fy = null;
        }}));

    node.append('circle').attr('r', radius);
    node.append('text')
      .attr('dx', d => radius(d) + 3)
      .attr('dy', '0.35em')
      .text(d => d.labels.join(', '));

    node
      .on('mouseover', (event, d) => {{
        tooltip.style('display', 'block')
          .html(`<strong>${{d.id}}</strong><br/>size: ${{d.properties.size}}`);
      }})
      .on('mousemove', (event) => {{
        tooltip.style('left', (event.pageX + 12) + 'px')
          .style('top', (event.pageY + 12) + 'px');
      }})
      .on('mouseout', () => tooltip.style('display', 'none'));

    function edgeEnd(d) {{
      const dx = d.target.x - d.source.x;
      const dy = d.target.y - d.source.y;
      const dist = Math.sqrt(dx * dx + dy * dy) || 1;
      const r = radius(d.target);
      return {{ x: d.target.x - dx / dist * r, y: d.target.y - dy / dist * r }};
    }}

    simulation.on('tick', () => {{
      link
        .attr('x1', d => d.source.x)
        .attr('y1', d => d.source.y)
        .attr('x2', d => edgeEnd(d).x)
        .attr('y2', d => edgeEnd(d).y);
      linkLabel
        .attr('x', d => (d.source.x + d.target.x) / 2)
        .attr('y', d => (d.source.y + d.target.y) / 2);
      node.attr('transform', d => `translate(${{d.x}},${{d.y}})`);
    }});
  </script>
</body>
</html>
"""

HTML_TEMPLATE = HTML_TEMPLATE_BASE.replace("{{", "{").replace("}}", "}")
