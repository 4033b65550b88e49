"""
flowchart.py — SVG Flowchart Renderer
=====================================
Pure rendering function: Layout + highlighted node id → SVG string.

Design decisions:
  - NO mutation.  The caller passes in the positioned geometry and gets
    back a string; all placement decisions were made by flowgraph.layout.
  - Edges are drawn first so the node shapes sit on top of the arrows.
  - The highlighted node gets the accent fill and a glow ring.
"""

from html import escape
from typing import Dict, Optional

from flowgraph import Layout, PositionedNode, RenderableEdge


# ---------------------------------------------------------------------------
# Visual Config — color palette, fonts
# ---------------------------------------------------------------------------
class FlowchartStyle:
    bg:              str = "#0d1117"

    # node fills by kind
    node_colors: Dict[str, str] = {
        "start":    "#10b981",
        "end":      "#a855f7",
        "decision": "#f59e0b",
        "process":  "#1c2128",
    }
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    highlight_fill:     str = "#06b6d4"
    highlight_stroke:   str = "#67e8f9"
    label_color:        str = "#e6edf3"
    label_size:         int = 12

    edge_color:         str = "#818cf8"
    edge_width:         int = 2
    edge_label_color:   str = "#7d8590"
    edge_label_size:    int = 11


STYLE = FlowchartStyle()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_flowchart(
    diagram: Layout,
    highlighted_node: Optional[str] = None,
    style: FlowchartStyle = STYLE,
) -> str:
    """
    Returns an SVG string.

    Args:
        diagram          : Output of flowgraph.layout().
        highlighted_node : ID of the node the current step points at.
        style            : Visual config.
    """
    if not diagram.nodes:
        return ""

    parts = [
        f'<svg width="{diagram.width}" height="{diagram.height}" '
        f'viewBox="0 0 {diagram.width} {diagram.height}" '
        f'xmlns="http://www.w3.org/2000/svg" class="flowchart-svg">',
        '<defs><marker id="arrowhead" markerWidth="10" markerHeight="10" refX="9" refY="3" orient="auto">'
        f'<polygon points="0 0, 10 3, 0 6" fill="{style.edge_color}"/></marker></defs>',
        f'<rect width="{diagram.width}" height="{diagram.height}" fill="{style.bg}"/>',
    ]

    for edge in diagram.edges:
        parts.append(_render_edge(edge, style))

    for node in diagram.nodes:
        parts.append(_render_node(node, node.id == highlighted_node, style))

    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(node: PositionedNode, highlighted: bool, style: FlowchartStyle) -> str:
    fill = style.highlight_fill if highlighted else style.node_colors.get(node.kind.value, style.node_colors["process"])
    stroke = style.highlight_stroke if highlighted else style.node_stroke
    attrs = f'fill="{fill}" stroke="{stroke}" stroke-width="{style.node_stroke_width}"'
    css = f'flowchart-node flowchart-node-{node.kind.value}' + (" active" if highlighted else "")

    if node.shape == "ellipse":
        shape = f'<ellipse cx="{node.x}" cy="{node.y}" rx="{node.width / 2}" ry="{node.height / 2}" {attrs}/>'
    elif node.shape == "diamond":
        points = " ".join(f"{px},{py}" for px, py in node.diamond_points())
        shape = f'<polygon points="{points}" {attrs}/>'
    else:
        shape = (
            f'<rect x="{node.x - node.width / 2}" y="{node.top}" '
            f'width="{node.width}" height="{node.height}" rx="6" {attrs}/>'
        )

    glow = ""
    if highlighted:
        glow = (
            f'<rect x="{node.x - node.width / 2 - 6}" y="{node.top - 6}" '
            f'width="{node.width + 12}" height="{node.height + 12}" rx="10" fill="none" '
            f'stroke="{style.highlight_fill}" stroke-width="2" opacity="0.35"/>'
        )

    label = escape(node.label)
    return "\n".join([
        f'<g class="{css}" data-id="{escape(node.id)}">',
        glow,
        f'  {shape}',
        f'  <text x="{node.x}" y="{node.y}" text-anchor="middle" dominant-baseline="middle" '
        f'font-size="{style.label_size}" fill="{style.label_color}">{label}</text>',
        '</g>',
    ])


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(edge: RenderableEdge, style: FlowchartStyle) -> str:
    parts = [
        f'<g class="flowchart-edge" data-from="{escape(edge.source)}" data-to="{escape(edge.target)}">',
        f'  <line x1="{edge.x1}" y1="{edge.y1}" x2="{edge.x2}" y2="{edge.y2}" '
        f'stroke="{style.edge_color}" stroke-width="{style.edge_width}" marker-end="url(#arrowhead)"/>',
    ]
    if edge.label:
        lx, ly = edge.label_anchor
        parts.append(
            f'  <text x="{lx}" y="{ly}" text-anchor="middle" font-size="{style.edge_label_size}" '
            f'fill="{style.edge_label_color}">{escape(edge.label)}</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)
