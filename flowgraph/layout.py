"""
layout.py — Flow Diagram Layout
===============================
Pure function: FlowNodes + FlowEdges → positioned geometry.

    result = layout(graph.nodes, graph.edges)
    result.nodes   → [PositionedNode, …]   (same order as the input)
    result.edges   → [RenderableEdge, …]
    result.width / result.height → canvas size

Rules:
  • A node with an explicit position keeps it.  Every other node goes into
    a single centre column, one row per input index.
  • No edges supplied → consecutive nodes are chained top-to-bottom, the
    last node gets no outgoing edge.
  • Supplied edges are resolved by id; an edge naming a node that is not in
    the diagram is dropped.
  • Arrows leave the bottom of the tail box and enter the top of the head
    box.  A branch label sits just above the arrow's midpoint.

Design decisions:
  - NO mutation, NO caching.  The renderer calls this on every frame and
    gets identical geometry for identical input.
  - Only vertical chains and pre-positioned nodes are supported; there is
    no cycle handling and no crossing minimisation.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from flowgraph.node import FlowNode, NodeKind
from flowgraph.edge import FlowEdge

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Layout Config — dimensions in canvas pixels
# ---------------------------------------------------------------------------
class LayoutConfig:
    node_width:        int = 150
    node_height:       int = 60
    vertical_spacing:  int = 100
    center_x:          int = 200
    base_offset:       int = 50
    canvas_width:      int = 600
    min_height:        int = 400
    margin:            int = 100
    label_lift:        int = 5


CONFIG = LayoutConfig()


SHAPES: Dict[NodeKind, str] = {
    NodeKind.START:    "ellipse",
    NodeKind.END:      "ellipse",
    NodeKind.DECISION: "diamond",
    NodeKind.PROCESS:  "rectangle",
}


# ---------------------------------------------------------------------------
# Derived geometry
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PositionedNode:
    """FlowNode plus its resolved centre and box size."""

    id:     str
    label:  str
    kind:   NodeKind
    x:      float
    y:      float
    width:  float
    height: float

    @property
    def shape(self) -> str:
        return SHAPES.get(self.kind, "rectangle")

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    def diamond_points(self) -> List[Tuple[float, float]]:
        """Top, right, bottom, left of the bounding box."""
        hw, hh = self.width / 2, self.height / 2
        return [
            (self.x, self.y - hh),
            (self.x + hw, self.y),
            (self.x, self.y + hh),
            (self.x - hw, self.y),
        ]

    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "label":  self.label,
            "kind":   self.kind.value,
            "shape":  self.shape,
            "x":      self.x,
            "y":      self.y,
            "width":  self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class RenderableEdge:
    source:  str
    target:  str
    x1:      float
    y1:      float
    x2:      float
    y2:      float
    label:   Optional[str] = None

    @property
    def label_anchor(self) -> Tuple[float, float]:
        """Midpoint of the line, lifted slightly above it."""
        return (
            (self.x1 + self.x2) / 2,
            (self.y1 + self.y2) / 2 - CONFIG.label_lift,
        )

    def to_dict(self) -> dict:
        data = {
            "from": self.source,
            "to":   self.target,
            "x1":   self.x1,
            "y1":   self.y1,
            "x2":   self.x2,
            "y2":   self.y2,
        }
        if self.label:
            lx, ly = self.label_anchor
            data.update(label=self.label, labelX=lx, labelY=ly)
        return data


@dataclass(frozen=True)
class Layout:
    nodes:  Tuple[PositionedNode, ...]
    edges:  Tuple[RenderableEdge, ...]
    width:  int
    height: int

    def get_node(self, node_id: str) -> Optional[PositionedNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def to_dict(self) -> dict:
        return {
            "width":  self.width,
            "height": self.height,
            "nodes":  [n.to_dict() for n in self.nodes],
            "edges":  [e.to_dict() for e in self.edges],
        }


# ---------------------------------------------------------------------------
# Main Layout Function
# ---------------------------------------------------------------------------
def layout(
    nodes: Sequence[FlowNode],
    edges: Optional[Sequence[FlowEdge]] = None,
    config: LayoutConfig = CONFIG,
) -> Layout:
    """
    Returns a Layout with one PositionedNode per input node.

    Args:
        nodes  : Diagram nodes, in chain order.
        edges  : Diagram edges.  Empty / None → auto-chain.
        config : Dimensions.
    """
    positioned = tuple(_place(node, index, config) for index, node in enumerate(nodes))

    if edges:
        renderable = tuple(_resolve_edges(positioned, edges))
    else:
        renderable = tuple(_chain(positioned))

    height = max(config.min_height, len(positioned) * config.vertical_spacing + config.margin)
    return Layout(nodes=positioned, edges=renderable, width=config.canvas_width, height=height)


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------
def _place(node: FlowNode, index: int, config: LayoutConfig) -> PositionedNode:
    if node.position is not None:
        x, y = node.position
    else:
        x = config.center_x
        y = config.base_offset + index * config.vertical_spacing
    return PositionedNode(
        id=node.id,
        label=node.label,
        kind=node.kind,
        x=x,
        y=y,
        width=config.node_width,
        height=config.node_height,
    )


def _connect(src: PositionedNode, dst: PositionedNode, label: Optional[str] = None) -> RenderableEdge:
    return RenderableEdge(
        source=src.id,
        target=dst.id,
        x1=src.x,
        y1=src.bottom,
        x2=dst.x,
        y2=dst.top,
        label=label,
    )


def _chain(positioned: Tuple[PositionedNode, ...]) -> List[RenderableEdge]:
    return [_connect(a, b) for a, b in zip(positioned, positioned[1:])]


def _resolve_edges(
    positioned: Tuple[PositionedNode, ...],
    edges: Sequence[FlowEdge],
) -> List[RenderableEdge]:
    # first node wins on duplicate ids, same as a linear find
    by_id: Dict[str, PositionedNode] = {}
    for node in positioned:
        by_id.setdefault(node.id, node)

    out = []
    for edge in edges:
        src = by_id.get(edge.source)
        dst = by_id.get(edge.target)
        if src is None or dst is None:
            logger.debug("dropping edge %s → %s: unknown endpoint", edge.source, edge.target)
            continue
        out.append(_connect(src, dst, edge.label))
    return out
