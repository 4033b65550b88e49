"""
flowgraph/
----------
Flow-diagram data layer and layout.  Public API:

    from flowgraph import FlowNode, FlowEdge, FlowGraph, NodeKind
    from flowgraph import layout, Layout, PositionedNode, RenderableEdge
    from flowgraph import flowchart_for
"""

from flowgraph.node      import FlowNode, NodeKind
from flowgraph.edge      import FlowEdge, FlowGraph
from flowgraph.layout    import layout, Layout, LayoutConfig, PositionedNode, RenderableEdge
from flowgraph.catalogue import flowchart_for, generic_flow, CATALOGUE

__all__ = [
    "FlowNode",       "NodeKind",
    "FlowEdge",       "FlowGraph",
    "layout",         "Layout",
    "LayoutConfig",   "PositionedNode",
    "RenderableEdge",
    "flowchart_for",  "generic_flow",
    "CATALOGUE",
]
