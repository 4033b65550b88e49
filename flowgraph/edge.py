"""
edge.py — Flow-Graph Edge & Container
=====================================
A directed arrow between two flow nodes, plus the FlowGraph container that
bundles a diagram's nodes and edges.

Design decisions:
  - `source` and `target` are node-id strings, NOT FlowNode references.
    This keeps edges serialisable and lets a diagram carry a reference to
    a node that does not exist; the layout engine drops those edges.
  - On the wire the endpoints are `from` / `to`.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any, List

from flowgraph.node import FlowNode


# ---------------------------------------------------------------------------
# FlowEdge
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FlowEdge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        label  : Optional branch label ("Yes", "No", …).
    """

    source: str
    target: str
    label:  Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"from": self.source, "to": self.target}
        if self.label:
            data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowEdge":
        return cls(
            source=str(data.get("from", data.get("source", ""))),
            target=str(data.get("to", data.get("target", ""))),
            label=data.get("label"),
        )

    def __repr__(self) -> str:
        tag = f" [{self.label}]" if self.label else ""
        return f"FlowEdge({self.source} → {self.target}{tag})"


# ---------------------------------------------------------------------------
# FlowGraph
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FlowGraph:
    """An algorithm's control structure, independent of pixel layout."""

    nodes: Tuple[FlowNode, ...] = field(default_factory=tuple)
    edges: Tuple[FlowEdge, ...] = field(default_factory=tuple)

    def get_node(self, node_id: str) -> Optional[FlowNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowGraph":
        return cls(
            nodes=tuple(FlowNode.from_dict(n) for n in data.get("nodes", [])),
            edges=tuple(FlowEdge.from_dict(e) for e in data.get("edges", [])),
        )
