"""
node.py — Flow-Graph Node
=========================
One box in an algorithm's flow diagram.  Carries an id, a label, a kind
(start / end / decision / process) and an optional explicit position.

Design decisions:
  - FlowNode is frozen.  The catalogue builds them once per selection and
    the layout engine only ever reads them.
  - `position` is optional.  When it is absent the layout engine places the
    node in a vertical chain; when present it is used verbatim.
  - Unknown kind strings coming off the wire parse as PROCESS rather than
    failing, so a diagram from a newer client still renders.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Dict, Any


# ---------------------------------------------------------------------------
# Node Kind Enum — maps 1-to-1 with the drawn shape
# ---------------------------------------------------------------------------
class NodeKind(Enum):
    START    = "start"      # ellipse
    END      = "end"        # ellipse
    DECISION = "decision"   # diamond
    PROCESS  = "process"    # rectangle

    @classmethod
    def parse(cls, value: Any) -> "NodeKind":
        if isinstance(value, NodeKind):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.PROCESS


# ---------------------------------------------------------------------------
# FlowNode
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FlowNode:
    """
    Attributes:
        id       : Unique identifier inside one diagram.
        label    : Text drawn inside the shape.
        kind     : NodeKind, decides the shape.
        position : Optional (x, y) centre in canvas pixels.
    """

    id:       str
    label:    str
    kind:     NodeKind                        = NodeKind.PROCESS
    position: Optional[Tuple[float, float]]   = None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id":    self.id,
            "label": self.label,
            "kind":  self.kind.value,
        }
        if self.position is not None:
            data["position"] = {"x": self.position[0], "y": self.position[1]}
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowNode":
        pos = data.get("position")
        position = None
        if isinstance(pos, dict) and "x" in pos and "y" in pos:
            position = (pos["x"], pos["y"])
        return cls(
            id=str(data["id"]),
            label=str(data.get("label", data["id"])),
            kind=NodeKind.parse(data.get("kind", data.get("type", "process"))),
            position=position,
        )

    def __repr__(self) -> str:
        return f"FlowNode(id={self.id}, kind={self.kind.value}, label={self.label!r})"
