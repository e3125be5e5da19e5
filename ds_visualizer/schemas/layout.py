"""
Schemas - Tree Layout Output

Coordinates produced by the tree layout and consumed by the renderer.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class LayoutNode(BaseModel):
    id: str
    x: float
    y: float
    value: int
    index: Optional[int] = None  # heap array position, drawn under the node


class LayoutLink(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float


class TreeLayout(BaseModel):
    """
    Nodes and edges of a laid-out tree. Coordinates are relative to the
    tree's own bounding box: x in [0, width].
    """
    nodes: List[LayoutNode] = Field(default_factory=list)
    links: List[LayoutLink] = Field(default_factory=list)
    width: float = 0.0
    root_x: float = 0.0

    def shifted(self, dx: float) -> "TreeLayout":
        return TreeLayout(
            nodes=[node.model_copy(update={"x": node.x + dx}) for node in self.nodes],
            links=[
                link.model_copy(update={"x1": link.x1 + dx, "x2": link.x2 + dx})
                for link in self.links
            ],
            width=self.width,
            root_x=self.root_x + dx,
        )

    def node(self, node_id: str) -> Optional[LayoutNode]:
        return next((n for n in self.nodes if n.id == node_id), None)


class CanvasLayout(BaseModel):
    """A TreeLayout centered on a canvas of at least the configured size."""
    layout: TreeLayout
    canvas_width: float
    canvas_height: float
