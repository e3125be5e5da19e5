"""
Tree Layout - Snapshot to 2D Coordinates

A pure, deterministic function: the same tree shape always produces the
same coordinates, whatever the values. Subtrees are sized bottom-up
(post-order) and then placed side by side, so two sibling subtrees never
share any horizontal span.

Sizing rules:
- Leaf: a fixed width (node diameter plus margin), node centered in it.
- Two children: left width + gap + right width; the right subtree is
  shifted past the left one and the parent sits at the midpoint of its
  two children.
- One child: child width + shift; the parent is offset from its child by
  the shift (to the right of a left child, to the left of a right child)
  so it never sits directly above it.
- y = depth * level spacing + top margin.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import settings
from ..schemas.layout import CanvasLayout, LayoutLink, LayoutNode, TreeLayout
from ..state.models import TreeNodeSnapshot, TreeSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutGeometry:
    node_radius: float
    leaf_margin: float
    sibling_gap: float
    single_child_shift: float
    level_spacing: float
    top_margin: float

    @property
    def leaf_width(self) -> float:
        return self.node_radius * 2 + self.leaf_margin

    @classmethod
    def from_settings(cls) -> "LayoutGeometry":
        return cls(
            node_radius=settings.NODE_RADIUS,
            leaf_margin=settings.LEAF_MARGIN,
            sibling_gap=settings.SIBLING_GAP,
            single_child_shift=settings.SINGLE_CHILD_SHIFT,
            level_spacing=settings.LEVEL_SPACING,
            top_margin=settings.TOP_MARGIN,
        )


@dataclass
class _Box:
    width: float
    root_x: float
    offsets: Dict[str, float] = field(default_factory=dict)


def layout_tree(
    tree: Optional[TreeSnapshot], geometry: Optional[LayoutGeometry] = None
) -> TreeLayout:
    """
    Lay out a tree snapshot.

    Args:
        tree: Flat snapshot of the tree (None for an empty tree).
        geometry: Spacing constants; defaults to the configured ones.

    Returns:
        TreeLayout with one LayoutNode per tree node (anchored by node id),
        one LayoutLink per parent-child edge, and the total width.

    Both passes walk explicit stacks, so degenerate (chain-shaped) trees of
    any height are laid out without recursion.
    """
    if tree is None:
        return TreeLayout()
    g = geometry or LayoutGeometry.from_settings()
    nodes = tree.by_id()

    # Pass 1, children before parents: subtree width, root x inside the
    # subtree box, and where each child box starts inside its parent box.
    boxes: Dict[str, _Box] = {}
    for node_id in reversed(_preorder(tree.root, nodes)):
        node = nodes[node_id]
        left = boxes[node.left] if node.left is not None else None
        right = boxes[node.right] if node.right is not None else None

        if left is None and right is None:
            width = g.leaf_width
            boxes[node_id] = _Box(width=width, root_x=width / 2)

        elif left is not None and right is not None:
            right_offset = left.width + g.sibling_gap
            boxes[node_id] = _Box(
                width=right_offset + right.width,
                root_x=(left.root_x + right_offset + right.root_x) / 2,
                offsets={node.left: 0.0, node.right: right_offset},
            )

        elif left is not None:
            boxes[node_id] = _Box(
                width=left.width + g.single_child_shift,
                root_x=left.root_x + g.single_child_shift,
                offsets={node.left: 0.0},
            )

        else:
            # The parent sits `shift` left of its child: at the child's unshifted x.
            boxes[node_id] = _Box(
                width=right.width + g.single_child_shift,
                root_x=right.root_x,
                offsets={node.right: g.single_child_shift},
            )

    # Pass 2, parents before children: absolute box edges and depths.
    placed: List[LayoutNode] = []
    links: List[LayoutLink] = []
    stack = [(tree.root, 0.0, 0)]
    while stack:
        node_id, box_left, depth = stack.pop()
        box = boxes[node_id]
        node = nodes[node_id]
        x = box_left + box.root_x
        y = depth * g.level_spacing + g.top_margin
        placed.append(LayoutNode(id=node.id, x=x, y=y, value=node.value, index=node.index))

        for child_id in (node.right, node.left):
            if child_id is None:
                continue
            child_left = box_left + box.offsets[child_id]
            links.append(
                LayoutLink(x1=x, y1=y, x2=child_left + boxes[child_id].root_x, y2=y + g.level_spacing)
            )
            stack.append((child_id, child_left, depth + 1))

    root_box = boxes[tree.root]
    return TreeLayout(nodes=placed, links=links, width=root_box.width, root_x=root_box.root_x)


def _preorder(root: str, nodes: Dict[str, TreeNodeSnapshot]) -> List[str]:
    order = []
    stack = [root]
    while stack:
        node_id = stack.pop()
        order.append(node_id)
        node = nodes[node_id]
        stack.extend(c for c in (node.right, node.left) if c is not None)
    return order


def fit_canvas(
    layout: TreeLayout,
    min_width: Optional[float] = None,
    min_height: Optional[float] = None,
) -> CanvasLayout:
    """
    Center a layout horizontally on a canvas at least `min_width` wide and
    size the canvas height to the deepest node plus padding.
    """
    min_width = settings.CANVAS_MIN_WIDTH if min_width is None else min_width
    min_height = settings.CANVAS_MIN_HEIGHT if min_height is None else min_height

    canvas_width = max(layout.width, min_width)
    deepest = max((n.y for n in layout.nodes), default=0.0)
    canvas_height = max(min_height, deepest + settings.CANVAS_BOTTOM_PADDING if layout.nodes else 0.0)

    offset = (canvas_width - layout.width) / 2
    return CanvasLayout(
        layout=layout.shifted(offset),
        canvas_width=canvas_width,
        canvas_height=canvas_height,
    )
