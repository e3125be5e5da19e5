"""
Binary tree arena used by the BST engine.

Nodes live in a dict keyed by a stable opaque id; links are ids, never
object references. `copy()` duplicates every node record while keeping the
ids, so the engine can mutate a working copy and commit it in one
assignment while the previous tree (and every frame built from it) stays
intact.
"""

from collections import deque
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional

from ..state.models import TreeNodeSnapshot, TreeSnapshot


@dataclass
class TreeNode:
    id: str
    value: int
    left: Optional[str] = None
    right: Optional[str] = None

    @property
    def children(self) -> List[str]:
        return [c for c in (self.left, self.right) if c is not None]


class BinaryTree:
    def __init__(self, nodes: Optional[Dict[str, TreeNode]] = None, root: Optional[str] = None):
        self._nodes: Dict[str, TreeNode] = nodes if nodes is not None else {}
        self.root = root

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self._nodes.values())

    def node(self, node_id: str) -> TreeNode:
        return self._nodes[node_id]

    def copy(self) -> "BinaryTree":
        """Structural copy: fresh node records, same ids."""
        return BinaryTree({nid: replace(n) for nid, n in self._nodes.items()}, self.root)

    # ==========================================================================
    # Search
    # ==========================================================================

    def descend(self, value: int) -> List[str]:
        """
        Ids visited when walking from the root toward `value`
        (left when smaller, right otherwise), stopping at a match or at the
        last existing node.
        """
        path = []
        current = self.root
        while current is not None:
            path.append(current)
            node = self._nodes[current]
            if node.value == value:
                break
            current = node.left if value < node.value else node.right
        return path

    def insertion_path(self, value: int) -> List[str]:
        """Ids visited on the way to the empty child where `value` would be attached."""
        path = []
        current = self.root
        while current is not None:
            path.append(current)
            node = self._nodes[current]
            current = node.left if value < node.value else node.right
        return path

    def find(self, value: int) -> Optional[str]:
        path = self.descend(value)
        if path and self._nodes[path[-1]].value == value:
            return path[-1]
        return None

    def extreme_path(self, side: str) -> List[str]:
        """Ids from the root following only `left` (minimum) or `right` (maximum) links."""
        path = []
        current = self.root
        while current is not None:
            path.append(current)
            current = getattr(self._nodes[current], side)
        return path

    def leftmost(self, node_id: str) -> str:
        node = self._nodes[node_id]
        while node.left is not None:
            node = self._nodes[node.left]
        return node.id

    def parent_of(self, node_id: str) -> Optional[str]:
        for node in self._nodes.values():
            if node.left == node_id or node.right == node_id:
                return node.id
        return None

    # ==========================================================================
    # Mutation (only ever applied to a working copy)
    # ==========================================================================

    def insert(self, value: int, node_id: str) -> str:
        """Attach a new leaf at the first empty child; duplicates go right."""
        new_node = TreeNode(id=node_id, value=value)
        if self.root is None:
            self._nodes[node_id] = new_node
            self.root = node_id
            return node_id

        parent = self._nodes[self.root]
        while True:
            side = "left" if value < parent.value else "right"
            child = getattr(parent, side)
            if child is None:
                break
            parent = self._nodes[child]

        self._nodes[node_id] = new_node
        setattr(parent, side, node_id)
        return node_id

    def swap_values(self, a: str, b: str):
        node_a, node_b = self._nodes[a], self._nodes[b]
        node_a.value, node_b.value = node_b.value, node_a.value

    def splice(self, node_id: str):
        """Replace a node having at most one child by that child (or by nothing)."""
        node = self._nodes[node_id]
        if node.left is not None and node.right is not None:
            raise ValueError(f"Cannot splice node {node_id}: it has two children")

        child = node.left if node.left is not None else node.right
        parent_id = self.parent_of(node_id)
        if parent_id is None:
            self.root = child
        else:
            parent = self._nodes[parent_id]
            if parent.left == node_id:
                parent.left = child
            else:
                parent.right = child
        del self._nodes[node_id]

    # ==========================================================================
    # Traversal orders (explicit stack / queue)
    # ==========================================================================

    def preorder(self) -> List[str]:
        order = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = self._nodes[stack.pop()]
            order.append(node.id)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def inorder(self) -> List[str]:
        order = []
        stack = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = self._nodes[current].left
            node = self._nodes[stack.pop()]
            order.append(node.id)
            current = node.right
        return order

    def postorder(self) -> List[str]:
        # Root-right-left collected then reversed gives left-right-root.
        order = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = self._nodes[stack.pop()]
            order.append(node.id)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        order.reverse()
        return order

    def levelorder(self) -> List[str]:
        order = []
        pending = deque([self.root] if self.root is not None else [])
        while pending:
            node = self._nodes[pending.popleft()]
            order.append(node.id)
            pending.extend(node.children)
        return order

    def values(self, node_ids: List[str]) -> List[int]:
        return [self._nodes[nid].value for nid in node_ids]

    # ==========================================================================
    # Snapshot
    # ==========================================================================

    def snapshot(self) -> Optional[TreeSnapshot]:
        if self.root is None:
            return None
        nodes = [
            TreeNodeSnapshot(id=node.id, value=node.value, left=node.left, right=node.right)
            for node in (self._nodes[nid] for nid in self.preorder())
        ]
        return TreeSnapshot(root=self.root, nodes=nodes)
