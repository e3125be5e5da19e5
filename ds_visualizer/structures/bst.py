"""
BST Engine - Binary Search Tree

Values smaller than a node go to its left subtree, everything else
(duplicates included) to its right subtree.

Every mutating step works on `self._tree.copy()` and commits the copy in
a single assignment, so node ids stay stable across steps and a frame
already handed to the renderer keeps pointing at a consistent tree.
"""

import itertools
import logging
from typing import List, Optional

from ..data.commands import BST
from ..execution.engine import StructureEngine
from ..execution.stepper import Stepper
from ..services.exceptions import EmptyContainerError, InvalidArgumentError, ValueNotFoundError
from ..state.models import HighlightTone, Severity, StatusSnapshot
from .tree import BinaryTree

logger = logging.getLogger(__name__)


class BSTEngine(StructureEngine):
    definition = BST

    def __init__(self, stepper: Optional[Stepper] = None):
        self._tree = BinaryTree()
        self._ids = itertools.count(1)
        super().__init__(stepper)

    @property
    def tree(self) -> BinaryTree:
        return self._tree

    @property
    def size(self) -> int:
        return len(self._tree)

    # ==========================================================================
    # Insert / Search / Remove
    # ==========================================================================

    async def insert(self, values: List[int]) -> List[int]:
        if not values:
            raise InvalidArgumentError("Usage: insert [values]...")

        for i, value in enumerate(values):
            self.set_status(StatusSnapshot.array("Inserting", values, i))
            self.log(f"Inserting {value}...")

            # Show the descent on the committed tree first
            for node_id in self._tree.insertion_path(value):
                self.highlight([node_id], HighlightTone.COMPARE)
                await self.step()

            # Commit: attach the new leaf on a structural copy
            working = self._tree.copy()
            new_id = working.insert(value, self._next_id())
            self._tree = working
            self.highlight([new_id], HighlightTone.INSERT)
            await self.step()

        self.clear_highlight()
        self.log(f"Inserted: {', '.join(str(v) for v in values)}", Severity.SUCCESS)
        return self.inorder_values()

    async def search(self, value: int) -> int:
        self.log(f"Searching {value}...")
        found = await self._walk_to(value)
        if found is None:
            raise ValueNotFoundError(f"{value} not found")

        self.highlight([found], HighlightTone.FOUND)
        self.log(f"Found {value}!", Severity.SUCCESS)
        self.set_status(StatusSnapshot.single("Found", value))
        await self.step()
        return value

    async def remove(self, value: int) -> int:
        self.log(f"Removing {value}...")
        target = await self._walk_to(value)
        if target is None:
            raise ValueNotFoundError(f"{value} not found")

        self.highlight([target], HighlightTone.REMOVE)
        await self.step()

        node = self._tree.node(target)
        if node.left is not None and node.right is not None:
            successor = self._tree.leftmost(node.right)
            self.highlight([target, successor], HighlightTone.SWAP)
            await self.step()

            working = self._tree.copy()
            working.swap_values(target, successor)
            self._tree = working
            await self.step()

            # The successor has no left child, so it can be spliced out.
            doomed = successor
        else:
            doomed = target

        working = self._tree.copy()
        working.splice(doomed)
        self._tree = working

        self.clear_highlight()
        self.log(f"Removed {value}", Severity.SUCCESS)
        self.set_status(StatusSnapshot.single("Removed", value))
        await self.step()
        return value

    # ==========================================================================
    # Peek
    # ==========================================================================

    async def peek_min(self) -> int:
        return await self._peek_extreme("left", "Min")

    async def peek_max(self) -> int:
        return await self._peek_extreme("right", "Max")

    # ==========================================================================
    # Traversals
    # ==========================================================================

    async def preorder(self) -> List[int]:
        return await self._traverse("preorder", self._tree.preorder())

    async def inorder(self) -> List[int]:
        return await self._traverse("inorder", self._tree.inorder())

    async def postorder(self) -> List[int]:
        return await self._traverse("postorder", self._tree.postorder())

    async def levelorder(self) -> List[int]:
        return await self._traverse("levelorder", self._tree.levelorder())

    async def clear(self):
        self._tree = BinaryTree()
        self.log("Cleared", Severity.SUCCESS)

    def inorder_values(self) -> List[int]:
        return self._tree.values(self._tree.inorder())

    # ==========================================================================
    # Helpers
    # ==========================================================================

    async def _walk_to(self, value: int) -> Optional[str]:
        """Highlight each node on the search path; return the matching id, if any."""
        path = self._tree.descend(value)
        for node_id in path:
            self.highlight([node_id], HighlightTone.COMPARE)
            await self.step()

        if path and self._tree.node(path[-1]).value == value:
            return path[-1]
        if path:
            self.highlight([path[-1]], HighlightTone.REMOVE)
            await self.step()
        return None

    async def _peek_extreme(self, side: str, label: str) -> int:
        if self._tree.root is None:
            raise EmptyContainerError(self.definition.empty_message)

        path = self._tree.extreme_path(side)
        for node_id in path[:-1]:
            self.highlight([node_id], HighlightTone.COMPARE)
            await self.step()

        value = self._tree.node(path[-1]).value
        self.highlight([path[-1]], HighlightTone.FOUND)
        self.log(f"{label}: {value}")
        self.set_status(StatusSnapshot.single(label, value))
        await self.step()
        return value

    async def _traverse(self, order: str, node_ids: List[str]) -> List[int]:
        if not node_ids:
            self.log(self.definition.empty_message, Severity.ERROR)
            return []

        self.log(f"{order}...")
        visited: List[int] = []
        for node_id in node_ids:
            visited.append(self._tree.node(node_id).value)
            self.highlight([node_id], HighlightTone.COMPARE)
            self.set_status(StatusSnapshot.array("Visited", visited, len(visited) - 1))
            await self.step()

        self.clear_highlight()
        self.log(f"{order}: [{', '.join(str(v) for v in visited)}]", Severity.SUCCESS)
        return visited

    def _next_id(self) -> str:
        return f"bst-{next(self._ids)}"

    def _structure_view(self) -> dict:
        return {"tree": self._tree.snapshot()}
