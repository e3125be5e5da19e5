"""
Heap Engine - Binary Max-Heap

The heap is a plain list read as a complete binary tree: the children of
index i sit at 2i+1 and 2i+2, its parent at (i-1)//2. Every element is
greater than or equal to both of its children.

Each comparison and each swap is its own highlighted, suspended step.
Swaps build a new list, so a frame already handed to the renderer is never
modified afterwards.
"""

import logging
from typing import List, Optional

from ..data.commands import HEAP
from ..execution.engine import StructureEngine
from ..execution.stepper import Stepper
from ..services.exceptions import EmptyContainerError, InvalidArgumentError
from ..state.models import HighlightTone, Severity, StatusSnapshot, TreeNodeSnapshot, TreeSnapshot

logger = logging.getLogger(__name__)


def left_child(i: int) -> int:
    return 2 * i + 1


def right_child(i: int) -> int:
    return 2 * i + 2


def parent(i: int) -> int:
    return (i - 1) // 2


def slot_id(index: int) -> str:
    return f"heap-{index}"


def heap_to_tree(items: List[int]) -> Optional[TreeSnapshot]:
    """Expose the implicit tree for the layout; node ids are array positions."""
    if not items:
        return None
    size = len(items)

    def child(index: int) -> Optional[str]:
        return slot_id(index) if index < size else None

    nodes = [
        TreeNodeSnapshot(
            id=slot_id(i),
            value=items[i],
            index=i,
            left=child(left_child(i)),
            right=child(right_child(i)),
        )
        for i in tree_order(size, "preorder")
    ]
    return TreeSnapshot(root=slot_id(0), nodes=nodes)


def tree_order(size: int, order: str) -> List[int]:
    """
    Indices of the implicit tree in pre-, in- or post-order, walked with an
    explicit stack. Each stack entry carries whether its children were
    already expanded.
    """
    visits = []
    stack = [(0, False)] if size else []
    while stack:
        index, expanded = stack.pop()
        if index >= size:
            continue
        if expanded:
            visits.append(index)
            continue

        # Pushed in reverse so they pop in visiting order.
        if order == "preorder":
            stack += [(right_child(index), False), (left_child(index), False), (index, True)]
        elif order == "inorder":
            stack += [(right_child(index), False), (index, True), (left_child(index), False)]
        elif order == "postorder":
            stack += [(index, True), (right_child(index), False), (left_child(index), False)]
        else:
            raise ValueError(f"Unknown traversal order: {order}")
    return visits


class HeapEngine(StructureEngine):
    definition = HEAP

    def __init__(self, stepper: Optional[Stepper] = None):
        self._items: List[int] = []
        super().__init__(stepper)

    @property
    def items(self) -> List[int]:
        return list(self._items)

    @property
    def size(self) -> int:
        return len(self._items)

    # ==========================================================================
    # Build / Insert / Remove
    # ==========================================================================

    async def create(self, values: List[int]) -> List[int]:
        if not values:
            self._items = []
            self.log("Created empty", Severity.SUCCESS)
            return []

        self.log("Building heap...")
        self._items = list(values)
        self.set_status(StatusSnapshot.array("Creating", values))
        await self.step()

        for i in range(len(self._items) // 2 - 1, -1, -1):
            await self._sift_down(i)

        self.clear_highlight()
        self.set_status(StatusSnapshot.array("Created Heap", self._items))
        self.log(f"Created: [{self._joined()}]", Severity.SUCCESS)
        await self.step()
        return self.items

    async def insert(self, values: List[int]) -> List[int]:
        if not values:
            raise InvalidArgumentError("Usage: insert [values]...")

        for k, value in enumerate(values):
            self.set_status(StatusSnapshot.array("Inserting", values, k))
            self.log(f"Inserting {value}...")

            self._items = [*self._items, value]
            i = len(self._items) - 1
            self.highlight([slot_id(i)], HighlightTone.INSERT)
            await self.step()

            await self._sift_up(i)

        self.clear_highlight()
        self.set_status(StatusSnapshot.array("Result Heap", self._items))
        self.log(f"Inserted: {', '.join(str(v) for v in values)}", Severity.SUCCESS)
        await self.step()
        return self.items

    async def peek_max(self) -> int:
        self._require_items()

        top = self._items[0]
        self.highlight([slot_id(0)], HighlightTone.FOUND)
        self.log(f"Max: {top}")
        self.set_status(StatusSnapshot.single("Max", top))
        await self.step()
        return top

    async def remove_max(self) -> int:
        self._require_items()

        top = self._items[0]
        last = len(self._items) - 1
        self.log(f"Removing Max ({top})...")

        self.highlight([slot_id(0)], HighlightTone.REMOVE)
        await self.step()

        self.highlight([slot_id(0), slot_id(last)], HighlightTone.SWAP)
        await self.step()

        self._swap(0, last)
        await self.step()

        # The former root now sits at the tail; drop it.
        self._items = self._items[:-1]
        self.clear_highlight()
        self.log("Sifting down...")
        if self._items:
            await self._sift_down(0)

        self.clear_highlight()
        self.set_status(StatusSnapshot.single("Removed Max", top))
        self.log(f"Removed Max: {top}", Severity.SUCCESS)
        await self.step()
        return top

    async def clear(self):
        self._items = []
        self.log("Cleared", Severity.SUCCESS)

    # ==========================================================================
    # Traversals (implicit tree, not array order)
    # ==========================================================================

    async def preorder(self) -> List[int]:
        return await self._traverse("preorder", tree_order(self.size, "preorder"))

    async def inorder(self) -> List[int]:
        return await self._traverse("inorder", tree_order(self.size, "inorder"))

    async def postorder(self) -> List[int]:
        return await self._traverse("postorder", tree_order(self.size, "postorder"))

    async def levelorder(self) -> List[int]:
        return await self._traverse("levelorder", list(range(self.size)))

    # ==========================================================================
    # Heap Repair
    # ==========================================================================

    async def _sift_down(self, i: int):
        size = len(self._items)
        while True:
            self.highlight([slot_id(i)], HighlightTone.COMPARE)
            await self.step()

            largest = i
            for child in (left_child(i), right_child(i)):
                if child < size and self._items[child] > self._items[largest]:
                    largest = child

            if largest == i:
                break

            await self._animated_swap(i, largest)
            i = largest

    async def _sift_up(self, i: int):
        while i > 0:
            up = parent(i)
            self.highlight([slot_id(i), slot_id(up)], HighlightTone.COMPARE)
            await self.step()

            if self._items[i] <= self._items[up]:
                break

            await self._animated_swap(i, up)
            i = up

    async def _animated_swap(self, a: int, b: int):
        self.highlight([slot_id(a), slot_id(b)], HighlightTone.SWAP)
        await self.step()

        self._swap(a, b)
        self.highlight([slot_id(a), slot_id(b)], HighlightTone.FOUND)
        await self.step()

    # ==========================================================================
    # Helpers
    # ==========================================================================

    async def _traverse(self, order: str, indices: List[int]) -> List[int]:
        if not indices:
            self.log(self.definition.empty_message)
            return []

        self.log(f"{order}...")
        visited: List[int] = []
        for index in indices:
            visited.append(self._items[index])
            self.highlight([slot_id(index)], HighlightTone.COMPARE)
            self.set_status(StatusSnapshot.array("Visited", visited, len(visited) - 1))
            await self.step()

        self.clear_highlight()
        self.log(f"{order}: [{', '.join(str(v) for v in visited)}]", Severity.SUCCESS)
        return visited

    def _swap(self, a: int, b: int):
        items = list(self._items)
        items[a], items[b] = items[b], items[a]
        self._items = items

    def _require_items(self):
        if not self._items:
            raise EmptyContainerError(self.definition.empty_message)

    def _joined(self) -> str:
        return ", ".join(str(v) for v in self._items)

    def _structure_view(self) -> dict:
        return {"items": list(self._items), "tree": heap_to_tree(self._items)}
