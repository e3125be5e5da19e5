"""
Queue Engine - FIFO Queue

Items enter at the tail and leave from the head. Each mutation replaces the
item list with a new one, so a frame already handed to the renderer never
changes underneath it.
"""

import logging
from typing import List, Optional

from ..data.commands import QUEUE
from ..execution.engine import StructureEngine
from ..execution.stepper import Stepper
from ..services.exceptions import EmptyContainerError, InvalidArgumentError
from ..state.models import HighlightTone, Severity, StatusSnapshot

logger = logging.getLogger(__name__)


def slot_id(index: int) -> str:
    return f"queue-{index}"


class QueueEngine(StructureEngine):
    definition = QUEUE

    def __init__(self, stepper: Optional[Stepper] = None, items: Optional[List[int]] = None):
        self._items: List[int] = list(items or [])
        super().__init__(stepper)

    @property
    def items(self) -> List[int]:
        return list(self._items)

    @property
    def size(self) -> int:
        return len(self._items)

    async def enqueue(self, values: List[int]) -> List[int]:
        if not values:
            raise InvalidArgumentError("Usage: enqueue [values]...")

        for i, value in enumerate(values):
            self._items = [*self._items, value]
            self.set_status(StatusSnapshot.array("Inserting", values, i))
            self.highlight([slot_id(len(self._items) - 1)], HighlightTone.INSERT)
            self.log(f"Enqueued: {value}", Severity.SUCCESS)
            await self.step()

        self.clear_highlight()
        return self.items

    async def dequeue(self) -> int:
        self._require_items()

        self.highlight([slot_id(0)], HighlightTone.REMOVE)
        await self.step()

        removed, self._items = self._items[0], self._items[1:]
        self.clear_highlight()
        self.log(f"Dequeued: {removed}", Severity.SUCCESS)
        self.set_status(StatusSnapshot.single("Dequeued", removed))
        await self.step()
        return removed

    async def peek_front(self) -> int:
        return await self._peek(0, "Front", "Peek Front")

    async def peek_rear(self) -> int:
        return await self._peek(self.size - 1, "Rear", "Peek Rear")

    async def clear(self):
        self._items = []
        self.log("Cleared", Severity.SUCCESS)

    # ==========================================================================
    # Helpers
    # ==========================================================================

    async def _peek(self, index: int, name: str, label: str) -> int:
        self._require_items()

        value = self._items[index]
        self.highlight([slot_id(index)], HighlightTone.FOUND)
        self.log(f"{name}: {value}")
        self.set_status(StatusSnapshot.single(label, value))
        await self.step()
        self.clear_highlight()
        return value

    def _require_items(self):
        if not self._items:
            raise EmptyContainerError(self.definition.empty_message)

    def _structure_view(self) -> dict:
        return {"items": list(self._items)}
