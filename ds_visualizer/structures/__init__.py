"""
Structures Layer - Instrumented Data-Structure Engines

Defines the queue, binary search tree and max-heap engines. Every
structural mutation is paired with a status snapshot and a suspension
point so the algorithm can be followed one step at a time.
"""

from ds_visualizer.structures.bst import BSTEngine
from ds_visualizer.structures.heap import HeapEngine
from ds_visualizer.structures.queue import QueueEngine
from ds_visualizer.structures.tree import BinaryTree, TreeNode


__all__ = [
    "BSTEngine",
    "BinaryTree",
    "HeapEngine",
    "QueueEngine",
    "TreeNode",
]
