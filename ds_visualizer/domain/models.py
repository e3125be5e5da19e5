"""
Domain Layer - Static Data Models

This module defines the static vocabulary of the visualizer: which
structures exist and which commands each of them understands. These
dataclasses never change at runtime; the engines consult them to validate
a command before any state is touched.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict


class StructureKind(str, Enum):
    """The three data structures the visualizer can animate."""

    QUEUE = "queue"
    BST = "bst"
    HEAP = "heap"


@dataclass(frozen=True)
class CommandSpec:
    """
    Contract for a single verb.

    Attributes:
        verb: Lower-case command name as typed by the user (e.g. "enqueue").
            The engine coroutine of the same name implements it.
        min_args: Minimum number of integer operands.
        max_args: Maximum number of operands consumed. None means unbounded;
            surplus operands are ignored.
        usage: Syntax string shown in help and in usage errors.
        varargs: True when the handler receives the whole operand list,
            False when operands are passed positionally.
    """
    verb: str
    min_args: int
    max_args: Optional[int]
    usage: str
    varargs: bool = False

    def accepts(self, args_count: int) -> bool:
        return args_count >= self.min_args

    def operands(self, args: list) -> list:
        """Trim the operand list to the verb's maximum arity."""
        if self.max_args is None:
            return list(args)
        return list(args[: self.max_args])


@dataclass(frozen=True)
class StructureDefinition:
    """
    The full command vocabulary of one structure.

    Attributes:
        kind: Which structure this vocabulary belongs to.
        title: Human-readable name (e.g. "Binary Search Tree").
        empty_message: Console text used when the structure is empty.
        commands: Dict mapping verbs to CommandSpec objects (O(1) lookup).
    """
    kind: StructureKind
    title: str
    empty_message: str
    commands: Dict[str, CommandSpec]

    def lookup(self, verb: str) -> Optional[CommandSpec]:
        return self.commands.get(verb.strip().lower())

    @property
    def syntax(self) -> list:
        return [spec.usage for spec in self.commands.values()]
