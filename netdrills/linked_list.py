"""A singly linked list of values with insertion, deletion, search and reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of the list: a value and the node that follows it."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose head may change as values come and go."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for value in values or ():
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def insert_at_beginning(self, data: Any) -> Node:
        """Put a new node holding ``data`` in front of the list and return it."""
        node = Node(data, self.head)
        self.head = node
        return node

    def insert_at_end(self, data: Any) -> Node:
        """Append a new node holding ``data`` and return it."""
        node = Node(data)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def insert_after(self, node: Optional[Node], data: Any) -> Node:
        """Link a new node holding ``data`` directly after ``node``."""
        if node is None:
            raise ValueError("previous node cannot be None for insertion after")
        new_node = Node(data, node.next)
        node.next = new_node
        return new_node

    def find_node(self, key: Any) -> Optional[Node]:
        """Return the first node whose value equals ``key``, or None."""
        return next((node for node in self._nodes() if node.data == key), None)

    def delete(self, key: Any) -> int:
        """Remove the first node holding ``key`` and return the position it had.

        Raises ValueError when no node holds ``key``.
        """
        previous: Optional[Node] = None
        for position, node in enumerate(self._nodes()):
            if node.data == key:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                node.next = None
                return position
            previous = node
        raise ValueError(f"key {key!r} not found in the list")

    def search(self, key: Any) -> Optional[int]:
        """Return the position of the first node holding ``key``, or None."""
        return next(
            (pos for pos, value in enumerate(self) if value == key),
            None,
        )

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def clear(self) -> None:
        """Drop every node, leaving the list empty."""
        current = self.head
        self.head = None
        while current is not None:
            current.next, current = None, current.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        if self.head is None:
            return "List is empty."
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"