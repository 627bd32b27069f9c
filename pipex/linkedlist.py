"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One list cell: its content and the next cell."""

    content: Any
    next: Optional[Node] = None


def delete_node(
    node: Node | None, delete: Callable[[Any], None] | None
) -> None:
    """Release a node's content through ``delete``; missing arguments do nothing."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None


class LinkedList:
    """A singly linked list built from :class:`Node` cells."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def push_front(self, node: Node | None) -> None:
        """Make ``node`` the new head; ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Node | None) -> None:
        """Attach ``node`` (and whatever follows it) after the last node."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Node | None:
        """The last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], None] | None) -> None:
        """Pass every content to ``delete`` and empty the list.

        Without a ``delete`` function the list is left as it is.
        """
        if delete is None:
            return
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            delete_node(node, delete)

    def for_each(self, func: Callable[[Any], Any] | None) -> None:
        """Call ``func`` on every content in order; ``None`` does nothing."""
        if func is None:
            return
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None],
    ) -> LinkedList:
        """A new list of ``func(content)`` for every content.

        If ``func`` fails part way, the contents made so far are passed to
        ``delete`` and the error propagates.
        """
        if func is None or delete is None:
            raise TypeError("map needs both a function and a delete function")
        result = LinkedList()
        try:
            for content in self:
                result.push_back(Node(func(content)))
        except BaseException:
            result.clear(delete)
            raise
        return result