"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


def delete_one(node: Optional[Node], delete: Deleter) -> None:
    """Release one node's content with ``delete`` and detach the node.

    Nothing happens when either the node or the deleter is missing.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


class LinkedList:
    """A chain of :class:`Node` objects reached from a head node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items or ():
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Put ``node`` at the head of the list."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` (and whatever follows it) after the last node."""
        if node is None:
            return
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[Node]:
        """The final node, or ``None`` for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Deleter = None) -> None:
        """Release every node's content with ``delete`` and empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list holding ``func`` applied to every content.

        When ``func`` gives ``None`` the contents built so far are released
        with ``delete`` and ``ValueError`` is raised.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        for content in self:
            new_content = func(content)
            if new_content is None:
                result.clear(delete)
                raise ValueError("mapping function produced no content")
            node = Node(new_content)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result