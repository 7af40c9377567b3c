"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a LinkedList: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its contents in insertion order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Insert *content* at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append *content* to the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def delete_first(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove the first node, passing its content to *delete*.

        Does nothing when the list is empty.
        """
        node = self.head
        if node is None:
            return
        self.head = node.next
        node.next = None
        if self.head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(node.content)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node from first to last, passing each content to *delete*."""
        while self.head is not None:
            self.delete_first(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call *func* on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every content.

        If *func* raises, the contents already produced are passed to
        *delete* before the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result