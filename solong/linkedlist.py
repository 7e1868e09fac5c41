"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Node | None:
        """The first node, or None when the list is empty."""
        return self._head

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, calling delete on each content from front to back."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on each content from front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any] | None = None,
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Return a new list of f applied to each content.

        Without f the contents are copied as they are. If f raises, delete is
        called on every content already produced before the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content) if f is not None else content)
        except BaseException:
            result.clear(delete)
            raise
        return result