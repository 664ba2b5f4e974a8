"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    @property
    def head(self) -> Node | None:
        """The first node, or None when the list is empty."""
        return self._head

    def push_front(self, content: Any) -> Node:
        """Put a new node holding content at the front and return it."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Put a new node holding content at the back and return it."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call f on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> LinkedList:
        """A new list holding f(content) for every node, in the same order."""
        return LinkedList(f(content) for content in self)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, handing each content to delete first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"