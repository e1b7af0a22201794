"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("content", "next")

    def __init__(self, content: Any) -> None:
        self.content = content
        self.next: _Node | None = None


class LinkedList:
    """A singly linked list holding contents in insertion order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> None:
        """Insert ``content`` at the head of the list."""
        node = _Node(content)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: Any) -> None:
        """Append ``content`` at the tail of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def last(self) -> Any:
        """Content of the last element; IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, head first."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, ``delete`` is called on every content already
        produced and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, calling ``delete`` on each content first if given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if delete is not None:
                delete(node.content)
            node = node.next