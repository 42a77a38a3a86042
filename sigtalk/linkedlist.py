"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One element of a linked list."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append ``content`` at the end of the list and return its node."""
        node: Node[T] = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every content, from first to last."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[T], U], delete: Callable[[T], Any]
    ) -> "LinkedList[U]":
        """Return a new list holding ``func`` applied to every content.

        If ``func`` fails part way, this list is cleared with ``delete``
        and the error is raised again.
        """
        if not callable(func) or not callable(delete):
            raise TypeError("func and delete must both be callable")
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            self.clear(delete)
            raise
        return result

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` if given."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"