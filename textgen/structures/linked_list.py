"""Doubly linked list with sentinel head and tail nodes."""

import sys
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from textgen.errors import CapacityExceeded, IndexOutOfRange, InvalidArgument


E = TypeVar("E")

# Largest count len() can report.
MAX_SIZE = sys.maxsize


class Node(Generic[E]):
    """A single list node. Sentinels hold ``data=None``."""

    __slots__ = ("data", "prev", "next")

    def __init__(
        self,
        data: Optional[E] = None,
        prev: Optional["Node[E]"] = None,
        next: Optional["Node[E]"] = None,
    ):
        self.data = data
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList(Generic[E]):
    """Generic doubly linked list with index-based access.

    The list keeps two permanent sentinels, ``head`` and ``tail``. Real
    nodes always sit between them, so linking and unlinking never has to
    special-case an empty list or the ends of the chain.
    """

    def __init__(self, values: Optional[Iterable[E]] = None):
        """
        Args:
            values: Optional elements to append in order
        """
        self.head: Node[E] = Node()
        self.tail: Node[E] = Node()
        self.head.next = self.tail
        self.tail.prev = self.head
        self._size = 0

        if values is not None:
            for value in values:
                self.append(value)

    def append(self, value: E) -> None:
        """Add ``value`` after the current last element."""
        self._link_before(self.tail, value)

    def insert_at(self, index: int, value: E) -> None:
        """Insert ``value`` so that it becomes the element at ``index``.

        ``index`` may equal ``size()``, which appends.
        """
        self._require_value(value)
        if index < 0 or index > self._size:
            raise IndexOutOfRange(index, self._size)
        if index == self._size:
            self._link_before(self.tail, value)
        else:
            self._link_before(self._node_at(index), value)

    def get(self, index: int) -> E:
        """Return the element at ``index``."""
        return self._node_at(index).data

    def set(self, index: int, value: E) -> E:
        """Replace the element at ``index`` and return the previous one."""
        self._require_value(value)
        node = self._node_at(index)
        previous = node.data
        node.data = value
        return previous

    def remove_at(self, index: int) -> E:
        """Unlink the element at ``index`` and return it."""
        node = self._node_at(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[E]:
        node = self.head.next
        while node is not self.tail:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[E]:
        node = self.tail.prev
        while node is not self.head:
            yield node.data
            node = node.prev

    def __getitem__(self, index: int) -> E:
        return self.get(self._require_int(index))

    def __setitem__(self, index: int, value: E) -> None:
        self.set(self._require_int(index), value)

    def __delitem__(self, index: int) -> None:
        self.remove_at(self._require_int(index))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    @staticmethod
    def _require_int(index) -> int:
        if not isinstance(index, int):
            raise TypeError(f"LinkedList indices must be integers, not {type(index).__name__}")
        return index

    @staticmethod
    def _require_value(value: Optional[E]) -> None:
        if value is None:
            raise InvalidArgument("LinkedList does not accept None elements")

    def _link_before(self, successor: Node[E], value: E) -> None:
        self._require_value(value)
        if self._size >= MAX_SIZE:
            raise CapacityExceeded(f"LinkedList cannot hold more than {MAX_SIZE} elements")
        node = Node(value, successor.prev, successor)
        successor.prev.next = node
        successor.prev = node
        self._size += 1

    def _node_at(self, index: int) -> Node[E]:
        if index < 0 or index >= self._size:
            raise IndexOutOfRange(index, self._size)

        # walk from whichever sentinel is closer
        if index < self._size // 2:
            node = self.head.next
            for _ in range(index):
                node = node.next
        else:
            node = self.tail.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node
