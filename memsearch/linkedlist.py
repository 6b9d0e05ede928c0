"""A doubly-linked list with a cursor-style iterator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

Comparator = Callable[[Any, Any], int]
PayloadFree = Callable[[Any], None]


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False, repr=False)
class _Node:
    payload: Any
    next: Optional[_Node] = field(default=None)
    prev: Optional[_Node] = field(default=None)

    def __repr__(self) -> str:
        return f"_Node({self.payload!r})"


class LinkedList:
    """A doubly-linked list of arbitrary payloads."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.payload
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push(self, payload: Any) -> None:
        """Add a payload at the head of the list."""
        node = _Node(payload, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the payload at the head of the list."""
        node = self._head
        if node is None:
            raise IndexError("pop from empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.payload

    def append(self, payload: Any) -> None:
        """Add a payload at the tail of the list."""
        node = _Node(payload, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def slice(self) -> Any:
        """Remove and return the payload at the tail of the list."""
        node = self._tail
        if node is None:
            raise IndexError("slice from empty list")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.payload

    def sort(self, ascending: bool = True,
             comparator: Optional[Comparator] = None) -> None:
        """Sort the payloads in place with a stable bubble sort.

        The comparator returns a negative, zero or positive integer as its
        first argument is less than, equal to or greater than its second.
        """
        if self._size < 2:
            return
        compare = comparator or _natural_order
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            while node is not None and node.next is not None:
                result = compare(node.payload, node.next.payload)
                if ascending:
                    result = -result
                if result < 0:
                    node.payload, node.next.payload = (
                        node.next.payload, node.payload)
                    swapped = True
                node = node.next

    def clear(self, payload_free: Optional[PayloadFree] = None) -> None:
        """Empty the list, passing each payload to payload_free in order."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if payload_free is not None:
                payload_free(node.payload)
            node = node.next

    def iterator(self) -> LLIterator:
        """Return a cursor positioned at the head of the list."""
        return LLIterator(self)

    def head(self) -> Optional[_Node]:
        """Return the head node, or None if the list is empty."""
        return self._head

    def tail(self) -> Optional[_Node]:
        """Return the tail node, or None if the list is empty."""
        return self._tail


class LLIterator:
    """A cursor over a LinkedList that can also remove nodes."""

    def __init__(self, linked_list: LinkedList) -> None:
        self._list = linked_list
        self._node: Optional[_Node] = linked_list.head()

    def _current(self) -> _Node:
        if self._node is None:
            raise IndexError("iterator is past the end of the list")
        return self._node

    def is_valid(self) -> bool:
        """Return True while the cursor points at a node."""
        return self._node is not None

    def next(self) -> bool:
        """Advance the cursor; return False once it has moved past the end."""
        self._node = self._current().next
        return self._node is not None

    def get(self) -> Any:
        """Return the payload under the cursor."""
        return self._current().payload

    def remove(self, payload_free: Optional[PayloadFree] = None) -> bool:
        """Remove the node under the cursor.

        The cursor moves to the successor, or to the predecessor when the
        tail was removed. Returns False if the list is now empty.
        """
        node = self._current()
        lst = self._list
        if lst._size == 1:
            lst._head = lst._tail = None
            self._node = None
        elif node is lst._head:
            successor = node.next
            successor.prev = None
            lst._head = successor
            self._node = successor
        elif node is lst._tail:
            predecessor = node.prev
            predecessor.next = None
            lst._tail = predecessor
            self._node = predecessor
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            self._node = node.next
        node.next = node.prev = None
        lst._size -= 1
        if payload_free is not None:
            payload_free(node.payload)
        return lst._size > 0

    def rewind(self) -> None:
        """Move the cursor back to the head of the list."""
        self._node = self._list.head()