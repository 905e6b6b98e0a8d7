"""Singly linked list with O(1) append, positional insert and in-place reverse.

Invalid requests (a negative insert position, reversing an empty list) are
reported rather than raised: the message is printed and a failed ``Status``
is returned, leaving the list untouched.
"""

import sys
from typing import Generic, Iterator, NamedTuple, Optional, TypeVar

T = TypeVar('T')

INVALID_POSITION_MESSAGE = "Position must be a non-negative integer."
EMPTY_REVERSE_MESSAGE = "Cannot reverse an empty list."
REVERSED_MESSAGE = "List successfully reversed."
EMPTY_LIST_MESSAGE = "The list is empty."
CONTENTS_PREFIX = "List contents: "
ARROW = " -> "


class Status(NamedTuple):
    ok: bool
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


class ListNode(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional['ListNode[T]'] = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList(Generic[T]):
    def __init__(self, head: Optional[ListNode[T]] = None,
                 tail: Optional[ListNode[T]] = None) -> None:
        # head/tail are trusted as given; tail is not checked to be reachable.
        self.head = head
        self.tail = tail

    def append(self, value: T) -> None:
        node = ListNode(value)
        if self.head is None:
            self.head = node
            self.tail = node
            return
        self.tail.next = node
        self.tail = node

    def insert_at(self, value: T, position: int) -> Status:
        """Insert ``value`` so that it ends up at index ``position``.

        Positions past the end append. A negative position prints an error
        to stderr and returns a failed status without touching the list.
        """
        if position < 0:
            print(INVALID_POSITION_MESSAGE, file=sys.stderr)
            return Status(False, INVALID_POSITION_MESSAGE)

        node = ListNode(value)
        if self.head is None or position == 0:
            node.next = self.head
            self.head = node
            if self.tail is None:
                self.tail = node
            return Status(True)

        lagging = self.head
        leading = self.head.next
        index = 1
        while leading is not None and index < position:
            lagging = leading
            leading = leading.next
            index += 1

        if leading is None:
            # lagging is the current tail
            lagging.next = node
            self.tail = node
        else:
            node.next = leading
            lagging.next = node
        return Status(True)

    def reverse(self) -> Status:
        if self.head is None:
            print(EMPTY_REVERSE_MESSAGE)
            return Status(False, EMPTY_REVERSE_MESSAGE)

        old_head = self.head
        previous = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following

        old_head.next = None
        self.tail = old_head
        self.head = previous
        print(REVERSED_MESSAGE)
        return Status(True, REVERSED_MESSAGE)

    def print_list(self) -> None:
        if self.head is None:
            print(EMPTY_LIST_MESSAGE)
            return
        print(CONTENTS_PREFIX + str(self))

    def is_empty(self) -> bool:
        return self.head is None

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        count = 0
        current = self.head
        while current is not None:
            count += 1
            current = current.next
        return count

    def __str__(self) -> str:
        return ARROW.join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
