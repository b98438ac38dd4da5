"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[ListNode] = None


def delete_node(node: ListNode | None, delete: Deleter | None) -> None:
    """Hand the content of ``node`` to ``delete``.

    Nothing happens when either argument is None. The node is not unlinked
    from any list it belongs to.
    """
    if node is None or delete is None:
        return
    delete(node.content)


class LinkedList:
    """A singly linked list; iteration yields the contents from head to tail."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for content in contents:
            self.add_back(content)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the head and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` at the tail and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> ListNode | None:
        """Return the tail node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter | None) -> None:
        """Pass every content to ``delete`` in order and empty the list.

        When ``delete`` is None the list is left untouched.
        """
        if delete is None:
            return
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            delete_node(node, delete)

    def iterate(self, func: Callable[[Any], Any] | None) -> None:
        """Call ``func`` on every content, head first; do nothing if it is None."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any] | None,
        delete: Deleter | None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for every content.

        If ``func`` is None the result is empty. If ``func`` raises, every
        content already produced is passed to ``delete`` before the error
        propagates.
        """
        result = LinkedList()
        if func is None:
            return result
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content