"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a linked list: its content and the cell after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def remove(self, content: Any, release: Optional[Callable[[Any], Any]] = None) -> bool:
        """Unlink the first node holding ``content``.

        ``release`` is called with the removed content. Returns whether a
        node was found.
        """
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.content is content or node.content == content:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                node.next = None
                if release is not None:
                    release(node.content)
                return True
            previous = node
        return False

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, calling ``release`` on each content in order."""
        if release is not None:
            for content in list(self):
                release(content)
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func(content)`` for every content, in order."""
        return LinkedList(func(content) for content in self)