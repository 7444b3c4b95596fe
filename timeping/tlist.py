"""Intrusive circular doubly linked list with a sentinel node."""

from __future__ import annotations

from typing import Any, Iterator

from timeping.tlog import common, err_in


class TlistError(Exception):
    """Raised on misuse of a list or its nodes."""


class Node:
    """A list link. ``value`` may carry whatever the owner attaches."""

    __slots__ = ("next", "last", "value")

    def __init__(self, value: Any = None) -> None:
        self.next: Node | None = None
        self.last: Node | None = None
        self.value = value

    def move(self) -> None:
        """Unlink this node from whatever list holds it."""
        if self.next is None or self.next is self:
            return
        assert self.last is not None
        self.last.next = self.next
        self.next.last = self.last
        self.next = None
        self.last = None

    def insert(self, other: Node) -> None:
        """Link ``other`` directly after this node."""
        if self.next is None:
            raise TlistError("node is not linked")
        self.next.last = other
        other.next = self.next
        other.last = self
        self.next = other


class Tlist:
    """A circular list whose sentinel is an ordinary ``Node``."""

    def __init__(self) -> None:
        self._root: Node | None = Node()
        self._root.next = self._root
        self._root.last = self._root

    @classmethod
    def build(cls, node: Node | None) -> Tlist:
        """Create an empty list that uses ``node`` as its sentinel."""
        if node is None:
            common("Tlist build error nil", "tlist")
            err_in("Tlist build, pointer is nil", "tlist")
            raise TlistError("Tlist init error")
        built = cls()
        node.next = node
        node.last = node
        built._root = node
        return built

    @property
    def _sentinel(self) -> Node:
        if self._root is None:
            common("空指针被使用in empty check", "tlist")
            err_in("空指针被使用in empty check", "tlist")
            raise TlistError("list has been deleted")
        return self._root

    def is_empty(self) -> bool:
        root = self._sentinel
        return root.next is root

    def push_back(self, node: Node) -> None:
        root = self._sentinel
        assert root.last is not None
        node.last = root.last
        node.next = root
        root.last.next = node
        root.last = node

    def push_front(self, node: Node) -> None:
        root = self._sentinel
        assert root.next is not None
        node.last = root
        node.next = root.next
        root.next.last = node
        root.next = node

    def move_front_to_back(self, other: Tlist) -> None:
        """Take the front node of ``other`` and append it to this list."""
        self.push_back(other.pop_front())

    def pop_front(self) -> Node:
        node = self.front()
        if node is None:
            raise TlistError("empty")
        node.move()
        return node

    def pop_back(self) -> Node:
        node = self.back()
        if node is None:
            raise TlistError("empty")
        node.move()
        return node

    def delete(self, target: Tlist) -> None:
        """Dispose of this empty list, handing its sentinel to ``target``."""
        root = self._sentinel
        if root.next is not root:
            common("delete fail not empty", "tlist")
            err_in("delete fail not empty", "tlist")
            raise TlistError("not empty")
        target.push_back(root)
        self._root = None

    def front(self) -> Node | None:
        root = self._sentinel
        return None if root.next is root else root.next

    def back(self) -> Node | None:
        root = self._sentinel
        return None if root.last is root else root.last

    def __iter__(self) -> Iterator[Node]:
        """Yield nodes front to back; the current node may be unlinked meanwhile."""
        root = self._sentinel
        node = root.next
        while node is not None and node is not root:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)