"""Singly linked list with a circular sentinel node."""


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value=None):
        self.value = value
        self.next = self

    def in_list(self):
        return self.next is not self

    def link_after(self, prev):
        if self.in_list():
            raise ValueError("node is already linked")
        self.next = prev.next
        prev.next = self

    def unlink(self, prev):
        if not self.in_list() or prev.next is not self:
            raise ValueError("node is not linked after the given node")
        prev.next = self.next
        self.next = self


class SList:
    """Singly linked list supporting insertion at the front or after a position.

    Positions are zero-based; ``insert_after(-1, value)`` inserts before
    the first element.
    """

    def __init__(self, items=None):
        self._root = _Node()
        if items is not None:
            self.assign(items)

    def _nodes(self):
        node = self._root.next
        while node is not self._root:
            yield node
            node = node.next

    def _node_at(self, index):
        if index == -1:
            return self._root
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"list position {index} out of range")

    def push_front(self, value):
        """Insert ``value`` before the first element."""
        _Node(value).link_after(self._root)

    def pop_front(self):
        """Remove and return the first element."""
        if not self:
            raise IndexError("pop from an empty list")
        node = self._root.next
        node.unlink(self._root)
        return node.value

    def front(self):
        """Return the first element."""
        if not self:
            raise IndexError("front of an empty list")
        return self._root.next.value

    def insert_after(self, index, value):
        """Insert ``value`` right after the element at position ``index``."""
        _Node(value).link_after(self._node_at(index))

    def assign(self, items):
        """Replace the contents with ``items``, keeping their order."""
        values = list(items)
        self.clear()
        tail = self._root
        for value in values:
            node = _Node(value)
            node.link_after(tail)
            tail = node

    def clear(self):
        """Remove every element."""
        self._root.next = self._root

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __bool__(self):
        return self._root.in_list()

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __repr__(self):
        return f"SList({list(self)!r})"