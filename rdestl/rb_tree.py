"""Red-black tree with a per-tree sentinel and in-order node traversal."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """A tree node; ``left``, ``right`` and ``parent`` may be the tree's sentinel."""

    value: Any
    color: Color = Color.RED
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    parent: Optional["Node"] = None


def _identity(value):
    return value


class RBTree:
    """Red-black tree of unique values ordered by ``key(value)`` with ``<``.

    Inserting a value whose key is already present leaves the tree
    unchanged and returns the existing node.
    """

    def __init__(self, key=None):
        self._key = key if key is not None else _identity
        nil = Node(None, Color.BLACK)
        nil.left = nil.right = nil.parent = nil
        self._nil = nil
        self._root = nil
        self._size = 0

    # -- queries ---------------------------------------------------------

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self.first_node()
        while node is not None:
            yield node.value
            node = self.next_node(node)

    def find(self, key):
        """Return the node holding ``key``, or None."""
        nil = self._nil
        node = self._root
        while node is not nil:
            node_key = self._key(node.value)
            if node_key < key:
                node = node.right
            elif key < node_key:
                node = node.left
            else:
                return node
        return None

    def first_node(self):
        """Return the node with the smallest key, or None if the tree is empty."""
        nil = self._nil
        if self._root is nil:
            return None
        node = self._root
        while node.left is not nil:
            node = node.left
        return node

    def next_node(self, node):
        """Return the in-order successor of ``node``, or None after the last."""
        nil = self._nil
        if node is None:
            return None
        if node.right is not nil:
            nxt = node.right
            while nxt.left is not nil:
                nxt = nxt.left
            return nxt
        while node.parent is not nil:
            if node is node.parent.left:
                return node.parent
            node = node.parent
        return None

    def traverse(self, func):
        """Call ``func(node, left, depth)`` for every node in pre-order.

        ``left`` is -1 for the root, 1 for a left child and 0 for a right child.
        """
        if self._root is not self._nil:
            self._traverse_node(self._root, func, 0)

    def _traverse_node(self, node, func, depth):
        nil = self._nil
        left = -1 if node.parent is nil else int(node.parent.left is node)
        func(node, left, depth)
        if node.left is not nil:
            self._traverse_node(node.left, func, depth + 1)
        if node.right is not nil:
            self._traverse_node(node.right, func, depth + 1)

    def validate(self):
        """Check the red-black invariants; raise ValueError if one is broken."""
        if self._root.color is not Color.BLACK:
            raise ValueError("root is not black")
        if self._root is not self._nil:
            self._validate_node(self._root)

    def _validate_node(self, node):
        nil = self._nil
        if node.parent is not nil and node.parent.left is not node and node.parent.right is not node:
            raise ValueError("node is not a child of its parent")
        if node.color is Color.RED and (
            node.left.color is not Color.BLACK or node.right.color is not Color.BLACK
        ):
            raise ValueError("red node has a red child")
        left_height = self._validate_node(node.left) if node.left is not nil else 1
        right_height = self._validate_node(node.right) if node.right is not nil else 1
        if left_height != right_height:
            raise ValueError("black heights differ")
        return left_height + (1 if node.color is Color.BLACK else 0)

    # -- modification ----------------------------------------------------

    def insert(self, value):
        """Insert ``value`` unless its key is present; return the node holding the key."""
        nil = self._nil
        key = self._key(value)
        node = self._root
        parent = nil
        while node is not nil:
            parent = node
            node_key = self._key(node.value)
            if node_key < key:
                node = node.right
            elif key < node_key:
                node = node.left
            else:
                return node

        new_node = Node(value, Color.RED, nil, nil, parent)
        if parent is not nil:
            if key < self._key(parent.value):
                parent.left = new_node
            else:
                parent.right = new_node
        else:
            self._root = new_node
        self._rebalance(new_node)
        self._size += 1
        return new_node

    def erase(self, key):
        """Remove the value with ``key``; return the number removed (0 or 1)."""
        node = self.find(key)
        if node is None:
            return 0
        self.erase_node(node)
        return 1

    def erase_node(self, node):
        """Remove ``node``'s value from the tree.

        The node object may be reused to hold its successor's value.
        """
        if self._size == 0:
            raise KeyError("erase from an empty tree")
        nil = self._nil
        if node.left is nil or node.right is nil:
            to_erase = node
        else:
            to_erase = node.right
            while to_erase.left is not nil:
                to_erase = to_erase.left

        child = to_erase.left if to_erase.left is not nil else to_erase.right
        child.parent = to_erase.parent
        if to_erase.parent is not nil:
            if to_erase is to_erase.parent.left:
                to_erase.parent.left = child
            else:
                to_erase.parent.right = child
        else:
            self._root = child

        node.value = to_erase.value
        if to_erase.color is Color.BLACK:
            self._rebalance_after_erase(child)

        to_erase.left = to_erase.right = to_erase.parent = None
        nil.parent = nil
        self._size -= 1

    def clear(self):
        """Remove every value."""
        self._root = self._nil
        self._size = 0

    def swap(self, other):
        """Exchange the contents of this tree and ``other``."""
        if other is self:
            return
        self._key, other._key = other._key, self._key
        self._nil, other._nil = other._nil, self._nil
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size

    # -- balancing -------------------------------------------------------

    def _rebalance(self, node):
        while node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is parent.right:
                        node = parent
                        self._rotate_left(node)
                    grandparent = node.parent.parent
                    node.parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    grandparent.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grandparent
                else:
                    if node is parent.left:
                        node = parent
                        self._rotate_right(node)
                    grandparent = node.parent.parent
                    node.parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    self._rotate_left(grandparent)
        self._root.color = Color.BLACK

    def _rebalance_after_erase(self, node):
        while node is not self._root and node.color is Color.BLACK:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = node.parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = node.parent.right
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(node.parent)
                    node = self._root
            else:
                sibling = parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = node.parent.left
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = node.parent.left
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(node.parent)
                    node = self._root
        node.color = Color.BLACK

    def _replace_in_parent(self, node, replacement):
        replacement.parent = node.parent
        if node.parent is self._nil:
            self._root = replacement
        elif node is node.parent.left:
            node.parent.left = replacement
        else:
            node.parent.right = replacement

    def _rotate_left(self, node):
        right_child = node.right
        node.right = right_child.left
        if node.right is not self._nil:
            node.right.parent = node
        self._replace_in_parent(node, right_child)
        right_child.left = node
        node.parent = right_child

    def _rotate_right(self, node):
        left_child = node.left
        node.left = left_child.right
        if node.left is not self._nil:
            node.left.parent = node
        self._replace_in_parent(node, left_child)
        left_child.right = node
        node.parent = left_child