"""Last-in, first-out stack on top of a Vector."""

from .vector import Vector


class Stack:
    """LIFO stack."""

    def __init__(self):
        self._container = Vector()

    def push(self, value):
        """Put ``value`` on top."""
        self._container.push_back(value)

    def pop(self):
        """Remove and return the top value."""
        if not len(self._container):
            raise IndexError("pop from an empty stack")
        return self._container.pop_back()

    def top(self):
        """Return the top value without removing it."""
        if not len(self._container):
            raise IndexError("top of an empty stack")
        return self._container.back()

    def clear(self):
        """Remove every value."""
        self._container.clear()

    def __len__(self):
        return len(self._container)

    def __bool__(self):
        return len(self._container) > 0