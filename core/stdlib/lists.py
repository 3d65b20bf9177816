"""
List helpers: an ordered container usable as a stack or a queue.
"""
from core.stdlib.errors import ErrorCode, StdlibError


class SpellList:
    """Ordered collection of string records."""

    def __init__(self, items=None):
        self._items = list(items or [])

    def append(self, value):
        self._items.append(value)

    def prepend(self, value):
        self._items.insert(0, value)

    def pop(self):
        """Remove and return the last element."""
        if not self._items:
            raise StdlibError(ErrorCode.EMPTY_LIST, "Cannot pop from empty list")
        return self._items.pop()

    def shift(self):
        """Remove and return the first element."""
        if not self._items:
            raise StdlibError(ErrorCode.EMPTY_LIST, "Cannot shift from empty list")
        return self._items.pop(0)

    def peek_end(self):
        if not self._items:
            raise StdlibError(ErrorCode.EMPTY_LIST, "Cannot peek from empty list")
        return self._items[-1]

    def peek_front(self):
        if not self._items:
            raise StdlibError(ErrorCode.EMPTY_LIST, "Cannot peek from empty list")
        return self._items[0]

    def length(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def get(self, index):
        """Element at a 0-based index; negative indexes are invalid."""
        if index < 0 or index >= len(self._items):
            raise StdlibError(ErrorCode.INVALID_INDEX, f"Invalid index: {index}")
        return self._items[index]

    def items(self):
        return list(self._items)

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __str__(self):
        return f"[{', '.join(self._items)}]"

    def __repr__(self):
        return f"SpellList({self._items!r})"
