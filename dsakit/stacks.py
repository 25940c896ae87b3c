"""A stack that reports its minimum in constant time."""


class MinStack:
    """Stack of comparable values with constant-time ``minimum``."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        """Push a value."""
        self._items.append(value)
        if self._minima and self._minima[-1] <= value:
            self._minima.append(self._minima[-1])
        else:
            self._minima.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        self._minima.pop()
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def minimum(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]