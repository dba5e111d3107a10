# containers.py
"""
Bounded or unbounded LIFO and FIFO containers used by the converter and evaluator.

Both containers signal misuse with exceptions (underflow on an empty container,
overflow on a full one) so the algorithms built on top of them can turn those
conditions into notation errors.
"""

from collections import deque
from typing import Deque, Generic, Iterable, List, Optional, TypeVar

from .errors import (
    QueueOverflowError,
    QueueUnderflowError,
    StackOverflowError,
    StackUnderflowError,
)

T = TypeVar('T')


def _check_max_size(max_size: Optional[int]) -> Optional[int]:
    if max_size is not None and max_size < 1:
        raise ValueError(f"max_size must be at least 1, got {max_size}")
    return max_size


class Stack(Generic[T]):
    """LIFO container. max_size=None means unbounded."""

    def __init__(self, max_size: Optional[int] = None, items: Optional[Iterable[T]] = None):
        self.max_size = _check_max_size(max_size)
        self._items: List[T] = []
        if items is not None:
            self.fill(items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self.max_size is not None and len(self._items) >= self.max_size

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        if self.is_full():
            raise StackOverflowError(f"The stack is full ({self.max_size} items)")
        self._items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("The stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("The stack is empty")
        return self._items[-1]

    def fill(self, items: Iterable[T]) -> None:
        """Push items in order; the first item ends up at the bottom."""
        for item in items:
            self.push(item)

    def to_string(self, delimiter: str = '') -> str:
        """Render the stack bottom to top."""
        return delimiter.join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Stack([{self.to_string(', ')}], max_size={self.max_size})"


class Queue(Generic[T]):
    """FIFO container. max_size=None means unbounded."""

    def __init__(self, max_size: Optional[int] = None, items: Optional[Iterable[T]] = None):
        self.max_size = _check_max_size(max_size)
        self._items: Deque[T] = deque()
        if items is not None:
            self.fill(items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self.max_size is not None and len(self._items) >= self.max_size

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item: T) -> None:
        if self.is_full():
            raise QueueOverflowError(f"The queue is full ({self.max_size} items)")
        self._items.append(item)

    def dequeue(self) -> T:
        if self.is_empty():
            raise QueueUnderflowError("The queue is empty")
        return self._items.popleft()

    def peek(self) -> T:
        if self.is_empty():
            raise QueueUnderflowError("The queue is empty")
        return self._items[0]

    def fill(self, items: Iterable[T]) -> None:
        for item in items:
            self.enqueue(item)

    def to_string(self, delimiter: str = '') -> str:
        """Render the queue front to back."""
        return delimiter.join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Queue([{self.to_string(', ')}], max_size={self.max_size})"
