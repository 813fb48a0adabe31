"""Thread-safe message stores: a bounded ring buffer and an unbounded queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque

DEFAULT_CAPACITY = 10


class BufferFull(Exception):
    """Raised when a message is pushed into a full buffer."""


class BufferEmpty(LookupError):
    """Raised when a message is taken from an empty buffer or queue."""


class CircularBuffer:
    """A fixed-capacity FIFO of messages that refuses new ones when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list = [None] * capacity
        self._head = 0
        self._tail = 0
        self._count = 0
        self._lock = threading.Lock()

    def push(self, message: str) -> None:
        """Store ``message`` at the tail; raise BufferFull if there is no room."""
        with self._lock:
            if self._count == self.capacity:
                raise BufferFull(f"buffer holds {self.capacity} messages already")
            self._slots[self._tail] = message
            self._tail = (self._tail + 1) % self.capacity
            self._count += 1

    def pop(self) -> str:
        """Remove and return the oldest message; raise BufferEmpty if none."""
        with self._lock:
            if self._count == 0:
                raise BufferEmpty("buffer is empty")
            message = self._slots[self._head]
            self._slots[self._head] = None
            self._head = (self._head + 1) % self.capacity
            self._count -= 1
            return message

    def __len__(self) -> int:
        with self._lock:
            return self._count


class MessageQueue:
    """An unbounded FIFO of outgoing messages."""

    def __init__(self) -> None:
        self._items: Deque[str] = deque()
        self._lock = threading.Lock()

    def enqueue(self, message: str) -> None:
        """Append ``message`` to the back of the queue."""
        with self._lock:
            self._items.append(message)

    def dequeue(self) -> str:
        """Remove and return the front message; raise BufferEmpty if none."""
        with self._lock:
            if not self._items:
                raise BufferEmpty("queue is empty")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)