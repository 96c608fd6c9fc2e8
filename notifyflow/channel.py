"""A closable, thread-safe FIFO channel connecting pipeline stages."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ChannelClosed(Exception):
    """Raised when sending to, or receiving from, a closed and drained channel."""


class Channel(Generic[T]):
    """FIFO queue that can be closed; iteration ends once closed and drained.

    ``maxsize`` of 0 means unbounded; otherwise ``send`` blocks while full.
    """

    def __init__(self, maxsize: int = 0) -> None:
        if maxsize < 0:
            raise ValueError("maxsize must not be negative")
        self._maxsize = maxsize
        self._items: deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()

    def _full(self) -> bool:
        return bool(self._maxsize) and len(self._items) >= self._maxsize

    def send(self, item: T) -> None:
        """Put an item on the channel, waiting for room if it is bounded."""
        with self._cond:
            self._cond.wait_for(lambda: self._closed or not self._full())
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(item)
            self._cond.notify_all()

    def receive(self, timeout: float | None = None) -> T:
        """Take the next item.

        Raises ``TimeoutError`` if nothing arrives in time and
        ``ChannelClosed`` once the channel is closed and empty.
        """
        with self._cond:
            ready = self._cond.wait_for(
                lambda: bool(self._items) or self._closed, timeout
            )
            if not ready:
                raise TimeoutError("no item received before timeout")
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            raise ChannelClosed("receive from closed channel")

    def close(self) -> None:
        """Close the channel; pending items can still be received."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return