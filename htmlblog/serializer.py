"""FIFO gate that lets one store mutation run at a time."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

T = TypeVar("T")


class WriteSerializer:
    """Ticket lock: callers are admitted strictly in arrival order.

    A plain ``threading.Lock`` makes no ordering promise, so waiters take a
    ticket and sleep on a condition until their number is served. There is no
    timeout; a holder that never returns blocks every queued caller.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._next_ticket = 0
        self._now_serving = 0

    @property
    def pending(self) -> int:
        """Number of callers holding or waiting for the gate."""
        with self._cond:
            return self._next_ticket - self._now_serving

    @contextmanager
    def hold(self) -> Iterator[None]:
        with self._cond:
            ticket = self._next_ticket
            self._next_ticket += 1
            while ticket != self._now_serving:
                self._cond.wait()
        try:
            yield
        finally:
            with self._cond:
                self._now_serving += 1
                self._cond.notify_all()

    def run(self, fn: Callable[..., T], *args, **kwargs) -> T:
        with self.hold():
            return fn(*args, **kwargs)
