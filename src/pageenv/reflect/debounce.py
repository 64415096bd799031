"""Trailing-edge debounce with an injectable timer."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Generic, Protocol, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class Cancellable(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        ...


class ThreadingScheduler:
    """Run callbacks on daemon :class:`threading.Timer` threads."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer(Generic[T]):
    """Coalesce bursts of calls into one call after ``wait`` quiet seconds.

    Every call cancels the pending invocation and schedules a new one, so
    only the arguments of the last call in a burst are used. With
    ``immediate`` the function runs on the leading edge of a burst instead
    and the trailing call is suppressed. Calling the debouncer returns the
    result of the most recent completed invocation.
    """

    def __init__(
        self,
        func: Callable[..., T],
        wait: float,
        *,
        immediate: bool = False,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._func = func
        self._wait = wait
        self._immediate = immediate
        self._scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.Lock()
        self._pending: Cancellable | None = None
        self._token: object | None = None
        self.result: T | None = None

    @property
    def pending(self) -> bool:
        return self._token is not None

    def __call__(self, *args: Any, **kwargs: Any) -> T | None:
        token = object()

        def later() -> None:
            with self._lock:
                if self._token is not token:
                    return
                self._token = None
                self._pending = None
            if not self._immediate:
                self.result = self._func(*args, **kwargs)

        with self._lock:
            call_now = self._immediate and self._token is None
            if self._pending is not None:
                self._pending.cancel()
            self._token = token
            self._pending = self._scheduler.call_later(self._wait, later)

        if call_now:
            self.result = self._func(*args, **kwargs)
        return self.result

    def cancel(self) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
                _LOGGER.debug("Cancelled pending debounced call")
            self._pending = None
            self._token = None


__all__ = ["Cancellable", "Debouncer", "Scheduler", "ThreadingScheduler"]
