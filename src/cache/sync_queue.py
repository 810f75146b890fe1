# src/cache/sync_queue.py — v2
"""FIFO reader/writer scheduler on top of a thread pool.

Work items are admitted strictly in submission order:

- shared items run concurrently with other shared items;
- an exclusive item starts only once everything admitted before it has
  finished, and nothing admitted after it starts until it has finished.

A shared item queued behind an exclusive one waits, so writers are never
starved by a stream of readers.

Each submit() returns a concurrent.futures.Future that is resolved exactly
once. Futures resolve in submission order, and only after the item's slot
has been released, so a done-callback may submit follow-up work and wait
on it. A blocking callback does occupy one pool worker while it runs.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from concurrent import futures
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


@dataclass
class _WorkItem:
    fn: Callable[[], Any]
    exclusive: bool
    future: Future
    predecessor: Future | None


class SyncQueue:
    """Single-writer / multiple-reader execution context."""

    def __init__(self, name: str = "feedstore", max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        self._name = name
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=name
        )
        self._lock = threading.Lock()
        self._pending: deque[_WorkItem] = deque()
        self._active_shared = 0
        self._active_exclusive = False
        self._closed = False
        self._idle_waiters: list[threading.Event] = []
        self._last_future: Future | None = None
        self._worker_state = threading.local()

    def submit(self, fn: Callable[[], Any], exclusive: bool = False) -> Future:
        """Queue fn and return a future for its result.

        Raises:
            RuntimeError: If the queue has been shut down.
        """
        future: Future = Future()
        # Submitted work always runs; the future can no longer be cancelled.
        future.set_running_or_notify_cancel()
        with self._lock:
            if self._closed:
                raise RuntimeError(f"{self._name}: cannot submit after shutdown")
            self._pending.append(
                _WorkItem(
                    fn=fn,
                    exclusive=exclusive,
                    future=future,
                    predecessor=self._last_future,
                )
            )
            self._last_future = future
            self._start_locked(self._admit_locked())
        return future

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work.

        Queued work still runs to completion. With wait=True, block until
        every submitted future is resolved; otherwise the pool is released
        once the queue drains.
        """
        with self._lock:
            self._closed = True
            drained = threading.Event()
            self._idle_waiters.append(drained)
            self._notify_if_idle_locked()
            last = self._last_future
        if not wait:
            return
        drained.wait()
        if last is not None:
            _wait_done(last)
        # A done-callback closing the store cannot join its own worker.
        if not getattr(self._worker_state, "inside", False):
            self._executor.shutdown(wait=True)

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    # --- Internals ---

    def _admit_locked(self) -> list[_WorkItem]:
        """Pop every item at the head of the queue that may start now."""
        ready: list[_WorkItem] = []
        while self._pending and not self._active_exclusive:
            head = self._pending[0]
            if head.exclusive:
                if self._active_shared or ready:
                    break
                self._pending.popleft()
                self._active_exclusive = True
                ready.append(head)
                break
            self._pending.popleft()
            self._active_shared += 1
            ready.append(head)
        return ready

    def _start_locked(self, items: list[_WorkItem]) -> None:
        # Handing items to the pool under the lock keeps the pool's FIFO
        # order equal to admission order.
        for item in items:
            self._executor.submit(self._run, item)

    def _run(self, item: _WorkItem) -> None:
        self._worker_state.inside = True
        error: BaseException | None = None
        result: Any = None
        try:
            result = item.fn()
        except BaseException as exc:  # noqa: BLE001
            logger.debug("%s: work item raised %r", self._name, exc)
            error = exc

        with self._lock:
            if item.exclusive:
                self._active_exclusive = False
            else:
                self._active_shared -= 1
            self._start_locked(self._admit_locked())
            self._notify_if_idle_locked()

        if item.predecessor is not None:
            _wait_done(item.predecessor)
        if error is not None:
            item.future.set_exception(error)
        else:
            item.future.set_result(result)

    def _notify_if_idle_locked(self) -> None:
        if self._pending or self._active_shared or self._active_exclusive:
            return
        for event in self._idle_waiters:
            event.set()
        self._idle_waiters.clear()
        if self._closed:
            self._executor.shutdown(wait=False)


def _wait_done(future: Future) -> None:
    """Block until future is resolved, without waiting for its callbacks."""
    futures.wait([future])
