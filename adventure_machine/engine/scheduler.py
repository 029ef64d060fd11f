"""
Tick Scheduler for AdventureMachine.

A cooperative run loop for location-local background behavior.
Each iteration calls every registered callback once, then hands
control back to the asyncio event loop before the next iteration.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

TickFn = Callable[[], Any]


class TickScheduler:
    """
    Single-threaded cooperative tick loop.

    A callback that returns exactly False is unregistered; any other
    result (None included) keeps it. Callbacks may add, stop, start or
    clear the scheduler while an iteration is running: each iteration
    works over a snapshot and skips callbacks removed mid-pass.
    """

    def __init__(self, interval: float = 0.0) -> None:
        self.interval = interval
        self._callbacks: list[TickFn] = []
        self._running = False
        self._loop: asyncio.AbstractEventLoop | None = None
        self._handle: asyncio.Handle | None = None
        self.iterations = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def callbacks(self) -> list[TickFn]:
        return list(self._callbacks)

    def add(self, callback: TickFn) -> None:
        self._callbacks.append(callback)

    def start(self) -> None:
        """Start ticking on the running event loop. No-op if already running."""
        if self._running:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; ticks must be driven with run_once()")
            return

        self._loop = loop
        self._running = True
        logger.debug("Scheduler started with %d callback(s)", len(self._callbacks))
        self._schedule()

    def stop(self) -> None:
        """Cancel the pending iteration; registered callbacks are kept."""
        self._running = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def clear(self) -> None:
        self.stop()
        self._callbacks.clear()

    def run_once(self) -> None:
        """Call every registered callback once, in registration order."""
        self.iterations += 1
        for callback in list(self._callbacks):
            if callback not in self._callbacks:
                continue
            try:
                result = callback()
            except Exception:
                logger.exception("Tick callback %r failed; unregistering it", callback)
                self._remove(callback)
                continue
            if result is False:
                self._remove(callback)

    def _remove(self, callback: TickFn) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _schedule(self) -> None:
        if self._loop is None:
            return
        if self.interval > 0:
            self._handle = self._loop.call_later(self.interval, self._iterate)
        else:
            self._handle = self._loop.call_soon(self._iterate)

    def _iterate(self) -> None:
        self._handle = None
        if not self._running:
            return
        if not self._callbacks:
            self._running = False
            return

        self.run_once()

        if not self._callbacks:
            logger.debug("Scheduler idle: no callbacks left")
            self._running = False
        elif self._running and self._handle is None:
            self._schedule()
