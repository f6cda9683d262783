"""Fixed-interval tick scheduler"""

import asyncio
import math
from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger


class TickScheduler:
    """Runs one tick per interval on the event loop

    A tick always completes before the next one starts. Deadlines missed
    while a tick ran long or the host was suspended are skipped, never
    replayed.
    """

    def __init__(
        self,
        tick: Callable[[], Awaitable[Any]],
        interval: float = 1.0,
        max_ticks: int | None = None,
    ) -> None:
        """Initialise scheduler

        Args:
            tick: Coroutine function run once per interval
            interval: Seconds between tick deadlines
            max_ticks: Stop on its own after this many ticks
        """
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError("interval must be a finite positive number")
        self._tick = tick
        self.interval = interval
        self.max_ticks = max_ticks
        self.ticks = 0
        self.skipped = 0
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        if self._running:
            logger.warning("Tick scheduler already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run())
        logger.info(f"Tick scheduler started ({self.interval}s interval)")

    async def stop(self) -> None:
        """Stop the timer; an in-flight tick is cancelled"""
        if self._task is None:
            return

        self._running = False
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info(f"Tick scheduler stopped after {self.ticks} ticks")

    async def wait(self) -> None:
        """Wait until the scheduler finishes on its own"""
        if self._task is not None:
            await asyncio.shield(self._task)

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.interval

        while self._running:
            await asyncio.sleep(max(0.0, deadline - loop.time()))

            try:
                await self._tick()
            except Exception as e:
                logger.exception(f"Tick failed: {e}")
            self.ticks += 1

            if self.max_ticks is not None and self.ticks >= self.max_ticks:
                self._running = False
                break

            deadline += self.interval
            now = loop.time()
            if now >= deadline:
                missed = int((now - deadline) // self.interval) + 1
                deadline += missed * self.interval
                self.skipped += missed
                logger.warning(f"Skipped {missed} missed tick(s)")
