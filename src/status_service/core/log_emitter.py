"""Periodic log emitter running as an asyncio background task."""

import asyncio
import logging
import random
from typing import Iterable, Optional

from .vocabulary import VOCABULARY, pick_word

logger = logging.getLogger(__name__)


class LogEmitter:
    """Logs a random vocabulary word at a fixed interval after a startup delay."""

    def __init__(self, vocabulary: Iterable[str] = VOCABULARY, startup_delay: float = 5.0,
                 interval: float = 10.0, rng: Optional[random.Random] = None):
        self.vocabulary = tuple(vocabulary)
        if not self.vocabulary:
            raise ValueError("vocabulary must not be empty")
        if startup_delay < 0:
            raise ValueError(f"startup_delay must be >= 0, got {startup_delay}")
        if interval <= 0:
            raise ValueError(f"interval must be > 0, got {interval}")

        self.startup_delay = startup_delay
        self.interval = interval
        self.rng = rng if rng is not None else random.Random()
        self.emitted_count = 0
        self.last_word: Optional[str] = None
        self._task: Optional[asyncio.Task] = None
        self._stop_event: Optional[asyncio.Event] = None

    @property
    def running(self) -> bool:
        """Whether the background task is alive."""
        return self._task is not None and not self._task.done()

    def emit_once(self) -> str:
        """Pick a word and write it to the log."""
        word = pick_word(self.rng, self.vocabulary)
        logger.info(f"Log gerado: {word}")
        self.emitted_count += 1
        self.last_word = word
        return word

    async def _wait(self, seconds: float) -> bool:
        """Sleep for `seconds`; return True if a stop was requested meanwhile."""
        if self._stop_event.is_set():
            return True
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return False
        return True

    async def _run(self):
        if await self._wait(self.startup_delay):
            return
        while True:
            self.emit_once()
            if await self._wait(self.interval):
                return

    def _on_done(self, task: asyncio.Task):
        if task.cancelled():
            logger.info("Log emitter task cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Log emitter task failed", exc_info=exc)

    async def start(self):
        """Start the background emitter task."""
        if self.running:
            logger.warning("Log emitter already running")
            return

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run())
        self._task.add_done_callback(self._on_done)
        logger.info(
            f"Started log emitter (startup_delay={self.startup_delay}s, interval={self.interval}s)"
        )

    async def stop(self, timeout: float = 1.0):
        """Signal the emitter to stop and wait for it, cancelling after `timeout`."""
        if self._task is None:
            return

        task = self._task
        self._task = None
        self._stop_event.set()
        if not task.done():
            try:
                await asyncio.wait_for(asyncio.shield(task), timeout=timeout)
            except asyncio.TimeoutError:
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
        logger.info("Stopped log emitter background task")
