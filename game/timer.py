"""Drives the session and round clocks once per second."""

import asyncio
from typing import Awaitable, Callable, Optional, Set

import config
from game.engine import GameSession
from game.errors import ReflexGameError
from game.session import RoundOutcome

TickCallback = Callable[[GameSession, Optional[RoundOutcome]], Awaitable[None]]


class TimerCoordinator:
    """
    Ticks a GameSession on a fixed cadence until it stops running.

    Both clocks and background churn are advanced by a single
    ``GameSession.tick()`` call, so session expiry is always evaluated
    before a round timeout on the same tick.
    """

    def __init__(
        self,
        session: GameSession,
        interval: float = config.TICK_INTERVAL,
        on_tick: Optional[TickCallback] = None
    ):
        self.session = session
        self.interval = interval
        self.on_tick = on_tick
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None
        self._callbacks: Set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Start ticking. Restarting cancels any previous loop first."""
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    def stop(self):
        """Stop ticking. No tick fires after this returns."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self):
        """Wait for the loop to finish on its own (session no longer running)."""
        if self._task is not None:
            try:
                await self._task
            except asyncio.CancelledError:
                pass

    async def _run(self):
        loop = asyncio.get_running_loop()
        next_tick = loop.time()

        while self.session.is_running:
            next_tick += self.interval
            await asyncio.sleep(max(0.0, next_tick - loop.time()))

            if not self.session.is_running:
                break

            try:
                outcome = self.session.tick()
            except ReflexGameError as e:
                print(f"[ERROR] Stopping game for {self.session.state.player_name}: {e}")
                self.session.abandon()
                break

            self.ticks += 1
            self._notify(outcome)

    def _notify(self, outcome: Optional[RoundOutcome]):
        """Schedule the tick callback without waiting on it."""
        if not self.on_tick:
            return

        task = asyncio.get_running_loop().create_task(self.on_tick(self.session, outcome))
        self._callbacks.add(task)
        task.add_done_callback(self._callback_done)

    def _callback_done(self, task: asyncio.Task):
        self._callbacks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error:
            print(f"[ERROR] Tick callback failed: {error}")
