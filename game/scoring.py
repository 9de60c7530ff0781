"""Score reconciliation and end-of-game level calculation."""

import asyncio
from typing import Optional, Protocol, Set

import config


class ScoreStore(Protocol):
    """The leaderboard operations reconciliation needs."""

    async def get(self, player: str) -> Optional[int]:
        ...

    async def set_if_higher(self, player: str, score: int, display_name: Optional[str] = None) -> None:
        ...


def get_level_achieved(rounds_completed: int) -> int:
    """Get the level (1-8) shown on the game over screen."""
    for threshold, level in config.LEVEL_THRESHOLDS:
        if rounds_completed >= threshold:
            return level
    return config.DEFAULT_LEVEL


class ScoreReconciler:
    """Persists a finished session's score when it beats the player's best."""

    def __init__(self, store: ScoreStore):
        self.store = store
        self._tasks: Set[asyncio.Task] = set()

    async def reconcile(self, player: str, final_score: int, display_name: Optional[str] = None) -> bool:
        """
        Save the final score if it is higher than the stored one.

        Args:
            player: Leaderboard key for the player
            final_score: Score at the end of the session
            display_name: Name to show on the board

        Returns:
            True if a new best score was written
        """
        if not player or final_score <= 0:
            print(f"[INFO] Not saving score - player: {player}, score: {final_score}")
            return False

        try:
            current = await self.store.get(player)
            if current is not None and final_score <= current:
                print(f"[INFO] Not saving score {final_score} for {player}, best is {current}")
                return False

            await self.store.set_if_higher(player, final_score, display_name)
            print(f"[INFO] Saved new high score {final_score} for {player}")
            return True
        except Exception as e:
            print(f"[ERROR] Error saving score for {player}: {e}")
            return False

    def schedule(self, player: str, final_score: int, display_name: Optional[str] = None) -> asyncio.Task:
        """Run ``reconcile`` in the background without blocking the caller."""
        task = asyncio.get_running_loop().create_task(self.reconcile(player, final_score, display_name))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self):
        """Wait for scheduled reconciliations to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
