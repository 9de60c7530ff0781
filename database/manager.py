"""Database operations manager."""

import aiosqlite
from dataclasses import dataclass
from typing import Optional, List
from datetime import datetime

import config
from database.migrations import get_database_path


@dataclass(frozen=True)
class LeaderboardEntry:
    """One player's best score."""
    player: str
    score: int
    display_name: Optional[str] = None

    @property
    def name(self) -> str:
        """Name to show on the board."""
        return self.display_name or self.player


class LeaderboardStore:
    """Best score per player, ranked highest first."""

    def __init__(self, db_path: Optional[str] = None, board: str = config.LEADERBOARD_KEY):
        self.db_path = db_path or get_database_path()
        self.board = board

    def _connect(self) -> aiosqlite.Connection:
        """Get database connection."""
        return aiosqlite.connect(self.db_path)

    async def get(self, player: str) -> Optional[int]:
        """Get a player's stored score, or None if they have none."""
        async with self._connect() as db:
            async with db.execute(
                "SELECT score FROM leaderboard_scores WHERE board = ? AND player = ?",
                (self.board, player)
            ) as cursor:
                row = await cursor.fetchone()
                return row[0] if row else None

    async def set_if_higher(self, player: str, score: int, display_name: Optional[str] = None):
        """
        Store the score unless the player already has an equal or higher one.

        The display name is refreshed along with a new best score.
        """
        now = datetime.utcnow()
        async with self._connect() as db:
            await db.execute(
                """
                INSERT INTO leaderboard_scores (board, player, display_name, score, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(board, player) DO UPDATE
                SET score = excluded.score,
                    display_name = COALESCE(excluded.display_name, leaderboard_scores.display_name),
                    updated_at = excluded.updated_at
                WHERE excluded.score > leaderboard_scores.score
                """,
                (self.board, player, display_name, score, now, now)
            )
            await db.commit()

    async def top_n(self, n: int = config.LEADERBOARD_SIZE) -> List[LeaderboardEntry]:
        """Get the best scores, highest first. Ties keep the earlier score first."""
        async with self._connect() as db:
            async with db.execute(
                """
                SELECT player, score, display_name
                FROM leaderboard_scores
                WHERE board = ?
                ORDER BY score DESC, updated_at ASC, player ASC
                LIMIT ?
                """,
                (self.board, n)
            ) as cursor:
                results = []
                async for row in cursor:
                    results.append(LeaderboardEntry(player=row[0], score=row[1], display_name=row[2]))
                return results

    async def count(self) -> int:
        """Get the number of players on the board."""
        async with self._connect() as db:
            async with db.execute(
                "SELECT COUNT(*) FROM leaderboard_scores WHERE board = ?",
                (self.board,)
            ) as cursor:
                row = await cursor.fetchone()
                return row[0]

    async def get_player_rank(self, player: str) -> Optional[int]:
        """Get a player's rank on the leaderboard."""
        score = await self.get(player)
        if score is None:
            return None

        async with self._connect() as db:
            async with db.execute(
                "SELECT COUNT(*) FROM leaderboard_scores WHERE board = ? AND score > ?",
                (self.board, score)
            ) as cursor:
                row = await cursor.fetchone()
                return row[0] + 1


# Global leaderboard store instance
leaderboard_store = LeaderboardStore()
