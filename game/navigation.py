"""Screens and the player intents that move between them."""

import asyncio
import random
from enum import Enum
from typing import List, Optional

import config
from game.engine import GameSession
from game.rounds import Label
from game.scoring import ScoreReconciler
from game.session import RoundOutcome
from game.timer import TickCallback, TimerCoordinator


class Screen(Enum):
    MENU = 'menu'
    GAME = 'game'
    GAME_OVER = 'game_over'
    LEADERBOARD = 'leaderboard'
    HOW_TO_PLAY = 'how_to_play'


class GameController:
    """
    One player's view of the game: current screen, tutorial page, the
    session and the timer that drives it.

    Intents from the renderer (start game, select option, navigate,
    turn tutorial page) all go through here.
    """

    def __init__(
        self,
        player_name: str = config.ANONYMOUS_PLAYER,
        store=None,
        on_tick: Optional[TickCallback] = None,
        interval: float = config.TICK_INTERVAL,
        rng: Optional[random.Random] = None,
        player_id: Optional[str] = None
    ):
        self.player_name = player_name
        self.player_id = player_id
        self.store = store
        self.reconciler = ScoreReconciler(store) if store is not None else None
        self.screen = Screen.MENU
        self.tutorial_page = 1
        self.leaderboard: List = []
        self.reconcile_task: Optional[asyncio.Task] = None

        self.session = GameSession(rng=rng, on_end=self._session_ended)
        self.timer = TimerCoordinator(self.session, interval=interval, on_tick=on_tick)

    @property
    def player_key(self) -> str:
        """Key the player's scores are stored under."""
        return self.player_id or self.player_name

    def start_game(self):
        """Start (or restart) a session on the game screen."""
        self.timer.stop()
        self.session.start(self.player_name)
        self.screen = Screen.GAME
        self.timer.start()

    def select_option(self, label: Label) -> Optional[RoundOutcome]:
        """Forward the player's pick; ignored outside the game screen."""
        if self.screen is not Screen.GAME:
            return None
        return self.session.select_option(label)

    def navigate(self, screen: Screen):
        """Switch screens, abandoning a running session when leaving it."""
        if screen is Screen.GAME:
            self.start_game()
            return

        if self.session.is_running:
            self.timer.stop()
            self.session.abandon()

        if screen is Screen.HOW_TO_PLAY:
            self.tutorial_page = 1
        self.screen = screen

    def advance_tutorial_page(self, direction: int):
        """
        Move through the how-to-play pages.

        Args:
            direction: 1 for next, -1 for previous. Moving past the last
                page returns to the menu.
        """
        if direction not in (-1, 1):
            raise ValueError(f"direction must be 1 or -1, got {direction}")
        if self.screen is not Screen.HOW_TO_PLAY:
            return

        page = self.tutorial_page + direction
        if page > config.TUTORIAL_PAGES:
            self.navigate(Screen.MENU)
            return
        self.tutorial_page = max(1, page)

    async def load_leaderboard(self, limit: int = config.LEADERBOARD_SIZE) -> List:
        """Fetch the top scores and show the leaderboard screen."""
        self.navigate(Screen.LEADERBOARD)

        if self.store is None:
            self.leaderboard = []
            return self.leaderboard

        try:
            self.leaderboard = await self.store.top_n(limit)
        except Exception as e:
            print(f"[ERROR] Error fetching leaderboard: {e}")
            self.leaderboard = []
        return self.leaderboard

    def shutdown(self):
        """Stop the timer and drop any running session."""
        self.timer.stop()
        self.session.abandon()

    def _session_ended(self, session: GameSession):
        self.timer.stop()
        self.screen = Screen.GAME_OVER
        if self.reconciler:
            self.reconcile_task = self.reconciler.schedule(
                self.player_key,
                session.state.score,
                session.state.player_name
            )
