"""Game session data structures."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

import config
from game.rounds import Round


class Phase(Enum):
    """Lifecycle of a game session."""
    IDLE = 'idle'
    RUNNING = 'running'
    ENDED = 'ended'


class EndReason(Enum):
    """Why a session ended."""
    OUT_OF_LIVES = 'out_of_lives'
    OUT_OF_TIME = 'out_of_time'


class RoundOutcome(Enum):
    """Result of resolving a round."""
    CORRECT = 'correct'
    INCORRECT = 'incorrect'
    TIMEOUT = 'timeout'
    GAME_OVER = 'game_over'


@dataclass
class SessionState:
    """Represents the state of one reflex game."""
    player_name: str = config.ANONYMOUS_PLAYER

    # Bookkeeping
    score: int = 0
    lives: int = config.STARTING_LIVES
    rounds_completed: int = 0
    active: bool = False

    # Clocks
    session_seconds_remaining: int = config.SESSION_SECONDS
    round_seconds_remaining: float = 0.0
    round_duration_total: float = 0.0

    # Presentation
    background_churn: bool = False
    background_color: str = config.DEFAULT_BACKGROUND_COLOR

    # Current round
    current_round: Optional[Round] = None

    # Outcome
    end_reason: Optional[EndReason] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
