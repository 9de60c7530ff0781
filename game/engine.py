"""Session state machine for the reflex game."""

import random
from datetime import datetime
from typing import Callable, Optional

import config
from game.difficulty import round_policy
from game.rounds import Label, Round, RoundGenerator
from game.scoring import get_level_achieved
from game.session import EndReason, Phase, RoundOutcome, SessionState


def random_background_color(rng: random.Random) -> str:
    """Get a random hex color for background churn."""
    return f"#{rng.randrange(0x1000000):06x}"


class GameSession:
    """
    Owns one player's SessionState and every transition applied to it.

    Phases go IDLE -> RUNNING -> ENDED; ``start`` re-enters RUNNING from
    any phase. ``select_option`` and ``tick`` are ignored unless RUNNING.
    """

    def __init__(
        self,
        generator: Optional[RoundGenerator] = None,
        rng: Optional[random.Random] = None,
        on_end: Optional[Callable[['GameSession'], None]] = None
    ):
        self.rng = rng or random.Random()
        self.generator = generator or RoundGenerator(self.rng)
        self.on_end = on_end
        self.state = SessionState()
        self.phase = Phase.IDLE

    @property
    def is_running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def current_round(self) -> Optional[Round]:
        return self.state.current_round

    @property
    def round_progress(self) -> float:
        """Fraction of the round clock remaining (0.0 - 1.0)."""
        if self.state.round_duration_total <= 0:
            return 0.0
        return max(0.0, min(1.0, self.state.round_seconds_remaining / self.state.round_duration_total))

    @property
    def time_taken(self) -> int:
        """Seconds of session clock used."""
        return config.SESSION_SECONDS - self.state.session_seconds_remaining

    @property
    def level_achieved(self) -> int:
        return get_level_achieved(self.state.rounds_completed)

    # Transitions
    def start(self, player_name: Optional[str] = None) -> SessionState:
        """Reset the session and start round 0."""
        self.state = SessionState(
            player_name=player_name or self.state.player_name,
            active=True,
            started_at=datetime.utcnow()
        )
        self.phase = Phase.RUNNING
        self._start_round()
        return self.state

    def select_option(self, label: Label) -> Optional[RoundOutcome]:
        """
        Resolve the current round with the player's pick.

        Args:
            label: The option the player selected

        Returns:
            The outcome, or None if the session isn't running
        """
        if not self.is_running or self.state.current_round is None:
            return None

        if label == self.state.current_round.target:
            self.state.score += config.POINTS_PER_CORRECT
            return self._advance(RoundOutcome.CORRECT)

        return self._lose_life(RoundOutcome.INCORRECT)

    def tick(self) -> Optional[RoundOutcome]:
        """
        Advance both clocks by one second.

        The session clock is checked first; when it runs out the session
        ends on this tick and no round timeout is processed.

        Returns:
            TIMEOUT or GAME_OVER when a round was resolved, otherwise None
        """
        if not self.is_running:
            return None

        state = self.state

        # Session clock
        if state.session_seconds_remaining > 0:
            state.session_seconds_remaining -= 1
        if state.session_seconds_remaining == 0:
            self._end(EndReason.OUT_OF_TIME)
            return RoundOutcome.GAME_OVER

        # Round clock
        outcome = None
        if state.round_seconds_remaining > 0:
            state.round_seconds_remaining = max(0.0, state.round_seconds_remaining - 1)
        if round(state.round_seconds_remaining, 1) <= 0:
            outcome = self._lose_life(RoundOutcome.TIMEOUT)
            if outcome is RoundOutcome.GAME_OVER:
                return outcome

        # Background churn
        if state.background_churn:
            state.background_color = random_background_color(self.rng)

        return outcome

    def abandon(self):
        """Stop a running session without recording a score."""
        if not self.is_running:
            return
        self.state.active = False
        self.state.ended_at = datetime.utcnow()
        self.phase = Phase.IDLE

    # Internals
    def _lose_life(self, outcome: RoundOutcome) -> RoundOutcome:
        self.state.lives -= 1
        if self.state.lives <= 0:
            self.state.lives = 0
            self._end(EndReason.OUT_OF_LIVES)
            return RoundOutcome.GAME_OVER
        return self._advance(outcome)

    def _advance(self, outcome: RoundOutcome) -> RoundOutcome:
        self.state.rounds_completed += 1
        self._start_round()
        return outcome

    def _start_round(self):
        state = self.state
        policy = round_policy(state.rounds_completed)

        state.round_duration_total = policy.duration
        state.round_seconds_remaining = policy.duration
        state.background_churn = policy.churn_background
        if policy.churn_background:
            state.background_color = random_background_color(self.rng)

        state.current_round = self.generator.generate(state.rounds_completed, policy.decoy_strategy)

    def _end(self, reason: EndReason):
        state = self.state
        state.active = False
        state.end_reason = reason
        state.ended_at = datetime.utcnow()
        self.phase = Phase.ENDED

        print(
            f"[INFO] Game over for {state.player_name}: reason={reason.value} "
            f"score={state.score} rounds={state.rounds_completed}"
        )

        if self.on_end:
            try:
                self.on_end(self)
            except Exception as e:
                print(f"[ERROR] Session end handler failed: {e}")
