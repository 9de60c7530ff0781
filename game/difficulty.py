"""Difficulty policy: how hard a round is, given how many came before it."""

from dataclasses import dataclass
from enum import Enum

import config


class DecoyStrategy(Enum):
    """How the decoys of a round are chosen."""
    RANDOM = 'random'
    SAME_SHAPE_FAMILY = 'same_shape_family'


@dataclass(frozen=True)
class RoundPolicy:
    """Settings applied to a single round."""
    duration: float
    decoy_strategy: DecoyStrategy
    churn_background: bool


def get_round_duration(rounds_completed: int) -> float:
    """Get the time budget in seconds for the next round."""
    for threshold, duration in config.ROUND_DURATIONS:
        if rounds_completed < threshold:
            return duration
    return config.FINAL_ROUND_DURATION


def round_policy(rounds_completed: int) -> RoundPolicy:
    """
    Get the difficulty settings for the round that starts after
    ``rounds_completed`` rounds.

    Args:
        rounds_completed: Rounds resolved so far in the session (0-based)

    Returns:
        RoundPolicy with duration, decoy strategy and churn flag
    """
    if rounds_completed < 0:
        raise ValueError(f"rounds_completed must be non-negative, got {rounds_completed}")

    if rounds_completed < config.SAME_SHAPE_DECOYS_FROM:
        strategy = DecoyStrategy.RANDOM
    else:
        strategy = DecoyStrategy.SAME_SHAPE_FAMILY

    return RoundPolicy(
        duration=get_round_duration(rounds_completed),
        decoy_strategy=strategy,
        churn_background=rounds_completed >= config.BACKGROUND_CHURN_FROM
    )


def difficulty_badge(rounds_completed: int) -> str:
    """Get the difficulty letter shown under the options (E, M, H or X)."""
    for threshold, badge in config.DIFFICULTY_BADGES:
        if rounds_completed >= threshold:
            return badge
    return config.DEFAULT_DIFFICULTY_BADGE
