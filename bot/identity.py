"""Player identity lookup."""

from typing import Callable, Optional

import config


def current_player(provider: Callable[[], Optional[str]]) -> str:
    """
    Resolve the current player's display name.

    Args:
        provider: Callable returning the name; may raise or return nothing

    Returns:
        The name, or the anonymous sentinel if it can't be resolved
    """
    try:
        name = provider()
    except Exception as e:
        print(f"[ERROR] Error getting username: {e}")
        return config.ANONYMOUS_PLAYER

    if not name or not str(name).strip():
        return config.ANONYMOUS_PLAYER
    return str(name).strip()


def player_name_for(user) -> str:
    """Get the leaderboard name for a Discord user or member."""
    return current_player(lambda: user.display_name)


def player_key_for(user) -> str:
    """Get the leaderboard key for a user. Display names are not unique."""
    return str(user.id)
