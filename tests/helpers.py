"""Shared test doubles."""

from types import SimpleNamespace
from typing import Dict, Optional

from game.engine import GameSession
from game.rounds import Label


class FakeStore:
    """In-memory leaderboard store that records every write."""

    def __init__(self, scores: Optional[Dict[str, int]] = None):
        self.scores = dict(scores or {})
        self.names = {}
        self.writes = []

    async def get(self, player):
        return self.scores.get(player)

    async def set_if_higher(self, player, score, display_name=None):
        self.writes.append((player, score))
        if player not in self.scores or score > self.scores[player]:
            self.scores[player] = score
            if display_name:
                self.names[player] = display_name

    async def top_n(self, n=7):
        ranked = sorted(self.scores.items(), key=lambda item: -item[1])
        return ranked[:n]


class BrokenStore:
    """Store whose every call fails."""

    async def get(self, player):
        raise ConnectionError("store unavailable")

    async def set_if_higher(self, player, score, display_name=None):
        raise ConnectionError("store unavailable")

    async def top_n(self, n=7):
        raise ConnectionError("store unavailable")


def wrong_label(session: GameSession) -> Label:
    """Pick any option that isn't the target."""
    current = session.current_round
    return next(label for label in current.options if label != current.target)


class FakeMessage:
    """Stands in for the Discord message a view is attached to."""

    def __init__(self):
        self.edits = []

    async def edit(self, **kwargs):
        self.edits.append(kwargs)


class FakeResponse:
    def __init__(self, done=False):
        self.done = done
        self.edits = []
        self.messages = []

    def is_done(self):
        return self.done

    async def edit_message(self, **kwargs):
        self.edits.append(kwargs)
        self.done = True

    async def send_message(self, content=None, **kwargs):
        self.messages.append((content, kwargs))
        self.done = True


class FakeFollowup:
    def __init__(self):
        self.messages = []

    async def send(self, content=None, **kwargs):
        self.messages.append((content, kwargs))


class FakeInteraction:
    """Records what a view sends back through an interaction."""

    def __init__(self, user_id=1, responded=False):
        self.user = SimpleNamespace(id=user_id)
        self.response = FakeResponse(done=responded)
        self.followup = FakeFollowup()
