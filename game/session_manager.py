"""Manages active game controllers."""

from typing import Optional, Dict, List
from game.navigation import GameController


class SessionManager:
    """Keeps one game controller per player per channel."""

    def __init__(self):
        # Dictionary mapping (user_id, channel_id) to controller
        self._controllers: Dict[tuple, GameController] = {}

    def get_or_create(
        self,
        user_id: str,
        channel_id: str,
        player_name: str,
        **kwargs
    ) -> GameController:
        """Get the player's controller, creating it on first use."""
        key = (user_id, channel_id)
        controller = self._controllers.get(key)

        if controller is None:
            controller = GameController(player_name=player_name, player_id=user_id, **kwargs)
            self._controllers[key] = controller
        else:
            controller.player_name = player_name

        return controller

    def get(self, user_id: str, channel_id: str) -> Optional[GameController]:
        """Get a player's controller in a channel."""
        return self._controllers.get((user_id, channel_id))

    def remove(self, user_id: str, channel_id: str) -> Optional[GameController]:
        """Stop and forget a player's controller."""
        controller = self._controllers.pop((user_id, channel_id), None)
        if controller:
            controller.shutdown()
        return controller

    def is_playing(self, user_id: str, channel_id: str) -> bool:
        """Check if a player has a running game."""
        controller = self.get(user_id, channel_id)
        return controller is not None and controller.session.is_running

    def get_all_running(self) -> List[GameController]:
        """Get all controllers with a running game."""
        return [c for c in self._controllers.values() if c.session.is_running]

    def shutdown_all(self):
        """Stop every controller."""
        for controller in self._controllers.values():
            controller.shutdown()
        self._controllers.clear()


# Global session manager instance
session_manager = SessionManager()
