import pytest

from game.navigation import GameController
from game.session_manager import SessionManager


def test_get_or_create_reuses_controller():
    manager = SessionManager()

    first = manager.get_or_create("1", "100", "alice")
    second = manager.get_or_create("1", "100", "alice2")

    assert isinstance(first, GameController)
    assert first is second
    assert second.player_name == "alice2"
    assert second.player_key == "1"
    assert manager.get("1", "100") is first


def test_controllers_are_per_channel():
    manager = SessionManager()

    first = manager.get_or_create("1", "100", "alice")
    second = manager.get_or_create("1", "200", "alice")

    assert first is not second


@pytest.mark.asyncio
async def test_running_games_and_removal():
    manager = SessionManager()
    controller = manager.get_or_create("1", "100", "alice")
    manager.get_or_create("2", "100", "bob")

    controller.start_game()

    assert manager.is_playing("1", "100")
    assert not manager.is_playing("2", "100")
    assert manager.get_all_running() == [controller]

    removed = manager.remove("1", "100")

    assert removed is controller
    assert not controller.session.is_running
    assert not controller.timer.running
    assert manager.get("1", "100") is None


@pytest.mark.asyncio
async def test_shutdown_all():
    manager = SessionManager()
    controller = manager.get_or_create("1", "100", "alice")
    controller.start_game()

    manager.shutdown_all()

    assert not controller.session.is_running
    assert manager.get_all_running() == []
