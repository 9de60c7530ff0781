import random

import discord

import config
from database.manager import LeaderboardEntry
from game.engine import GameSession
from utils.embeds import (
    _color_from_hex,
    asset_url,
    create_game_embed,
    create_game_over_embed,
    create_how_to_play_embed,
    create_leaderboard_embed,
    create_menu_embed
)

DEFAULT_COLOR = int(config.DEFAULT_BACKGROUND_COLOR.lstrip('#'), 16)


def fields(embed):
    return {field.name: field.value for field in embed.fields}


def test_asset_url_needs_a_host(monkeypatch):
    monkeypatch.delenv("REFLEX_ASSET_URL", raising=False)
    assert asset_url("1.png") is None


def test_asset_url_quotes_names(monkeypatch):
    monkeypatch.setenv("REFLEX_ASSET_URL", "https://cdn.example.com/reflex/")
    assert asset_url("Red Star.png") == "https://cdn.example.com/reflex/Red%20Star.png"


def test_color_from_hex():
    assert _color_from_hex("#ff0000").value == 0xff0000
    assert _color_from_hex("00ff00").value == 0x00ff00


def test_bad_color_falls_back_to_default():
    assert _color_from_hex("not a color").value == DEFAULT_COLOR


def test_menu_greets_player(monkeypatch):
    monkeypatch.delenv("REFLEX_ASSET_URL", raising=False)
    embed = create_menu_embed("Sam")

    assert "**Sam**" in embed.description
    assert embed.thumbnail.url is None


def test_menu_logo_from_asset_host(monkeypatch):
    monkeypatch.setenv("REFLEX_ASSET_URL", "https://cdn.example.com")
    embed = create_menu_embed("Sam")

    assert embed.thumbnail.url == "https://cdn.example.com/intro_logo.png"


def test_empty_leaderboard():
    embed = create_leaderboard_embed([])
    assert embed.description == "No scores yet. Be the first!"


def test_leaderboard_highlights_viewer_by_key():
    entries = [
        LeaderboardEntry("111", 1200, "Sam"),
        LeaderboardEntry("222", 40, "Sam"),
        LeaderboardEntry("333", 30, "Kim"),
        LeaderboardEntry("444", 20),
    ]

    lines = create_leaderboard_embed(entries, viewer="222").description.split("\n")

    assert lines == [
        "👑 Sam - 1,200",
        "**🥈 Sam - 40** ⬅️",
        "🥉 Kim - 30",
        "4. 444 - 20",
    ]


def test_leaderboard_without_viewer_has_no_highlight():
    embed = create_leaderboard_embed([LeaderboardEntry("111", 50, "Sam")])
    assert "⬅️" not in embed.description


def test_game_embed(monkeypatch):
    monkeypatch.delenv("REFLEX_ASSET_URL", raising=False)
    session = GameSession(rng=random.Random(3))
    session.start("Sam")
    session.state.session_seconds_remaining = 5

    embed = create_game_embed(session)

    assert embed.title == f"🎯 {session.current_round.target.name.upper()}"
    assert embed.color.value == DEFAULT_COLOR
    assert embed.footer.text == "Difficulty: E"
    values = fields(embed)
    assert values["Lives"] == "❤️❤️❤️"
    assert values["Game"] == "**0:05** ⚠️"
    assert values["Round"].startswith("3s\n")


def test_game_over_shows_level_and_time(monkeypatch):
    monkeypatch.setenv("REFLEX_ASSET_URL", "https://cdn.example.com")
    session = GameSession(rng=random.Random(3))
    session.start("Sam")
    session.state.rounds_completed = 42
    session.state.score = 420
    session.state.session_seconds_remaining = 15

    embed = create_game_over_embed(session)

    assert embed.description == "**Level 4**"
    values = fields(embed)
    assert values["Final Score"] == "420"
    assert values["Rounds"] == "42"
    assert values["Time Taken"] == "45s"
    assert embed.image.url == "https://cdn.example.com/4.png"


def test_how_to_play_pages():
    embed = create_how_to_play_embed(2)

    assert embed.footer.text == f"Page 2/{config.TUTORIAL_PAGES}"
    assert f"{config.STARTING_LIVES} lives" in embed.description
    assert isinstance(embed, discord.Embed)
