"""Discord embed builders for bot responses."""

import discord
import os
from typing import Optional, List
from urllib.parse import quote
from dotenv import load_dotenv

import config
from database.manager import LeaderboardEntry
from game.difficulty import difficulty_badge
from game.engine import GameSession
from utils.formatters import (
    format_clock,
    format_hearts,
    format_round_seconds,
    format_score,
    progress_bar
)

load_dotenv()

TUTORIAL_TEXT = {
    1: (
        "A label like **BLUE STAR** appears at the top of the screen.\n"
        "Pick the one image out of four that matches it, color *and* shape.\n"
        f"Every correct pick is worth **{config.POINTS_PER_CORRECT} points**."
    ),
    2: (
        f"You have **{config.SESSION_SECONDS} seconds** and **{config.STARTING_LIVES} lives**.\n"
        "Each round has its own countdown. A wrong pick or running out of\n"
        "round time costs a life. Lose them all and the game is over."
    ),
    3: (
        "Rounds get faster as you go.\n"
        f"From round {config.SAME_SHAPE_DECOYS_FROM} a decoy shares the target's shape, "
        f"and from round {config.BACKGROUND_CHURN_FROM} the background starts flashing.\n"
        "Beat your best score to climb the leaderboard!"
    ),
}


def asset_url(name: str) -> Optional[str]:
    """Get the URL of an image asset, if an asset host is configured."""
    base = os.getenv("REFLEX_ASSET_URL")
    if not base:
        return None
    return f"{base.rstrip('/')}/{quote(name)}"


def _color_from_hex(value: str) -> discord.Color:
    try:
        return discord.Color(int(value.lstrip('#'), 16))
    except ValueError:
        return discord.Color(int(config.DEFAULT_BACKGROUND_COLOR.lstrip('#'), 16))


def create_menu_embed(player_name: str) -> discord.Embed:
    """Create embed for the main menu."""
    embed = discord.Embed(
        title="⚡ Check Your Reflexes",
        description=(
            f"Welcome, **{player_name}**!\n"
            "Find the matching image before the clock runs out."
        ),
        color=_color_from_hex(config.DEFAULT_BACKGROUND_COLOR)
    )
    logo = asset_url("intro_logo.png")
    if logo:
        embed.set_thumbnail(url=logo)
    return embed


def create_game_embed(session: GameSession) -> discord.Embed:
    """Create embed for the game screen."""
    state = session.state
    current = state.current_round
    target = current.target.name.upper() if current else "..."

    embed = discord.Embed(
        title=f"🎯 {target}",
        color=_color_from_hex(state.background_color)
    )
    embed.add_field(name="Rounds", value=str(state.rounds_completed), inline=True)
    embed.add_field(name="Lives", value=format_hearts(state.lives), inline=True)
    embed.add_field(name="Score", value=format_score(state.score), inline=True)

    clock = format_clock(state.session_seconds_remaining)
    if state.session_seconds_remaining < 10:
        clock = f"**{clock}** ⚠️"
    embed.add_field(name="Game", value=clock, inline=True)
    embed.add_field(
        name="Round",
        value=(
            f"{format_round_seconds(state.round_seconds_remaining)}\n"
            f"`{progress_bar(session.round_progress)}`"
        ),
        inline=True
    )

    badge = difficulty_badge(state.rounds_completed)
    embed.set_footer(text=f"Difficulty: {badge}")
    badge_image = asset_url(f"{badge}.png")
    if badge_image:
        embed.set_thumbnail(url=badge_image)

    return embed


def create_game_over_embed(session: GameSession) -> discord.Embed:
    """Create embed for the game over screen."""
    state = session.state
    level = session.level_achieved

    embed = discord.Embed(
        title="🏁 LEVEL ACHIEVED!",
        description=f"**Level {level}**",
        color=_color_from_hex(config.DEFAULT_BACKGROUND_COLOR)
    )
    embed.add_field(name="Final Score", value=format_score(state.score), inline=False)
    embed.add_field(name="Rounds", value=str(state.rounds_completed), inline=True)
    embed.add_field(name="Time Taken", value=f"{session.time_taken}s", inline=True)

    level_image = asset_url(f"{level}.png")
    if level_image:
        embed.set_image(url=level_image)

    return embed


def create_leaderboard_embed(
    entries: List[LeaderboardEntry],
    viewer: Optional[str] = None
) -> discord.Embed:
    """Create embed for the top players, highlighting the viewer's row by player key."""
    embed = discord.Embed(
        title="🏆 TOP PLAYERS",
        color=discord.Color.gold()
    )

    if not entries:
        embed.description = "No scores yet. Be the first!"
        return embed

    medals = ["👑", "🥈", "🥉"]
    lines = []
    for i, entry in enumerate(entries, 1):
        rank = medals[i - 1] if i <= 3 else f"{i}."
        line = f"{rank} {entry.name} - {format_score(entry.score)}"
        if viewer and entry.player == viewer:
            line = f"**{line}** ⬅️"
        lines.append(line)

    embed.description = "\n".join(lines)[:4096]  # Discord limit
    return embed


def create_how_to_play_embed(page: int) -> discord.Embed:
    """Create embed for a how-to-play page."""
    embed = discord.Embed(
        title="📖 HOW TO PLAY",
        description=TUTORIAL_TEXT.get(page, TUTORIAL_TEXT[1]),
        color=_color_from_hex(config.DEFAULT_BACKGROUND_COLOR)
    )
    embed.set_footer(text=f"Page {page}/{config.TUTORIAL_PAGES}")

    image = asset_url(f"h{page}.png")
    if image:
        embed.set_image(url=image)

    return embed
