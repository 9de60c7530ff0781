"""Game commands for the reflex bot."""

import discord
from discord import app_commands
from discord.ext import commands
from typing import Optional, Dict, Tuple

import config
from bot.identity import player_key_for, player_name_for
from database.manager import leaderboard_store
from game.errors import ReflexGameError
from game.navigation import GameController, Screen
from game.rounds import Label, Round
from game.session import RoundOutcome
from game.session_manager import session_manager
from utils.embeds import (
    create_game_embed,
    create_game_over_embed,
    create_how_to_play_embed,
    create_leaderboard_embed,
    create_menu_embed
)

OUTCOME_EMOJI = {
    RoundOutcome.CORRECT: "✅",
    RoundOutcome.INCORRECT: "❌",
    RoundOutcome.TIMEOUT: "⏰",
}


class ReflexView(discord.ui.View):
    """Buttons for whichever screen the player is on."""

    def __init__(self, controller: GameController, owner_id: int):
        super().__init__(timeout=None)
        self.controller = controller
        self.owner_id = owner_id
        self.message: Optional[discord.Message] = None
        self.last_outcome: Optional[RoundOutcome] = None
        self.rebuild()

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        if interaction.user.id != self.owner_id:
            await interaction.response.send_message("❌ Start your own game with `/reflex`!", ephemeral=True)
            return False
        return True

    async def on_error(self, interaction: discord.Interaction, error: Exception, item: discord.ui.Item):
        print(f"[ERROR] Button {getattr(item, 'label', item)!r} failed: {error}")
        message = "❌ Something went wrong with your game. Start again with `/reflex`."

        try:
            if isinstance(error, ReflexGameError):
                # Back to the menu, replacing the broken game's buttons
                self.controller.shutdown()
                self.controller.navigate(Screen.MENU)
                self.last_outcome = None
                await self.refresh(None if interaction.response.is_done() else interaction)

            if interaction.response.is_done():
                await interaction.followup.send(message, ephemeral=True)
            else:
                await interaction.response.send_message(message, ephemeral=True)
        except discord.HTTPException as e:
            print(f"[ERROR] Failed to report button error: {e}")

    def embed(self) -> discord.Embed:
        """Render the current screen."""
        controller = self.controller
        screen = controller.screen

        if screen is Screen.GAME:
            embed = create_game_embed(controller.session)
            if self.last_outcome in OUTCOME_EMOJI:
                embed.description = OUTCOME_EMOJI[self.last_outcome]
            return embed
        if screen is Screen.GAME_OVER:
            return create_game_over_embed(controller.session)
        if screen is Screen.LEADERBOARD:
            return create_leaderboard_embed(controller.leaderboard, controller.player_key)
        if screen is Screen.HOW_TO_PLAY:
            return create_how_to_play_embed(controller.tutorial_page)
        return create_menu_embed(controller.player_name)

    def rebuild(self):
        """Replace the buttons to match the current screen."""
        self.clear_items()
        controller = self.controller
        screen = controller.screen

        if screen is Screen.GAME and controller.session.current_round:
            current = controller.session.current_round
            for index, label in enumerate(current.options):
                self._add_button(label.name, discord.ButtonStyle.secondary, self._select(current, label), row=index // 2)
        elif screen is Screen.GAME_OVER:
            self._add_button("Play Again", discord.ButtonStyle.primary, self._play)
            self._add_button("View Leaderboard", discord.ButtonStyle.secondary, self._leaderboard)
            self._add_button("Back to Menu", discord.ButtonStyle.secondary, self._menu)
        elif screen is Screen.LEADERBOARD:
            self._add_button("Back to Menu", discord.ButtonStyle.secondary, self._menu)
        elif screen is Screen.HOW_TO_PLAY:
            if controller.tutorial_page > 1:
                self._add_button("Previous", discord.ButtonStyle.secondary, self._page(-1))
            if controller.tutorial_page < config.TUTORIAL_PAGES:
                self._add_button("Next", discord.ButtonStyle.primary, self._page(1))
            else:
                self._add_button("Back to Menu", discord.ButtonStyle.primary, self._menu)
        else:
            self._add_button("Play Game", discord.ButtonStyle.primary, self._play)
            self._add_button("How to Play", discord.ButtonStyle.secondary, self._how_to_play)
            self._add_button("Leaderboard", discord.ButtonStyle.secondary, self._leaderboard)

    async def refresh(self, interaction: Optional[discord.Interaction] = None):
        """Re-render the message, through the interaction when there is one."""
        self.rebuild()
        if interaction is not None:
            await interaction.response.edit_message(embed=self.embed(), view=self)
        elif self.message is not None:
            await self.message.edit(embed=self.embed(), view=self)

    # Buttons
    def _add_button(self, label: str, style: discord.ButtonStyle, callback, row: Optional[int] = None):
        button = discord.ui.Button(label=label, style=style, row=row)
        button.callback = callback
        self.add_item(button)

    def _select(self, current: Round, label: Label):
        async def callback(interaction: discord.Interaction):
            # Stale button from a round that already timed out
            if self.controller.session.current_round is current:
                self.last_outcome = self.controller.select_option(label)
            await self.refresh(interaction)
        return callback

    def _page(self, direction: int):
        async def callback(interaction: discord.Interaction):
            self.controller.advance_tutorial_page(direction)
            await self.refresh(interaction)
        return callback

    async def _play(self, interaction: discord.Interaction):
        self.last_outcome = None
        self.controller.start_game()
        await self.refresh(interaction)

    async def _how_to_play(self, interaction: discord.Interaction):
        self.controller.navigate(Screen.HOW_TO_PLAY)
        await self.refresh(interaction)

    async def _leaderboard(self, interaction: discord.Interaction):
        await self.controller.load_leaderboard()
        await self.refresh(interaction)

    async def _menu(self, interaction: discord.Interaction):
        self.controller.navigate(Screen.MENU)
        await self.refresh(interaction)


class GameCommands(commands.Cog):
    """Game commands for the reflex challenge."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self.views: Dict[Tuple[str, str], ReflexView] = {}

    def cog_unload(self):
        session_manager.shutdown_all()
        self.views.clear()

    @app_commands.command(name="reflex", description="Open the Check Your Reflexes menu")
    async def reflex(self, interaction: discord.Interaction):
        """Open the game menu."""
        key = (player_key_for(interaction.user), str(interaction.channel_id))

        controller = session_manager.get_or_create(
            key[0],
            key[1],
            player_name_for(interaction.user),
            store=leaderboard_store,
            on_tick=lambda session, outcome: self._on_tick(key, outcome)
        )
        # Leaving a running game from an older message
        controller.navigate(Screen.MENU)

        old_view = self.views.get(key)
        if old_view:
            old_view.stop()

        view = ReflexView(controller, interaction.user.id)
        self.views[key] = view

        await interaction.response.send_message(embed=view.embed(), view=view)
        view.message = await interaction.original_response()

    @app_commands.command(name="reflex_leaderboard", description="View the top reflex scores")
    async def leaderboard(self, interaction: discord.Interaction):
        """View the leaderboard."""
        try:
            entries = await leaderboard_store.top_n()
        except Exception as e:
            print(f"[ERROR] Error fetching leaderboard: {e}")
            entries = []

        embed = create_leaderboard_embed(entries, player_key_for(interaction.user))
        await interaction.response.send_message(embed=embed)

    async def _on_tick(self, key: Tuple[str, str], outcome: Optional[RoundOutcome]):
        """Redraw the player's game message after a clock tick."""
        view = self.views.get(key)
        if view is None:
            return
        if outcome is not None:
            view.last_outcome = outcome

        try:
            await view.refresh()
        except discord.HTTPException as e:
            print(f"[ERROR] Failed to update game message: {e}")


async def setup(bot: commands.Bot):
    await bot.add_cog(GameCommands(bot))
