"""Discord bot event handlers."""

import discord
from discord import app_commands
from discord.ext import commands

from game.errors import ReflexGameError
from game.session_manager import session_manager


def setup_events(bot: commands.Bot):
    """Set up event handlers for the bot."""

    @bot.event
    async def on_ready():
        """Called when bot is ready."""
        print(f"{bot.user} has connected to Discord!")
        print(f"Bot is in {len(bot.guilds)} guilds")

        # Guild sync is instant, global sync can take up to an hour
        for guild in bot.guilds:
            try:
                bot.tree.copy_global_to(guild=guild)
                synced = await bot.tree.sync(guild=guild)
                print(f"Synced {len(synced)} command(s) to guild: {guild.name}")
            except discord.HTTPException as e:
                print(f"[ERROR] Failed to sync commands to {guild.name}: {e}")

        try:
            synced = await bot.tree.sync()
            print(f"Synced {len(synced)} command(s) globally to Discord")
        except discord.HTTPException as e:
            print(f"[ERROR] Failed to sync commands globally: {e}")

        print("Check Your Reflexes is ready!")

    @bot.event
    async def on_error(event, *args, **kwargs):
        """Handle errors."""
        import traceback
        print(f"[ERROR] Error in {event}:")
        traceback.print_exc()

    @bot.tree.error
    async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Handle application command errors."""
        original = getattr(error, 'original', error)

        if isinstance(original, ReflexGameError):
            # A broken round can't be played; drop the player's game
            print(f"[ERROR] Game error for {interaction.user}: {original}")
            session_manager.remove(str(interaction.user.id), str(interaction.channel_id))
            message = "❌ Something went wrong with your game. Start again with `/reflex`."
        elif isinstance(error, app_commands.CommandOnCooldown):
            message = f"This command is on cooldown. Try again in {error.retry_after:.1f} seconds."
        else:
            import traceback
            traceback.print_exc()
            message = "An error occurred while executing this command."

        if not interaction.response.is_done():
            await interaction.response.send_message(message, ephemeral=True)
