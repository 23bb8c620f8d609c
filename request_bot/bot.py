import logging
from typing import Any

import discord
from discord import app_commands
from discord.ext import commands

from request_bot.config import settings
from request_bot.dispatcher import RequestDispatcher
from request_bot.errors import PersistenceError, UserFriendlyError
from request_bot.exts import EXTENSIONS
from request_bot.store import TicketStore
from request_bot.ui.embeds import error_embed


def build_intents(*, message_content: bool = False) -> discord.Intents:
    """Return the gateway intents the bot connects with.

    ``message_content`` is privileged and must also be enabled in the Developer
    Portal. Without it prefix commands such as `!sync` only work in DMs and
    when the bot is mentioned.
    """
    intents = discord.Intents.default()
    intents.message_content = message_content
    return intents


class Bot(commands.Bot):
    """Bot class for the media request bot.

    The ticket store and admin id are injected at construction and shared
    with extensions through ``bot.dispatcher``.
    """

    def __init__(self, *, store: TicketStore, admin_id: int, **kwargs: Any) -> None:  # noqa: ANN401
        """Initialize the bot with its request store."""
        super().__init__(**kwargs)
        self.store = store
        self.admin_id = admin_id
        self.dispatcher = RequestDispatcher(store, admin_id)
        self.log = logging.getLogger(__name__)

    async def setup_hook(self) -> None:
        """Run before the bot starts."""
        self.load_store()
        self.tree.on_error = self.on_tree_error  # type: ignore
        await self.load_extensions()
        await self.sync_commands()

    async def on_ready(self) -> None:
        """Log the account the bot is connected as."""
        self.log.info("Bot is ready! Logged in as %s", self.user)

    def load_store(self) -> None:
        """Load requests from disk, falling back to an empty store on failure."""
        try:
            self.store.load()
        except PersistenceError:
            self.log.exception("Could not load requests from %s; starting with an empty store", self.store.path)

    async def register_commands(self) -> list[app_commands.AppCommand]:
        """Register slash commands, to the debug guild when one is configured.

        Returns:
            List of synced commands

        #! Note: This operation can be rate limited
        """
        if settings.debug_guild_id:
            guild = discord.Object(id=settings.debug_guild_id)
            self.tree.copy_global_to(guild=guild)
            return await self.tree.sync(guild=guild)
        return await self.tree.sync()

    async def sync_commands(self) -> None:
        """Register slash commands at startup, logging instead of failing on errors."""
        try:
            synced = await self.register_commands()
        except discord.HTTPException:
            self.log.exception("Error registering commands")
            return

        self.log.info("Registered %d application commands", len(synced))

    def _get_logger_for_command(
        self, command: app_commands.Command | app_commands.ContextMenu | commands.Command | None
    ) -> logging.Logger:
        if command and hasattr(command, "module") and command.module:
            return logging.getLogger(command.module)
        return self.log

    async def on_tree_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError) -> None:
        """Handle errors in slash commands."""
        # Unpack CommandInvokeError to get the original exception
        actual_error = error
        if isinstance(error, app_commands.CommandInvokeError):
            actual_error = error.original

        if isinstance(actual_error, UserFriendlyError):
            self.log.debug("User-facing slash command error: %s", actual_error)
            embed = error_embed(description=actual_error.user_message)
            if interaction.response.is_done():
                await interaction.followup.send(embed=embed, ephemeral=True)
            else:
                await interaction.response.send_message(embed=embed, ephemeral=True)
            return

        # Generic error handling
        logger = self._get_logger_for_command(interaction.command)
        logger.exception("Slash command error: %s", error)
        embed = error_embed(description="An unexpected error occurred. Please try again later.")
        if interaction.response.is_done():
            await interaction.followup.send(embed=embed, ephemeral=True)
        else:
            await interaction.response.send_message(embed=embed, ephemeral=True)

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        """Handle errors in prefix commands."""
        actual_error = error
        if isinstance(error, commands.CommandInvokeError):
            actual_error = error.original

        if isinstance(actual_error, UserFriendlyError):
            embed = error_embed(description=actual_error.user_message)
            await ctx.send(embed=embed)
            return

        # Generic error handling
        logger = self._get_logger_for_command(ctx.command)
        logger.exception("Prefix command error: %s", error)
        embed = error_embed(description="An unexpected error occurred. Please try again later.")
        await ctx.send(embed=embed)

    async def load_extensions(self) -> None:
        """Load all enabled extensions."""
        for extension in EXTENSIONS:
            try:
                await self.load_extension(extension)
                self.log.info("Loaded extension: %s", extension)
            except Exception:
                self.log.exception("Failed to load extension: %s", extension)
