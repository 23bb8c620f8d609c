"""Command synchronization cog.

This module lets the admin re-register application commands with Discord:
- Manual sync via prefix command
- Slash command sync

Commands go to the same place as at startup: the debug guild when one is
configured, globally otherwise.
"""

from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands

from request_bot.errors import PermissionDeniedError

if TYPE_CHECKING:
    from request_bot.bot import Bot


class Sync(commands.Cog):
    """Cog for synchronizing application commands."""

    def __init__(self, bot: "Bot") -> None:
        """Initialize the Sync cog."""
        self.bot = bot

    def _require_admin(self, user_id: int) -> None:
        if user_id != self.bot.admin_id:
            raise PermissionDeniedError(user_id, "sync")

    async def _sync_commands(self) -> list[app_commands.AppCommand]:
        """Synchronize commands with Discord.

        Returns:
            List of synced commands
        """
        return await self.bot.register_commands()

    @commands.command(name="sync", hidden=True)
    async def sync(self, ctx: commands.Context[commands.Bot]) -> None:
        """Sync commands manually (admin only)."""
        self._require_admin(ctx.author.id)
        synced = await self._sync_commands()

        description = f"Synced {len(synced)} commands: {[cmd.name for cmd in synced]}"
        await ctx.send(description)

    @app_commands.command(name="sync", description="Sync application commands (Admin only)")
    async def sync_slash(self, interaction: discord.Interaction) -> None:
        """Sync commands via slash command."""
        self._require_admin(interaction.user.id)
        await interaction.response.defer(ephemeral=True)
        synced = await self._sync_commands()

        description = f"Synced {len(synced)} commands: {[cmd.name for cmd in synced]}"
        await interaction.followup.send(description, ephemeral=True)


async def setup(bot: "Bot") -> None:
    """Set up the Sync cog."""
    await bot.add_cog(Sync(bot))
