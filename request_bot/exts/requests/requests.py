"""Media request cog.

Slash commands for submitting requests and for the admin to triage them:
- /request: anyone can ask for a movie or TV show
- /status: admin moves a request to a new status
- /list: admin lists requests, optionally by status
- /clear: admin removes all requests with a status
"""

import logging
from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands
from discord.utils import escape_markdown

from request_bot.dispatcher import Requester, RequestDispatcher
from request_bot.exts import requests
from request_bot.intents import ClearRequests, ListRequests, SetStatus, SubmitRequest, parse_intent
from request_bot.models import Ticket, TicketStatus
from request_bot.ui.embeds import info_embed, success_embed, truncate_lines

if TYPE_CHECKING:
    from request_bot.bot import Bot


def _requester(interaction: discord.Interaction) -> Requester:
    return Requester(id=interaction.user.id, name=interaction.user.name)


def _format_line(request_id: str, ticket: Ticket) -> str:
    emoji = requests.STATUS_EMOJI[ticket.status]
    return f"{emoji} `{request_id}` **{escape_markdown(ticket.title)}** (by {escape_markdown(ticket.username)})"


class Requests(commands.Cog):
    """Cog for submitting and managing media requests."""

    def __init__(self, bot: commands.Bot, dispatcher: RequestDispatcher) -> None:
        """Initialize the Requests cog."""
        self.bot = bot
        self.dispatcher = dispatcher
        self.log = logging.getLogger(__name__)
        self.log.info("Requests cog initialized")

    @app_commands.command(name="request", description="Request a movie or TV show for Jellyfin/Plex")
    @app_commands.describe(title="The title of the movie or TV show")
    async def submit_request(self, interaction: discord.Interaction, title: str) -> None:
        """Submit a new media request."""
        intent = parse_intent(SubmitRequest, title=title)
        request_id, ticket = self.dispatcher.submit(_requester(interaction), intent)

        embed = success_embed(
            "Request Submitted",
            f"Your request for **{escape_markdown(ticket.title)}** has been submitted! (ID: `{request_id}`)",
            emoji="🎬",
        )
        await interaction.response.send_message(embed=embed, ephemeral=True)

        await self._notify(
            self.dispatcher.admin_id,
            f"New request from {ticket.username}:\n• Title: **{ticket.title}**\n• Request ID: `{request_id}`",
        )

    @app_commands.command(name="status", description="Update the status of a request (Admin only)")
    @app_commands.describe(request_id="The ID of the request", status="New status for the request")
    @app_commands.choices(status=requests.SETTABLE_CHOICES)
    async def set_status(self, interaction: discord.Interaction, request_id: str, status: str) -> None:
        """Move a request to a new status and tell the requester."""
        intent = parse_intent(SetStatus, request_id=request_id, status=status)
        ticket = self.dispatcher.set_status(_requester(interaction), intent)

        embed = success_embed(
            "Status Updated", f"Request `{intent.request_id}` status updated to {ticket.status.label}."
        )
        await interaction.response.send_message(embed=embed, ephemeral=True)

        emoji = requests.STATUS_EMOJI[ticket.status]
        await self._notify(
            ticket.user_id,
            f"Status update for your request **{ticket.title}**: {emoji} {ticket.status.label}",
        )

    @app_commands.command(name="list", description="List all requests (Admin only)")
    @app_commands.describe(status="Filter requests by status")
    @app_commands.choices(status=requests.ALL_CHOICES)
    async def list_requests(self, interaction: discord.Interaction, status: str | None = None) -> None:
        """Show requests in submission order."""
        intent = parse_intent(ListRequests, status=status)
        tickets = self.dispatcher.list_requests(_requester(interaction), intent)
        await interaction.response.send_message(embed=self._build_list_embed(tickets, intent.status), ephemeral=True)

    @app_commands.command(name="clear", description="Clear all requests with a specific status (Admin only)")
    @app_commands.describe(status="Status of requests to clear")
    @app_commands.choices(status=requests.ALL_CHOICES)
    async def clear_requests(self, interaction: discord.Interaction, status: str) -> None:
        """Remove every request with a status."""
        intent = parse_intent(ClearRequests, status=status)
        cleared = self.dispatcher.clear(_requester(interaction), intent)

        plural = "" if cleared == 1 else "s"
        embed = success_embed(
            "Requests Cleared", f'Cleared {cleared} request{plural} with status "{intent.status.label}".'
        )
        await interaction.response.send_message(embed=embed, ephemeral=True)

    def _build_list_embed(self, tickets: list[tuple[str, Ticket]], status: TicketStatus | None) -> discord.Embed:
        if not tickets:
            message = f"No requests with status: {status.label}" if status else "No requests found"
            return info_embed("Requests", message)

        title = f"Requests ({status.label})" if status else "Requests"
        lines = [_format_line(request_id, ticket) for request_id, ticket in tickets]
        return info_embed(title, truncate_lines(lines))

    async def _notify(self, user_id: int | str, content: str) -> None:
        """Send a direct message, logging instead of failing when the user cannot be reached."""
        try:
            user = await self.bot.fetch_user(int(user_id))
            await user.send(content)
        except (ValueError, discord.HTTPException) as e:
            self.log.warning("Failed to notify user %s: %s", user_id, e)


async def setup(bot: "Bot") -> None:
    """Set up the Requests cog."""
    await bot.add_cog(Requests(bot, bot.dispatcher))
