"""Media request submission and triage."""

from discord import app_commands

from request_bot.models import TicketStatus

# Status emoji shown in listings and notifications
STATUS_EMOJI = {
    TicketStatus.PENDING: "⏳",
    TicketStatus.IN_PROGRESS: "🔄",
    TicketStatus.FULFILLED: "✅",
    TicketStatus.REJECTED: "❌",
    TicketStatus.DELAYED: "⏰",
}

# Choices offered by /status (requests never go back to pending)
SETTABLE_CHOICES = [
    app_commands.Choice(name="In Progress", value=TicketStatus.IN_PROGRESS.value),
    app_commands.Choice(name="Fulfilled", value=TicketStatus.FULFILLED.value),
    app_commands.Choice(name="Rejected", value=TicketStatus.REJECTED.value),
    app_commands.Choice(name="Delayed", value=TicketStatus.DELAYED.value),
]

# Choices offered by /list and /clear
ALL_CHOICES = [app_commands.Choice(name="Pending", value=TicketStatus.PENDING.value), *SETTABLE_CHOICES]
