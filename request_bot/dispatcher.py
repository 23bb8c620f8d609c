"""Authorization and routing between request commands and the ticket store."""

import logging
from dataclasses import dataclass

from request_bot.errors import PermissionDeniedError
from request_bot.intents import ClearRequests, ListRequests, SetStatus, SubmitRequest
from request_bot.models import Ticket
from request_bot.store import TicketStore


@dataclass(frozen=True, slots=True)
class Requester:
    """The user a command was invoked by."""

    id: int
    name: str


class RequestDispatcher:
    """Applies validated command intents to a ticket store.

    Submitting is open to everyone; changing status, listing and clearing are
    reserved for the single configured admin.
    """

    def __init__(self, store: TicketStore, admin_id: int) -> None:
        """Initialize the dispatcher."""
        self.store = store
        self.admin_id = admin_id
        self.log = logging.getLogger(__name__)

    def is_admin(self, user_id: int) -> bool:
        """Return whether ``user_id`` is the configured admin."""
        return user_id == self.admin_id

    def submit(self, requester: Requester, intent: SubmitRequest) -> tuple[str, Ticket]:
        """Create a pending request on behalf of ``requester``."""
        return self.store.create(requester.id, requester.name, intent.title)

    def set_status(self, requester: Requester, intent: SetStatus) -> Ticket:
        """Update the status of an existing request."""
        self._require_admin(requester, "status")
        ticket = self.store.set_status(intent.request_id, intent.status)
        self.log.info("Request %s set to %s by user %s", intent.request_id, intent.status, requester.id)
        return ticket

    def list_requests(self, requester: Requester, intent: ListRequests) -> list[tuple[str, Ticket]]:
        """Return requests in submission order, optionally filtered by status."""
        self._require_admin(requester, "list")
        return self.store.list_tickets(intent.status)

    def clear(self, requester: Requester, intent: ClearRequests) -> int:
        """Remove every request with the given status."""
        self._require_admin(requester, "clear")
        cleared = self.store.clear(intent.status)
        self.log.info("User %s cleared %d request(s) with status %s", requester.id, cleared, intent.status)
        return cleared

    def _require_admin(self, requester: Requester, command: str) -> None:
        if self.is_admin(requester.id):
            return

        self.log.warning("User %s (ID: %s) denied access to /%s", requester.name, requester.id, command)
        raise PermissionDeniedError(requester.id, command)
