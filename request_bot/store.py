"""Ticket store backed by a single JSON file.

The store owns the mapping of request ids to tickets. Every successful
mutation rewrites the whole file before returning, so a reload always
reproduces the in-memory mapping.

If a write fails the mutation has already been applied in memory and stays
visible to later operations in this process, but it is not durable until the
next successful save. The failure is logged and raised as ``PersistenceError``.
"""

import logging
import random
from datetime import UTC, datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from request_bot.errors import ExhaustedIdSpaceError, InvalidStatusError, PersistenceError, TicketNotFoundError
from request_bot.models import SETTABLE_STATUSES, Ticket, TicketStatus

ID_MIN = 1000
ID_MAX = 9999
_VALID_IDS = frozenset(str(n) for n in range(ID_MIN, ID_MAX + 1))

_TICKETS_ADAPTER = TypeAdapter(dict[str, Ticket])


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _coerce_status(status: TicketStatus | str) -> TicketStatus:
    try:
        return TicketStatus(status)
    except ValueError as exc:
        raise InvalidStatusError(status) from exc


class TicketStore:
    """Owns media request tickets and keeps them synchronized with disk."""

    def __init__(self, path: Path | str, *, rng: random.Random | None = None) -> None:
        """Initialize an empty store.

        Args:
            path: Location of the JSON request file.
            rng: Random source used for id generation.
        """
        self.path = Path(path)
        self._rng = rng or random.Random()  # noqa: S311
        self._tickets: dict[str, Ticket] = {}
        self.log = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._tickets)

    def __contains__(self, request_id: object) -> bool:
        return request_id in self._tickets

    def get(self, request_id: str) -> Ticket | None:
        """Return the ticket for ``request_id`` if it exists."""
        return self._tickets.get(request_id)

    def create(self, requester_id: int | str, requester_name: str, title: str) -> tuple[str, Ticket]:
        """Store a new pending request and return it with its id."""
        request_id = self._generate_id()
        ticket = Ticket(
            user_id=str(requester_id),
            username=requester_name,
            title=title,
            status=TicketStatus.PENDING,
            requested_at=_utcnow(),
        )
        self._tickets[request_id] = ticket
        self.save()
        self.log.info("Created request %s for %r by %s (ID: %s)", request_id, title, requester_name, requester_id)
        return request_id, ticket

    def set_status(self, request_id: str, status: TicketStatus | str) -> Ticket:
        """Move a request to a new status.

        Raises:
            InvalidStatusError: ``status`` is unknown or ``pending``.
            TicketNotFoundError: No request has this id.
        """
        new_status = _coerce_status(status)
        if new_status not in SETTABLE_STATUSES:
            raise InvalidStatusError(status)

        ticket = self._tickets.get(request_id)
        if ticket is None:
            raise TicketNotFoundError(request_id)

        updated = ticket.model_copy(update={"status": new_status, "updated_at": _utcnow()})
        # Reassigning an existing key keeps its insertion position
        self._tickets[request_id] = updated
        self.save()
        self.log.info("Request %s status changed from %s to %s", request_id, ticket.status, new_status)
        return updated

    def list_tickets(self, status: TicketStatus | str | None = None) -> list[tuple[str, Ticket]]:
        """Return ``(id, ticket)`` pairs in insertion order, optionally filtered by status."""
        if status is None:
            return list(self._tickets.items())

        wanted = _coerce_status(status)
        return [(request_id, ticket) for request_id, ticket in self._tickets.items() if ticket.status == wanted]

    def clear(self, status: TicketStatus | str) -> int:
        """Remove every request with ``status`` and return how many were removed."""
        wanted = _coerce_status(status)
        remaining = {request_id: ticket for request_id, ticket in self._tickets.items() if ticket.status != wanted}
        cleared = len(self._tickets) - len(remaining)

        self._tickets = remaining
        self.save()
        self.log.info("Cleared %d request(s) with status %s", cleared, wanted)
        return cleared

    def load(self) -> None:
        """Replace the in-memory mapping with the contents of the request file.

        A missing file yields an empty store and creates the file. Any other
        failure raises ``PersistenceError`` and keeps the current mapping.
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            self.log.info("No request file at %s, starting with an empty store", self.path)
            self._tickets = {}
            self.save()
            return
        except OSError as exc:
            msg = f"Failed to read request file {self.path}"
            raise PersistenceError(msg) from exc

        try:
            tickets = _TICKETS_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            msg = f"Request file {self.path} is corrupt"
            raise PersistenceError(msg) from exc

        self._tickets = tickets
        self.log.info("Loaded %d request(s) from %s", len(tickets), self.path)

    def save(self) -> None:
        """Overwrite the request file with the full in-memory mapping."""
        payload = _TICKETS_ADAPTER.dump_json(self._tickets, indent=2, by_alias=True, exclude_none=True)
        try:
            self.path.write_bytes(payload)
        except OSError as exc:
            self.log.exception("Failed to save requests to %s", self.path)
            msg = f"Failed to write request file {self.path}"
            raise PersistenceError(msg) from exc

    def _generate_id(self) -> str:
        # Keys from older files may fall outside the id range; they do not use up ids
        taken = sum(1 for request_id in self._tickets if request_id in _VALID_IDS)
        if taken >= len(_VALID_IDS):
            raise ExhaustedIdSpaceError

        while True:
            request_id = str(self._rng.randint(ID_MIN, ID_MAX))
            if request_id not in self._tickets:
                return request_id
