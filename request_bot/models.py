"""Pydantic models for media request tickets."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TicketStatus(StrEnum):
    """Lifecycle status of a media request."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"
    DELAYED = "delayed"

    @classmethod
    def _missing_(cls, value: object) -> "TicketStatus | None":
        # Older request files spell it "in progress"
        if isinstance(value, str):
            normalized = value.strip().lower().replace(" ", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @property
    def label(self) -> str:
        """Human readable form of the status."""
        return self.value.replace("_", " ")


# Statuses an admin may move a request to. Nothing returns a request to pending.
SETTABLE_STATUSES = frozenset(
    {TicketStatus.IN_PROGRESS, TicketStatus.FULFILLED, TicketStatus.REJECTED, TicketStatus.DELAYED}
)


class Ticket(BaseModel):
    """A single media request as stored in the request file.

    Field aliases match the keys of the JSON document on disk. Tickets are
    frozen; a status change produces a new ticket via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: str = Field(alias="userId")
    username: str
    title: str
    status: TicketStatus = TicketStatus.PENDING
    requested_at: datetime = Field(alias="requestedAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return TicketStatus(value)
            except ValueError:
                return value
        return value
