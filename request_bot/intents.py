"""Pydantic schemas for request commands.

Each slash command is decoded into one of these models before it reaches the
dispatcher, so handlers always receive complete, validated input.
"""

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from request_bot.errors import InvalidRequestError
from request_bot.models import SETTABLE_STATUSES, TicketStatus


class CommandIntent(BaseModel):
    """Base schema for all request command intents."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


T = TypeVar("T", bound=CommandIntent)


class SubmitRequest(CommandIntent):
    """A user asking for a movie or TV show."""

    title: str = Field(..., min_length=1, max_length=200, description="The title of the movie or TV show")


class SetStatus(CommandIntent):
    """An admin moving a request to a new status."""

    request_id: str = Field(..., min_length=1)
    status: TicketStatus

    @field_validator("status")
    @classmethod
    def _settable(cls, value: TicketStatus) -> TicketStatus:
        if value not in SETTABLE_STATUSES:
            msg = f"status cannot be set to {value.label}"
            raise ValueError(msg)
        return value


class ListRequests(CommandIntent):
    """An admin listing requests, optionally by status."""

    status: TicketStatus | None = None


class ClearRequests(CommandIntent):
    """An admin removing all requests with a status."""

    status: TicketStatus


def parse_intent(intent_cls: type[T], **options: object) -> T:
    """Validate raw command options into ``intent_cls``.

    Raises:
        InvalidRequestError: The options do not satisfy the schema.
    """
    try:
        return intent_cls.model_validate(options)
    except ValidationError as e:
        error_messages = []
        for err in e.errors():
            loc = str(err["loc"][0]) if err["loc"] else "input"
            msg = err["msg"].replace("Value error, ", "")
            error_messages.append(f"• **{loc}**: {msg}")

        raise InvalidRequestError(str(e), "❌ **Validation Failed**\n" + "\n".join(error_messages)) from e
