class RequestBotError(Exception):
    """Base exception class for all request bot errors."""

    pass


class UserFriendlyError(RequestBotError):
    """An exception that can be safely displayed to the user.

    Attributes:
        user_message (str): The message to display to the user.
    """

    def __init__(self, message: str, user_message: str) -> None:
        """Initialize the error.

        Args:
            message: Internal log message.
            user_message: User-facing message.
        """
        super().__init__(message)
        self.user_message = user_message


class TicketNotFoundError(UserFriendlyError):
    """Raised when a request id does not name a stored ticket."""

    def __init__(self, request_id: str) -> None:
        """Initialize the error for the missing request id."""
        super().__init__(f"Request {request_id!r} not found", "Invalid request ID.")
        self.request_id = request_id


class PermissionDeniedError(UserFriendlyError):
    """Raised when a non-admin invokes an admin-only command."""

    def __init__(self, user_id: int, command: str) -> None:
        """Initialize the error for the rejected user and command."""
        super().__init__(
            f"User {user_id} is not allowed to use {command}",
            "You don't have permission to use this command.",
        )
        self.user_id = user_id
        self.command = command


class PersistenceError(UserFriendlyError):
    """Raised when the request file cannot be read or written."""

    def __init__(self, message: str) -> None:
        """Initialize the error with an internal diagnostic message."""
        super().__init__(message, "Requests could not be saved. Please try again later.")


class ExhaustedIdSpaceError(UserFriendlyError):
    """Raised when every request id is already taken."""

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__(
            "No free request ids left",
            "The request queue is full. Please ask an admin to clear old requests.",
        )


class InvalidStatusError(UserFriendlyError):
    """Raised when a status cannot be applied to a request."""

    def __init__(self, status: object) -> None:
        """Initialize the error for the rejected status value."""
        super().__init__(f"Status {status!r} cannot be set", f"`{status}` is not a valid status.")
        self.status = status


class InvalidRequestError(UserFriendlyError):
    """Raised when command options fail validation."""
