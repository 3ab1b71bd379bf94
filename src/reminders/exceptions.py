"""Custom exceptions for reminder scheduling and delivery."""

from http import HTTPStatus

INVALID_DURATION_MESSAGE = (
    "Invalid reminder time. Please provide a positive number followed by optional "
    'm/h/d suffix (e.g., "30m", "2h", "1d")'
)


class ReminderError(Exception):
    """Base exception for reminder errors.

    Carries the HTTP status the API layer should answer with and the message
    that is safe to show to the caller.
    """

    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        """Initialise ReminderError.

        :param message: Caller-facing error message.
        """
        self.message = message
        super().__init__(message)


class MissingFieldError(ReminderError):
    """Raised when a required reminder field is absent or empty."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, fields: list[str]) -> None:
        """Initialise MissingFieldError.

        :param fields: Names of the missing fields.
        """
        self.fields = fields
        super().__init__("Missing required fields")


class InvalidDurationError(ReminderError):
    """Raised when a reminder duration is unparseable or not positive."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, value: object) -> None:
        """Initialise InvalidDurationError.

        :param value: The rejected duration input.
        """
        self.value = value
        super().__init__(INVALID_DURATION_MESSAGE)


class DispatchError(ReminderError):
    """Raised when a reminder email could not be sent."""


class PersistenceError(ReminderError):
    """Raised when a reminder could not be written to the store."""


class InvalidFormatError(ValueError):
    """Raised when a duration expression has no leading integer."""

    def __init__(self, value: object) -> None:
        """Initialise InvalidFormatError.

        :param value: The unparseable input.
        """
        self.value = value
        super().__init__(f"Invalid duration format: {value!r}")
