"""Error types raised by the package and their user-facing messages."""

from __future__ import annotations

SUCCESS_MESSAGE = "Success."
UNKNOWN_MESSAGE = "An unknown error occurred."


class HomeFinancialsError(Exception):
    """Base class for every error the package raises."""


class InvalidInputError(HomeFinancialsError, ValueError):
    """The data supplied by the caller is missing or malformed."""


class NotFoundError(HomeFinancialsError, LookupError):
    """The requested family, member, bank or account does not exist."""


class MaxMembersExceededError(HomeFinancialsError):
    """A family already holds the maximum number of members."""


class StorageError(HomeFinancialsError):
    """A database operation failed."""


_MESSAGES: dict[type, str] = {
    InvalidInputError: "Invalid input: please check the data you provided and try again.",
    MaxMembersExceededError: "Cannot add member: family has reached the maximum of 255 members.",
    NotFoundError: "Not found: the requested family/member does not exist.",
    StorageError: "Internal error: data storage operation failed. Try again or contact support.",
}


def error_message(error: BaseException | type | None) -> str:
    """Return a human-friendly message for an error instance or class.

    ``None`` stands for success.
    """
    if error is None:
        return SUCCESS_MESSAGE
    cls = error if isinstance(error, type) else type(error)
    for klass in cls.__mro__:
        message = _MESSAGES.get(klass)
        if message is not None:
            return message
    return UNKNOWN_MESSAGE