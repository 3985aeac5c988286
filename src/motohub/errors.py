"""Domain errors raised by the core engines and services.

Each error carries the HTTP status it maps to; the global handler in
``motohub.middleware.error_handler`` turns them into ``{"detail": ...}``
responses. Messages are user-facing.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected, request-terminating failures."""

    status_code = 500
    default_message = "Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(DomainError):
    status_code = 400
    default_message = "Bad request"


class NotFound(DomainError):
    status_code = 404
    default_message = "Not found"


class CommentNotFound(NotFound):
    default_message = "Comment does not exist"


class ProfileNotFound(NotFound):
    default_message = "There is no profile for this user"


class EntryNotFound(NotFound):
    default_message = "Entry not found"


class Unauthorized(DomainError):
    """Ownership or authorship mismatch (and bad credentials on protected routes)."""

    status_code = 401
    default_message = "User not authorized"


class AlreadyReacted(BadRequest):
    default_message = "User already reacted"


class NotReacted(BadRequest):
    default_message = "User has not reacted yet"


class DependencyFailure(DomainError):
    """A store or upstream service call failed. Never retried."""

    status_code = 500
    default_message = "Server Error"
