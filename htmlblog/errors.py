"""Error taxonomy shared by the store and the HTTP layer.

Each error carries the HTTP status it maps to, so the app can render any of
them with a single handler.
"""

from __future__ import annotations


class BlogError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(BlogError):
    """Malformed slug/date or an empty required field."""

    status_code = 400


class InvalidSlug(InvalidInput):
    def __init__(self, message: str = "Invalid slug") -> None:
        super().__init__(message)


class Unauthenticated(BlogError):
    status_code = 401


class InvalidCredential(BlogError):
    status_code = 401


class NotFound(BlogError):
    status_code = 404

    def __init__(self, message: str = "Post not found") -> None:
        super().__init__(message)


class Conflict(BlogError):
    status_code = 409


class StorageFailure(BlogError):
    """Unexpected filesystem error; the store may be in a partial state."""

    status_code = 500


class ConfigurationError(BlogError):
    status_code = 500
