"""
Error taxonomy for booking operations.

Each error carries the HTTP status it maps to; ``app.create_app`` registers a
single handler that renders ``{"error": message}`` for all of them.
"""


class BookingError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(BookingError):
    """A required field is missing or malformed."""

    status_code = 400


class ScopeError(BookingError):
    """No resolvable event for the request."""

    status_code = 404

    def __init__(self, message: str = "Event not found"):
        super().__init__(message)


class StorageError(BookingError):
    """A storage call failed; the unit of work has been rolled back."""

    status_code = 500

    def __init__(self, message: str = "Database error"):
        super().__init__(message)
