"""Crest exception hierarchy."""


class CrestError(Exception):
    """Base error. ``status_code`` is what the HTTP layer answers with."""

    status_code: int = 500

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class NotFoundError(CrestError):
    status_code = 404


class InvalidTimeWindowError(CrestError):
    """Raised when a metrics query window ends before it starts."""

    status_code = 400
