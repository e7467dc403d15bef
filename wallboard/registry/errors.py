"""
Registry Exceptions

Each error carries the HTTP status code it is reported with.
"""


class WallboardError(Exception):
    """Base exception for wallboard errors."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WallboardError):
    """Missing or invalid input field."""
    status_code = 400


class NotFoundError(WallboardError):
    """Unknown agent code."""
    status_code = 404
