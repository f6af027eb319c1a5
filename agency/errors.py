"""
Structured error types raised by services and rendered by the app factory.

Each error carries the HTTP status it maps to, so blueprints can let them
propagate instead of building responses for every failure branch.
"""


class AgencyError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None, details=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details

    def to_dict(self):
        payload = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class NotFoundError(AgencyError):
    """Missing token, client or record."""
    status_code = 404
    default_message = "Not found"


class ExpiredError(AgencyError):
    """Approval link past its expiry or deactivated."""
    status_code = 410
    default_message = "Approval link expired"


class ValidationFailedError(AgencyError):
    status_code = 400
    default_message = "Validation failed"


class ConflictError(AgencyError):
    """The record changed underneath the caller (status or version mismatch)."""
    status_code = 409
    default_message = "Conflict"


class StorageError(AgencyError):
    status_code = 503
    default_message = "Storage unavailable"
