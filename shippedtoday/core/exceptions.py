"""
Domain errors

Every rejected request maps to one of these. The error handler renders them
as ``{"error": message, "details": ...}`` with the carried status code.
"""

from typing import Any, Optional


class LaunchError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code = 500
    message = "Failed to submit launch"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class CrossOriginError(LaunchError):
    status_code = 403
    message = "Cross-origin requests not allowed"


class CooldownActiveError(LaunchError):
    status_code = 429
    message = ("Please wait a moment before submitting. "
               "Server is processing other submissions.")


class RateLimitExceededError(LaunchError):
    status_code = 429
    message = "Rate limit exceeded. Please try again later."


class InvalidContentTypeError(LaunchError):
    status_code = 400
    message = "Invalid content type"


class InvalidJSONError(LaunchError):
    status_code = 400
    message = "Invalid JSON body"


class SubmissionValidationError(LaunchError):
    status_code = 400
    message = "Validation error"


class ContentTooShortError(LaunchError):
    status_code = 400
    message = "Content too short - please provide more details"


class SpamDetectedError(LaunchError):
    status_code = 400
    message = ("Content flagged as potential spam. "
               "Please ensure your submission is legitimate.")


class MaliciousContentError(LaunchError):
    status_code = 400
    message = "Invalid content detected"


class DuplicateLaunchError(LaunchError):
    status_code = 409
    message = ("This content appears to be a duplicate of a recent submission. "
               "Please submit unique launches only.")


class StorageError(LaunchError):
    status_code = 500
    message = "Storage unavailable"


class LaunchLimitReachedError(LaunchError):
    status_code = 507
    message = "Maximum number of launches reached"
