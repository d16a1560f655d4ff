"""
Error taxonomy for the review service.
Route handlers turn these into HTTP responses; anything else that escapes a
collaborator call is treated as an upstream failure.
"""


class ReviewServiceError(Exception):
    status_code = 500


class ConfigurationError(ReviewServiceError):
    """Raised at startup when a required setting is missing."""


class ValidationError(ReviewServiceError):
    status_code = 400


class CourseCodeError(ValidationError):
    def __init__(self, code):
        super().__init__(f"Code doesn't match format <department>-<number>: {code}")
        self.code = code


class AuthenticationError(ReviewServiceError):
    status_code = 401


class UpstreamError(ReviewServiceError):
    """A collaborator (Sanity, Twilio, the front end) failed unexpectedly."""
    status_code = 500
