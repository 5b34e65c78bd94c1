"""
API Error Module

Exceptions raised by the services and routes. Each carries the HTTP
status it is rendered with by the app's error handler.
"""


class ApiError(Exception):
    """Base class for errors surfaced to API callers as JSON."""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {'error': self.message}


class BadRequest(ApiError):
    """Raised when a required field is missing or malformed."""
    status_code = 400
    default_message = 'Bad request'


class Unauthorized(ApiError):
    """Raised when no token is supplied or the admin key is wrong."""
    status_code = 401
    default_message = 'Unauthorized'


class Forbidden(ApiError):
    """Raised when a token is unknown or has been deactivated."""
    status_code = 403
    default_message = 'Invalid or inactive token'


class NotFound(ApiError):
    """Raised when a referenced token does not exist."""
    status_code = 404
    default_message = 'Not found'


class InternalError(ApiError):
    """Raised when the storage layer fails."""
    status_code = 500
