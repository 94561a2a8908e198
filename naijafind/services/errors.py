"""
Service layer errors.

Every service raises a ServiceError subclass; the app level handler in
create_app() turns it into {"error": message} with the matching status.
"""


class ServiceError(Exception):
    """Base class for service errors."""
    def __init__(self, message: str, code: int = 400):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidRequestError(ServiceError):
    def __init__(self, message: str):
        super().__init__(message, 400)


class AuthenticationError(ServiceError):
    def __init__(self, message: str = 'Non autorisé'):
        super().__init__(message, 401)


class PermissionDeniedError(ServiceError):
    def __init__(self, message: str = 'Accès refusé'):
        super().__init__(message, 403)


class NotFoundError(ServiceError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class ConflictError(ServiceError):
    """Duplicate names, duplicate reviews."""
    def __init__(self, message: str):
        super().__init__(message, 409)


class RateLimitError(ServiceError):
    def __init__(self, message: str, reset_at=None):
        self.reset_at = reset_at
        super().__init__(message, 429)
