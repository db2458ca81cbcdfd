class ServiceError(Exception):
    """Base exception for service layer errors."""
    pass


class NotFoundError(ServiceError):
    """Raised when a requested record does not exist."""
    pass


class ConflictError(ServiceError):
    """Raised when a record would duplicate a unique field."""
    pass


class AuthenticationError(ServiceError):
    """Raised when credentials do not match a stored account."""
    pass
