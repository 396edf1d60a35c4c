from typing import Optional


class RaideError(Exception):
    """Base exception for Raide SDK errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UnauthorizedError(RaideError):
    """Raised when the service answers 401."""
    pass


class ForbiddenError(RaideError):
    """Raised when the service answers 403."""
    pass


class ServiceError(RaideError):
    """Raised when a 200 envelope carries a nonzero error flag."""

    def __init__(self, description: Optional[str], status_code: Optional[int] = 200):
        super().__init__(str(description) if description else "An error has occurred.", status_code)
        self.description = description


class MalformedResponse(RaideError):
    """Raised when a 200 body is not a decodable envelope."""
    pass


class UnknownError(RaideError):
    """Raised for any other non-200 status."""
    pass


class TransportError(RaideError):
    """Raised when the request never produced a response."""
    pass
