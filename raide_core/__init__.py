from .client import RaideClient, DEFAULT_BASE_URL
from .actions import Action
from .parser import ResponseParser
from .models import Credentials, TicketStatus, Email, Contact, ServiceEnvelope, SEARCH_FILTER_KEYS
from .exceptions import (
    RaideError,
    UnauthorizedError,
    ForbiddenError,
    ServiceError,
    MalformedResponse,
    UnknownError,
    TransportError,
)

__all__ = ["RaideClient", "DEFAULT_BASE_URL", "Action", "ResponseParser", "Credentials", "TicketStatus", "Email", "Contact", "ServiceEnvelope", "SEARCH_FILTER_KEYS", "RaideError", "UnauthorizedError", "ForbiddenError", "ServiceError", "MalformedResponse", "UnknownError", "TransportError"]
