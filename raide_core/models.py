from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Mapping, Optional, Union

SEARCH_FILTER_KEYS = frozenset([
    "endTime",
    "limit",
    "page",
    "search",
    "sort_by",
    "sort_order",
    "startTime",
    "status",
])


class TicketStatus(IntEnum):
    PENDING = 1
    OPEN = 2
    SOLVED = 3


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: int = Field(0, description="Raide Account ID")
    api_key: str = Field("", description="Raide API Key")
    api_password: str = Field("", description="Raide API Password")

    @property
    def header(self) -> str:
        return f"id={self.account_id};key={self.api_key};password={self.api_password}"


class Email(BaseModel):
    address: str

    def to_param(self) -> str:
        return self.address


class Contact(BaseModel):
    id: Optional[Union[int, str]] = None
    email: str = ""
    name: str = ""

    def to_param(self) -> Dict[str, Any]:
        return self.model_dump()


Requester = Union[Email, Contact, str, Mapping[str, Any]]


def requester_param(requester: Requester) -> Any:
    """Serialize a requester; the service tells an email from a contact by shape."""
    if isinstance(requester, (Email, Contact)):
        return requester.to_param()
    return requester


def _numeric(value: Any) -> Optional[float]:
    """Coerce an error flag to a number; bools and non-numeric values give None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


class ServiceEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: Any = None
    result: Any = None
    error_description: Any = Field(None, alias="errorDescription")

    @property
    def ok(self) -> bool:
        return _numeric(self.error) == 0


def filter_search_parameters(filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a new mapping holding only the allow-listed search keys."""
    if not filters:
        return {}
    return {key: value for key, value in filters.items() if key in SEARCH_FILTER_KEYS}
