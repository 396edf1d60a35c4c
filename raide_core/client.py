import os
import logging
from typing import Any, Dict, Iterator, Literal, Mapping, Optional, Tuple, Union
import httpx
from dotenv import load_dotenv
from .actions import Action
from .models import (
    Credentials,
    Requester,
    TicketStatus,
    filter_search_parameters,
    requester_param,
)
from .parser import ResponseParser
from .exceptions import RaideError, TransportError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("raide-core")

DEFAULT_BASE_URL = "http://api.raide.io/1.0/"
USER_AGENT = "Raide/1.0 (Python)"

TicketId = Union[int, str]


def _form_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _form_pairs(value: Any, name: str) -> Iterator[Tuple[str, str]]:
    if isinstance(value, Mapping):
        if not value:
            yield name, ""
        for key, item in value.items():
            yield from _form_pairs(item, f"{name}[{key}]")
    elif isinstance(value, (list, tuple)):
        if not value:
            yield f"{name}[]", ""
        for item in value:
            yield from _form_pairs(item, f"{name}[]")
    else:
        yield name, _form_value(value)


def flatten_form(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten nested form data into bracketed keys.

    ``{"requester": {"id": 1}}`` becomes ``{"requester[id]": "1"}``,
    ``{"tags": ["a", "b"]}`` becomes ``{"tags[]": ["a", "b"]}`` and
    ``{"x": [{"a": 1}]}`` becomes ``{"x[][a]": "1"}``. Empty containers are
    still sent, with an empty value.
    """
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        for name, item in _form_pairs(value, str(key)):
            if name not in flat:
                flat[name] = item
            elif isinstance(flat[name], list):
                flat[name].append(item)
            else:
                flat[name] = [flat[name], item]
    return flat


class RaideClient:
    def __init__(
        self,
        account_id: int = 0,
        api_key: str = "",
        api_password: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.credentials = Credentials(account_id=account_id, api_key=api_key, api_password=api_password)
        self.parser = ResponseParser()
        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            client_kwargs: Dict[str, Any] = {"base_url": base_url}
            if timeout is not None:
                client_kwargs["timeout"] = timeout
            self._http = httpx.Client(**client_kwargs)
            self._owns_http = True
        logger.info(f"RaideClient initialized for account {account_id}")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **kwargs) -> "RaideClient":
        """Build a client from RAIDE_* environment variables, loading .env first."""
        load_dotenv(dotenv_path)
        timeout = os.getenv("RAIDE_TIMEOUT")
        return cls(
            account_id=int(os.getenv("RAIDE_ACCOUNT_ID") or 0),
            api_key=os.getenv("RAIDE_API_KEY", ""),
            api_password=os.getenv("RAIDE_API_PASSWORD", ""),
            base_url=os.getenv("RAIDE_BASE_URL") or DEFAULT_BASE_URL,
            timeout=float(timeout) if timeout else None,
            **kwargs,
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._http.base_url

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authentication": self.credentials.header, "User-Agent": USER_AGENT}

    def comment(self, id: TicketId = 0, comment: str = "", is_external_id: bool = False) -> Any:
        """Add a comment to a Ticket.

        The endpoint has a single path form, so ``is_external_id`` does not change the URL.
        """
        return self._request(Action.COMMENT, "POST", Action.COMMENT.path(id), data={"comment": comment})

    def delete(self, id: TicketId = 0, is_external_id: bool = False) -> Any:
        """Delete a Ticket by its ID, or by its External ID when ``is_external_id`` is set."""
        path = Action.DELETE.path(id, is_external_id=is_external_id)
        return self._request(Action.DELETE, "DELETE", path)

    def get(
        self,
        id: TicketId,
        datatype: Literal["json", "text"] = "json",
        is_external_id: bool = False,
    ) -> Any:
        """Retrieve a Ticket as ``json`` or ``text``."""
        path = Action.GET.path(id, datatype, is_external_id=is_external_id)
        return self._request(Action.GET, "GET", path)

    def search(self, filters: Optional[Mapping[str, Any]] = None) -> Any:
        """Search existing Tickets. Keys outside the allow-list are never sent."""
        params = filter_search_parameters(filters)
        dropped = set(filters or {}) - set(params)
        if dropped:
            logger.debug(f"Dropping unsupported search filters: {sorted(dropped)}")
        return self._request(Action.SEARCH, "GET", Action.SEARCH.path(), params=params)

    def submit(
        self,
        base64_summary: str,
        subject: str,
        description: str,
        requester: Requester,
        external_id: str = "",
        server: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Submit a Ticket.

        ``requester`` is either an e-mail address or a contact {id, email, name}.
        ``server`` is the environment of the request being reported, supplied by the caller.
        """
        parameters = {
            "summary": base64_summary,
            "subject": subject,
            "description": description,
            "external_id": external_id,
            "requester": requester_param(requester),
            "server": server,
        }
        return self._request(Action.SUBMIT, "POST", Action.SUBMIT.path(), data=flatten_form(parameters))

    def update(
        self,
        id: TicketId,
        status: Union[TicketStatus, int] = TicketStatus.PENDING,
        is_external_id: bool = False,
    ) -> Any:
        """Update the status of a Ticket (1=Pending, 2=Open, 3=Solved)."""
        return self._request(Action.UPDATE, "PUT", Action.UPDATE.path(id), data={"status": str(int(status))})

    def _request(self, action: Action, method: str, path: str, **kwargs) -> Any:
        logger.debug(f"{method} {path}")
        try:
            response = self._http.request(method, path, headers=self.headers, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Error executing action {action.value}: {str(e)}")
            raise TransportError(f"Failed to execute action {action.value}: {str(e)}") from e
        try:
            result = self.parser.parse(response.status_code, response.text)
        except RaideError as e:
            logger.error(f"Error executing action {action.value}: {e.message}")
            raise
        logger.info(f"Executed action {action.value} successfully")
        return result

    def close(self):
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()
        logger.info("RaideClient cleaned up")

    def __enter__(self) -> "RaideClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
