import json
import logging
from typing import Any
from .models import ServiceEnvelope
from .exceptions import (
    ForbiddenError,
    MalformedResponse,
    ServiceError,
    UnauthorizedError,
    UnknownError,
)

logger = logging.getLogger("raide-core")

STATUS_MESSAGES = {
    401: (UnauthorizedError, "You are Unauthorized."),
    403: (ForbiddenError, "You are Forbidden."),
}
GENERIC_MESSAGE = "An error has occurred."


class ResponseParser:
    """Turn a raw (status code, body) pair into a result or a RaideError.

    Every client operation goes through ``parse`` so all of them share the same
    failure semantics.
    """

    def parse(self, status_code: int, raw_body: str) -> Any:
        if status_code == 200:
            envelope = self._decode(raw_body)
            if envelope.ok:
                return envelope.result
            logger.debug(f"Service reported error {envelope.error}: {envelope.error_description}")
            raise ServiceError(envelope.error_description, status_code=status_code)

        if status_code in STATUS_MESSAGES:
            error_cls, message = STATUS_MESSAGES[status_code]
            raise error_cls(message, status_code=status_code)

        raise UnknownError(GENERIC_MESSAGE, status_code=status_code)

    def _decode(self, raw_body: str) -> ServiceEnvelope:
        try:
            decoded = json.loads(raw_body)
        except (json.JSONDecodeError, TypeError) as e:
            raise MalformedResponse(f"Response body is not valid JSON: {str(e)}", status_code=200) from e
        if not isinstance(decoded, dict):
            raise MalformedResponse(
                f"Response body is not a JSON object: {type(decoded).__name__}", status_code=200
            )
        return ServiceEnvelope.model_validate(decoded)
