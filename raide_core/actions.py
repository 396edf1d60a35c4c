from enum import Enum

class Action(Enum):
    COMMENT = "comment"
    DELETE = "delete"
    GET = "get"
    SEARCH = "search"
    SUBMIT = "submit"
    UPDATE = "update"

    def path(self, *segments, is_external_id: bool = False) -> str:
        """Build the endpoint path, e.g. /get/external/abc/json."""
        parts = [self.value]
        if is_external_id:
            parts.append("external")
        parts.extend(str(segment) for segment in segments)
        return "/" + "/".join(parts)
