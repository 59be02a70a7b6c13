# ABOUTME: HTTP status codes and the fixed status text table used in error bodies
# ABOUTME: The table is immutable and built once at import

from enum import IntEnum
from http import HTTPStatus as _StdHTTPStatus
from types import MappingProxyType
from typing import Literal, Mapping, Optional


class HTTPStatus(IntEnum):
    """Status codes with a registered status text."""

    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


HTTP_STATUS_TEXT: Mapping[int, str] = MappingProxyType(
    {
        HTTPStatus.OK: "OK",
        HTTPStatus.BAD_REQUEST: "Bad Request",
        HTTPStatus.UNAUTHORIZED: "Unauthorized",
        HTTPStatus.FORBIDDEN: "Forbidden",
        HTTPStatus.NOT_FOUND: "Not Found",
        HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
    }
)


def status_text(status: int, unknown: Literal["omit", "phrase"] = "omit") -> Optional[str]:
    """
    Look up the status text for a status code.

    Args:
        status: HTTP status code.
        unknown: Policy for codes missing from the table. ``omit`` returns None,
            ``phrase`` falls back to the standard reason phrase when one exists.

    Returns:
        The status text, or None when the code has no text under the policy.
    """
    text = HTTP_STATUS_TEXT.get(status)
    if text is not None or unknown == "omit":
        return text
    try:
        return _StdHTTPStatus(status).phrase
    except ValueError:
        return None
