# ABOUTME: BufferedResponseSink implementation that records a single response write
# ABOUTME: Hosts render the recorded response into their own response objects

from enum import Enum
from typing import Any, Dict, Optional

from loguru import logger
from pydantic import BaseModel

from request_chain.exceptions import ResponseAlreadySentError
from request_chain.interfaces.chain import AbstractResponseSink


class BodyKind(str, Enum):
    """Kind of body recorded by a BufferedResponseSink."""

    EMPTY = "empty"
    JSON = "json"
    RAW = "raw"
    REDIRECT = "redirect"


class BufferedResponseSink(AbstractResponseSink):
    """
    In-memory implementation of a response sink.

    This implementation buffers the status, headers and body of one response
    and refuses a second write. Host adapters turn the buffered response into
    their own response type once the chain has finished.
    """

    def __init__(self, name: str = "BufferedResponseSink"):
        """
        Initialize an empty buffered response.

        Args:
            name: Name of the sink for identification and logging.
        """
        self.name = name
        self._status_code = 200
        self._headers: Dict[str, str] = {}
        self._body: Any = None
        self._body_kind = BodyKind.EMPTY
        self._media_type: Optional[str] = None
        self._sent = False

        self._logger = logger.bind(name=f"{__name__}.{self.name}")

    @property
    def headers_sent(self) -> bool:
        return self._sent

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def body(self) -> Any:
        """The recorded body: a JSON payload, str, bytes or None."""
        return self._body

    @property
    def body_kind(self) -> BodyKind:
        return self._body_kind

    @property
    def media_type(self) -> Optional[str]:
        return self._media_type

    def status(self, code: int) -> "BufferedResponseSink":
        self._ensure_not_sent("status")
        self._status_code = int(code)
        return self

    def set_header(self, name: str, value: str) -> "BufferedResponseSink":
        self._ensure_not_sent("set_header")
        self._headers[name.lower()] = str(value)
        return self

    def json(self, payload: Any) -> None:
        self._ensure_not_sent("json")
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")
        self._finish(BodyKind.JSON, payload, "application/json")

    def send(self, body: Any = None) -> None:
        if isinstance(body, (dict, list, BaseModel)):
            self.json(body)
            return

        self._ensure_not_sent("send")
        if body is None:
            self._finish(BodyKind.EMPTY, None, None)
        elif isinstance(body, (bytes, bytearray)):
            self._finish(BodyKind.RAW, bytes(body), self._headers.get("content-type", "application/octet-stream"))
        else:
            self._finish(BodyKind.RAW, str(body), self._headers.get("content-type", "text/plain; charset=utf-8"))

    def redirect(self, url: str, status: int = 302) -> None:
        self._ensure_not_sent("redirect")
        self._status_code = int(status)
        self._headers["location"] = url
        self._finish(BodyKind.REDIRECT, None, None)

    def _finish(self, kind: BodyKind, body: Any, media_type: Optional[str]) -> None:
        self._body_kind = kind
        self._body = body
        self._media_type = media_type
        self._sent = True
        self._logger.debug(f"Response written: status={self._status_code}, kind={kind.value}")

    def _ensure_not_sent(self, operation: str) -> None:
        if self._sent:
            raise ResponseAlreadySentError(
                f"Cannot {operation}: response already sent",
                code="RESPONSE_ALREADY_SENT",
                details={"operation": operation, "status_code": self._status_code},
            )

    def get_summary(self) -> Dict[str, Any]:
        """
        Get a summary of the buffered response.

        Returns:
            dict: Status, headers, body kind and whether the response was sent.
        """
        return {
            "name": self.name,
            "status_code": self._status_code,
            "headers": dict(self._headers),
            "body_kind": self._body_kind.value,
            "sent": self._sent,
        }
