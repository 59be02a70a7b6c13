# ABOUTME: Abstract response sink interface over the host's response writing
# ABOUTME: Defines status, header and body writes plus already-sent detection

from abc import ABC, abstractmethod
from typing import Any, Dict


class AbstractResponseSink(ABC):
    """
    Abstract base class for response sinks.

    A response sink accepts exactly one body write (``json``, ``send`` or
    ``redirect``). After that ``headers_sent`` is True and the handler chain
    stops running further steps.
    """

    @property
    @abstractmethod
    def headers_sent(self) -> bool:
        """
        Whether the response has already been written.

        Returns:
            bool: True once a body write happened.
        """
        pass

    @property
    @abstractmethod
    def status_code(self) -> int:
        """
        The status code of the response.

        Returns:
            int: Current status code.
        """
        pass

    @property
    @abstractmethod
    def headers(self) -> Dict[str, str]:
        """
        Headers set on the response so far.

        Returns:
            dict: Header names to values.
        """
        pass

    @abstractmethod
    def status(self, code: int) -> "AbstractResponseSink":
        """
        Set the status code.

        Args:
            code: HTTP status code.

        Returns:
            The sink itself, for chaining (``response.status(201).json(...)``).

        Raises:
            ResponseAlreadySentError: If the response was already written.
        """
        pass

    @abstractmethod
    def set_header(self, name: str, value: str) -> "AbstractResponseSink":
        """
        Set a response header.

        Args:
            name: Header name.
            value: Header value.

        Returns:
            The sink itself, for chaining.

        Raises:
            ResponseAlreadySentError: If the response was already written.
        """
        pass

    @abstractmethod
    def json(self, payload: Any) -> None:
        """
        Write a JSON body and finish the response.

        Args:
            payload: JSON-serializable payload.

        Raises:
            ResponseAlreadySentError: If the response was already written.
        """
        pass

    @abstractmethod
    def send(self, body: Any = None) -> None:
        """
        Write a raw body and finish the response.

        Args:
            body: str, bytes or None. Mappings and lists are written as JSON.

        Raises:
            ResponseAlreadySentError: If the response was already written.
        """
        pass

    @abstractmethod
    def redirect(self, url: str, status: int = 302) -> None:
        """
        Finish the response with a redirect.

        Args:
            url: Target of the Location header.
            status: Redirect status code.

        Raises:
            ResponseAlreadySentError: If the response was already written.
        """
        pass
