# ABOUTME: Core exception classes for request handler chains
# ABOUTME: Provides structured errors that the chain turns into HTTP responses

from http import HTTPStatus as _StdHTTPStatus
from typing import Any, Dict, List


class ChainException(Exception):
    """Base exception class for the request chain package.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize ChainException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ApplicationError(ChainException):
    """Exception raised intentionally to halt a chain with an HTTP status.

    Raised by middleware, resolver or transformer authors, such as:
    - Authorization denied (403)
    - Resource not found (404)
    - Business rule rejected the request (400)

    The chain answers with the given status and the body
    ``{"errors": [message], "type": <status text>}``.

    Attributes:
        status: HTTP status code sent to the client
    """

    def __init__(
        self,
        status: int,
        message: str,
        code: str | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize ApplicationError with a status code and message.

        Args:
            status: HTTP status code in the range 100..599
            message: Message placed in the response ``errors`` list
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information

        Raises:
            ValueError: If the status is not a valid HTTP status code.
        """
        status = int(status)
        if not 100 <= status <= 599:
            raise ValueError(f"Invalid HTTP status code {status}. Must be between 100 and 599.")
        self.status = status
        super().__init__(message, code=code, details=details)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status={self.status}, message={self.message!r})"


class MalformedRequestError(ApplicationError):
    """Exception raised when a request location cannot be validated at all.

    Used when the value at a validation target is not object shaped, such as
    a plain string body or a missing body, independent of schema content.
    Always carries status 400.
    """

    def __init__(self, location: str, details: Dict[str, Any] | None = None):
        self.location = location
        super().__init__(
            int(_StdHTTPStatus.BAD_REQUEST),
            f"Invalid request {location} (not an object)",
            code="MALFORMED_REQUEST",
            details=details,
        )


class ValidationFailure(ChainException):
    """Exception raised when a request location fails schema validation.

    Carries one entry per schema violation and the name of the validated
    location. Always answered with status 400 and the body
    ``{"errors": [...], "location": <target>, "type": "Bad Request"}``.

    Attributes:
        errors: List of ``{"message": str, "path": list}`` entries
        location: The validated request location (body, query, headers, params)
        status: Always 400
    """

    status: int = int(_StdHTTPStatus.BAD_REQUEST)

    def __init__(self, errors: List[Dict[str, Any]], location: str):
        self.errors = [{"message": error["message"], "path": list(error["path"])} for error in errors]
        self.location = location
        super().__init__(
            "Validation failed",
            code="VALIDATION_FAILED",
            details={"location": location, "error_count": len(self.errors)},
        )

    @classmethod
    def from_pydantic(cls, error: Any, location: str) -> "ValidationFailure":
        """Build a ValidationFailure from a ``pydantic.ValidationError``.

        Args:
            error: The pydantic ValidationError raised by the schema
            location: The validated request location

        Returns:
            ValidationFailure with one entry per pydantic error.
        """
        return cls(
            [{"message": item["msg"], "path": list(item["loc"])} for item in error.errors()],
            location,
        )
