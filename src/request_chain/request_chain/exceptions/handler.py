# ABOUTME: Handler-specific exception classes for builder and executor misuse
# ABOUTME: These errors are never turned into responses; they surface to the host

from request_chain.exceptions.base import ChainException


class HandlerError(ChainException):
    """Base exception class for handler-related errors.

    This is the base class for errors caused by how a handler chain was built
    or how its steps behave, as opposed to errors about the request itself.

    Should be used as a base for more specific handler exceptions
    rather than being raised directly.
    """

    pass


class HandlerConfigurationError(HandlerError):
    """Exception raised for invalid handler registration.

    Used when a handler chain is built incorrectly, such as:
    - Setting the resolver or transformer twice
    - Executing a handler without a resolver
    - Passing a schema the validator cannot use
    - Validating an unknown request location

    Should include details about the registration that failed.
    """

    pass


class ContextContractError(HandlerError):
    """Exception raised when a step contributes undeclared context keys.

    Used when a middleware registered with a ``provides`` manifest returns
    keys outside that manifest.
    """

    pass


class ResponseAlreadySentError(HandlerError):
    """Exception raised when a response sink is written a second time."""

    pass
