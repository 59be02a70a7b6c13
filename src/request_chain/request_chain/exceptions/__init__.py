# ABOUTME: Exceptions package exports
# ABOUTME: Exports the request chain error taxonomy

from request_chain.exceptions.base import (
    ChainException,
    ApplicationError,
    MalformedRequestError,
    ValidationFailure,
)

from request_chain.exceptions.handler import (
    HandlerError,
    HandlerConfigurationError,
    ContextContractError,
    ResponseAlreadySentError,
)

__all__ = [
    "ChainException",
    "ApplicationError",
    "MalformedRequestError",
    "ValidationFailure",
    # Handler exceptions
    "HandlerError",
    "HandlerConfigurationError",
    "ContextContractError",
    "ResponseAlreadySentError",
]
