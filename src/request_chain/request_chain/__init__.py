# ABOUTME: request_chain package initialization
# ABOUTME: Exports the handler builder, error types and status table

"""
Request handler chains.

Compose validators, middlewares, a resolver and an optional transformer into
one handler that answers a request exactly once:

    handler = (
        Handler("create_user")
        .validate("body", {"username": str, "password": str})
        .middleware(require_session)
        .resolve(create_user)
        .transform(lambda user, res: {"data": {"name": user["username"]}, "meta": None})
    )
"""

from request_chain.components.handler import ChainExecutor, ErrorDispatcher, Handler
from request_chain.exceptions import (
    ApplicationError,
    ChainException,
    ContextContractError,
    HandlerConfigurationError,
    MalformedRequestError,
    ResponseAlreadySentError,
    ValidationFailure,
)
from request_chain.implementations.memory import BufferedResponseSink
from request_chain.models import (
    ChainOutcome,
    ChainRequest,
    ChainResult,
    HTTP_STATUS_TEXT,
    HTTPStatus,
    ValidationTarget,
)

__version__ = "0.1.0"

__all__ = [
    "Handler",
    "ChainExecutor",
    "ErrorDispatcher",
    "ApplicationError",
    "ChainException",
    "ContextContractError",
    "HandlerConfigurationError",
    "MalformedRequestError",
    "ResponseAlreadySentError",
    "ValidationFailure",
    "BufferedResponseSink",
    "ChainOutcome",
    "ChainRequest",
    "ChainResult",
    "HTTP_STATUS_TEXT",
    "HTTPStatus",
    "ValidationTarget",
]
