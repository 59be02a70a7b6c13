# ABOUTME: ErrorDispatcher classifying errors that ended a handler chain
# ABOUTME: Writes validation and application error bodies, delegates everything else to the host

from typing import Any, Dict, Literal

from loguru import logger

from request_chain.components.utils import call_maybe_async
from request_chain.exceptions import ApplicationError, ValidationFailure
from request_chain.interfaces.chain import AbstractResponseSink, Proceed
from request_chain.models.chain.result import ChainOutcome
from request_chain.models.http.status import status_text


class ErrorDispatcher:
    """
    Turns the error that terminated a chain into exactly one terminal action.

    Classification, in priority order:
        1. ValidationFailure -> 400 with field-level errors and the location.
        2. ApplicationError -> its status with ``{"errors": [message], "type": ...}``.
        3. Anything else -> handed unmodified to the host's ``proceed`` callback.

    A classified error that arrives after the response was written cannot be
    answered again, so it is delegated like an unclassified one.
    """

    def __init__(self, unknown_status_text: Literal["omit", "phrase"] = "omit"):
        """
        Initialize the dispatcher.

        Args:
            unknown_status_text: Policy for application errors whose status has no
                entry in the status text table. ``omit`` leaves ``type`` out of the
                body, ``phrase`` uses the standard HTTP reason phrase.
        """
        self.unknown_status_text = unknown_status_text
        self._logger = logger.bind(name=__name__)

    async def dispatch(self, error: Exception, response: AbstractResponseSink, proceed: Proceed) -> ChainOutcome:
        """
        Dispatch an error to its terminal action.

        Args:
            error: The exception raised by a step, the resolver or the transformer.
            response: The response sink of the execution.
            proceed: The host's next-in-line error callback.

        Returns:
            ChainOutcome: The terminal action that was taken.
        """
        if isinstance(error, (ValidationFailure, ApplicationError)) and response.headers_sent:
            self._logger.warning(
                f"{type(error).__name__} raised after the response was sent, delegating to host: {error}"
            )
            return await self._delegate(error, proceed)

        if isinstance(error, ValidationFailure):
            response.status(error.status).json(self.validation_body(error))
            return ChainOutcome.VALIDATION_FAILED

        if isinstance(error, ApplicationError):
            response.status(error.status).json(self.application_body(error))
            return ChainOutcome.APPLICATION_ERROR

        return await self._delegate(error, proceed)

    def validation_body(self, error: ValidationFailure) -> Dict[str, Any]:
        """Build the response body for a validation failure."""
        return {
            "errors": [dict(entry) for entry in error.errors],
            "location": error.location,
            "type": status_text(error.status),
        }

    def application_body(self, error: ApplicationError) -> Dict[str, Any]:
        """Build the response body for an application error."""
        body: Dict[str, Any] = {"errors": [error.message]}
        text = status_text(error.status, self.unknown_status_text)
        if text is not None:
            body["type"] = text
        return body

    async def _delegate(self, error: Exception, proceed: Proceed) -> ChainOutcome:
        self._logger.debug(f"Delegating {type(error).__name__} to host error handling")
        await call_maybe_async(proceed, error)
        return ChainOutcome.DELEGATED
