# ABOUTME: ChainExecutor driving one request through steps, resolver and transformer
# ABOUTME: Threads the context, short-circuits on early responses and dispatches errors

from typing import Any, Callable, Optional, Sequence, Tuple

from loguru import logger

from request_chain.components.handler.dispatcher import ErrorDispatcher
from request_chain.components.utils import call_maybe_async
from request_chain.interfaces.chain import AbstractResponseSink, AbstractStep, Proceed
from request_chain.models.chain import ChainContext, ChainOutcome, ChainResult
from request_chain.models.http.request import ChainRequest

RESOLVER_STEP = "resolver"
TRANSFORMER_STEP = "transformer"

# Payloads sent as a raw body; anything else is written as JSON
RAW_PAYLOAD_TYPES = (str, bytes, bytearray, int, float, bool)


def proceed_signal(err: Optional[BaseException] = None) -> None:
    """
    Proceed signal handed to steps.

    Steps run in order regardless of whether they call it. Passing an
    exception raises it inside the calling step so it is dispatched like any
    other raise.
    """
    if isinstance(err, BaseException):
        raise err


class ChainExecutor:
    """
    Executes a fixed chain of steps, a resolver and an optional transformer.

    The executor holds no per-request state: every call to ``execute`` gets its
    own ChainContext, so one executor serves any number of concurrent requests.
    Each execution ends with exactly one terminal action.
    """

    def __init__(
        self,
        steps: Sequence[AbstractStep],
        resolver: Callable[..., Any],
        transformer: Optional[Callable[..., Any]] = None,
        dispatcher: Optional[ErrorDispatcher] = None,
        name: str = "Handler",
    ):
        """
        Initialize the executor.

        Args:
            steps: Steps in execution order.
            resolver: ``resolver(request, response, context)``, sync or async.
            transformer: Optional ``transformer(resolved, response)``, sync or async.
            dispatcher: Error dispatcher; a default one is created when omitted.
            name: Name of the handler for identification and logging.
        """
        self.name = name
        self._steps: Tuple[AbstractStep, ...] = tuple(steps)
        self._resolver = resolver
        self._transformer = transformer
        self._dispatcher = dispatcher or ErrorDispatcher()

        self._logger = logger.bind(name=f"{__name__}.{self.name}")

    @property
    def steps(self) -> Tuple[AbstractStep, ...]:
        return self._steps

    async def execute(self, request: ChainRequest, response: AbstractResponseSink, proceed: Proceed) -> ChainResult:
        """
        Execute the chain for one request.

        Args:
            request: The request to handle.
            response: The response sink to write to.
            proceed: The host's next-in-line callback, called only to delegate an
                unclassified error.

        Returns:
            ChainResult: Description of how the execution ended.
        """
        state = ChainContext()
        self._logger.debug(f"Execution {state.id}: starting chain with {len(self._steps)} step(s)")

        current = RESOLVER_STEP
        try:
            for index, step in enumerate(self._steps):
                current = step.name
                self._logger.debug(
                    f"Execution {state.id}: running step {index + 1}/{len(self._steps)}: {step.name}"
                )

                contribution = await step(request, response, proceed_signal, state.snapshot())
                state.add_execution_step(step.name)
                state.merge(contribution)

                if response.headers_sent:
                    self._logger.debug(f"Execution {state.id}: step {step.name} sent the response, stopping")
                    return self._result(state, ChainOutcome.STEP_RESPONDED, response)

            current = RESOLVER_STEP
            resolved = await call_maybe_async(self._resolver, request, response, state.snapshot())
            state.add_execution_step(RESOLVER_STEP)

            if self._transformer is None:
                return self._result(state, ChainOutcome.RESOLVED, response)

            current = TRANSFORMER_STEP
            payload = await call_maybe_async(self._transformer, resolved, response)
            state.add_execution_step(TRANSFORMER_STEP)
            self._write_payload(state, payload, response)
            return self._result(state, ChainOutcome.TRANSFORMED, response)

        except Exception as error:
            self._logger.debug(f"Execution {state.id}: {current} raised {type(error).__name__}: {error}")
            outcome = await self._dispatcher.dispatch(error, response, proceed)
            return self._result(state, outcome, response, error=error, failed_step=current)

    def _write_payload(self, state: ChainContext, payload: Any, response: AbstractResponseSink) -> None:
        if payload is None:
            return

        if response.headers_sent:
            self._logger.warning(
                f"Execution {state.id}: transformer returned a payload but the response was already sent, "
                "payload discarded"
            )
            return

        if isinstance(payload, RAW_PAYLOAD_TYPES):
            response.send(payload)
        else:
            response.json(list(payload) if isinstance(payload, tuple) else payload)

    def _result(
        self,
        state: ChainContext,
        outcome: ChainOutcome,
        response: AbstractResponseSink,
        error: Optional[Exception] = None,
        failed_step: Optional[str] = None,
    ) -> ChainResult:
        result = ChainResult(
            execution_id=state.id,
            outcome=outcome,
            started_at=state.timestamp,
            execution_path=state.get_execution_path(),
            context=state.snapshot(),
            status_code=response.status_code if response.headers_sent else None,
            error=str(error) if error is not None else None,
            error_type=type(error).__name__ if error is not None else None,
            failed_step=failed_step,
        )
        self._logger.debug(
            f"Execution {state.id} completed in {result.get_execution_time_ms():.2f}ms, "
            f"outcome: {outcome.value}, steps: {len(result.execution_path)}"
        )
        return result
