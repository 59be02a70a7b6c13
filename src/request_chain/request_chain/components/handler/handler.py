# ABOUTME: Handler builder composing validators, middlewares, resolver and transformer
# ABOUTME: Every registration returns a new Handler; executing runs one ChainExecutor pass

import copy
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Optional, Tuple, Union

from loguru import logger

from request_chain.components.handler.dispatcher import ErrorDispatcher
from request_chain.components.handler.executor import ChainExecutor
from request_chain.components.steps import MiddlewareStep, PassthroughStep, ValidatorStep
from request_chain.components.steps.validator import SchemaInput
from request_chain.components.utils import callable_name
from request_chain.config.settings import ChainSettings, get_settings
from request_chain.exceptions import HandlerConfigurationError
from request_chain.interfaces.chain import AbstractResponseSink, AbstractStep, Proceed
from request_chain.models.chain import ChainResult
from request_chain.models.http.enum import ValidationTarget
from request_chain.models.http.request import ChainRequest

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response


class Handler:
    """
    Builder for a request handler chain.

    Steps run in registration order, then the resolver, then the optional
    transformer. Registration methods never modify the handler they are called
    on; they return a new Handler, so earlier variants stay usable:

        base = Handler().validate("params", {"user_id": str})
        get_user = base.resolve(load_user).transform(to_dto)
        delete_user = base.middleware(require_admin).resolve(remove_user)

    Example:
        handler = (
            Handler("get_user")
            .validate("params", {"uuid": UUID})
            .middleware(authenticate, provides=["user"])
            .resolve(lambda req, res, ctx: ctx["user"])
            .transform(lambda user, res: {"data": {"name": user.name}, "meta": None})
        )
        app.add_route("/users/{uuid}", handler.starlette())
    """

    def __init__(self, name: str = "Handler", settings: Optional[ChainSettings] = None):
        """
        Initialize an empty handler.

        Args:
            name: Name of the handler for identification and logging.
            settings: Settings to use; defaults to ``get_settings()``.
        """
        self.name = name
        self._settings = settings
        self._steps: Tuple[AbstractStep, ...] = ()
        self._resolver: Optional[Callable[..., Any]] = None
        self._transformer: Optional[Callable[..., Any]] = None
        self._executor: Optional[ChainExecutor] = None

        self._logger = logger.bind(name=f"{__name__}.{self.name}")

    @property
    def settings(self) -> ChainSettings:
        return self._settings if self._settings is not None else get_settings()

    @property
    def steps(self) -> Tuple[AbstractStep, ...]:
        return self._steps

    @property
    def has_resolver(self) -> bool:
        return self._resolver is not None

    @property
    def has_transformer(self) -> bool:
        return self._transformer is not None

    def _derive(self, **changes: Any) -> "Handler":
        derived = copy.copy(self)
        for attribute, value in changes.items():
            setattr(derived, attribute, value)
        derived._executor = None
        return derived

    def _add_step(self, step: AbstractStep) -> "Handler":
        self._logger.debug(f"Adding {step.kind.value} step {step.name} at position {len(self._steps) + 1}")
        return self._derive(_steps=self._steps + (step,))

    def middleware(
        self,
        fn: Callable[..., Any],
        *,
        name: Optional[str] = None,
        provides: Optional[Iterable[str]] = None,
    ) -> "Handler":
        """
        Add a middleware ``fn(request, response, proceed, context)``.

        A returned mapping is merged into the context of later steps and the
        resolver. Raise ApplicationError to halt with a status, or write to the
        response to finish the request early.

        Args:
            fn: Sync or async middleware callable.
            name: Step name; defaults to the function name.
            provides: Optional manifest of the context keys the middleware returns.

        Returns:
            Handler: A new handler with the middleware appended.
        """
        step_name = name or callable_name(fn, f"middleware_{len(self._steps) + 1}")
        return self._add_step(MiddlewareStep(fn, step_name, provides=provides))

    def use(self, fn: Callable[..., Any], *, name: Optional[str] = None) -> "Handler":
        """
        Add a host-style middleware ``fn(request, response, proceed)`` as-is.

        Args:
            fn: Sync or async middleware callable that does not take the context.
            name: Step name; defaults to the function name.

        Returns:
            Handler: A new handler with the middleware appended.
        """
        step_name = name or callable_name(fn, f"passthrough_{len(self._steps) + 1}")
        return self._add_step(PassthroughStep(fn, step_name))

    def validate(self, target: Union[ValidationTarget, str], schema: SchemaInput) -> "Handler":
        """
        Add a validator for one request location.

        Args:
            target: ``body``, ``query``, ``headers`` or ``params``.
            schema: A pydantic model class, a TypeAdapter, or a mapping of field
                names to field types / ``(type, default)`` tuples. Header field
                names must be lower case.

        Returns:
            Handler: A new handler with the validator appended.

        Raises:
            HandlerConfigurationError: If the target or schema is invalid.
        """
        return self._add_step(ValidatorStep(target, schema, extra=self.settings.VALIDATION_EXTRA))

    def resolve(self, fn: Callable[..., Any]) -> "Handler":
        """
        Set the resolver ``fn(request, response, context)``.

        Its return value is handed to the transformer. Without a transformer the
        resolver is expected to write the response itself.

        Raises:
            HandlerConfigurationError: If a resolver is already set.
        """
        if self._resolver is not None:
            raise HandlerConfigurationError(
                f"Handler {self.name} already has a resolver",
                code="RESOLVER_ALREADY_SET",
                details={"handler": self.name},
            )
        return self._derive(_resolver=fn)

    def transform(self, fn: Callable[..., Any]) -> "Handler":
        """
        Set the transformer ``fn(resolved, response)``.

        A returned mapping or list is written as JSON, any other non-None value
        as a raw body.

        Raises:
            HandlerConfigurationError: If a transformer is already set.
        """
        if self._transformer is not None:
            raise HandlerConfigurationError(
                f"Handler {self.name} already has a transformer",
                code="TRANSFORMER_ALREADY_SET",
                details={"handler": self.name},
            )
        return self._derive(_transformer=fn)

    def build_executor(self) -> ChainExecutor:
        """
        Build (once) the executor for this handler.

        Returns:
            ChainExecutor: The executor running this handler's chain.

        Raises:
            HandlerConfigurationError: If no resolver is set.
        """
        if self._resolver is None:
            raise HandlerConfigurationError(
                f"Handler {self.name} has no resolver",
                code="RESOLVER_MISSING",
                details={"handler": self.name, "steps": [step.name for step in self._steps]},
            )
        if self._executor is None:
            self._executor = ChainExecutor(
                self._steps,
                self._resolver,
                self._transformer,
                dispatcher=ErrorDispatcher(self.settings.UNKNOWN_STATUS_TEXT),
                name=self.name,
            )
        return self._executor

    async def execute(self, request: ChainRequest, response: AbstractResponseSink, proceed: Proceed) -> ChainResult:
        """
        Run the chain for one request.

        Args:
            request: The request to handle.
            response: The response sink to write to.
            proceed: Host callback receiving unclassified errors.

        Returns:
            ChainResult: Description of how the execution ended.
        """
        return await self.build_executor().execute(request, response, proceed)

    async def __call__(self, request: ChainRequest, response: AbstractResponseSink, proceed: Proceed) -> ChainResult:
        return await self.execute(request, response, proceed)

    def starlette(self) -> Callable[["Request"], Any]:
        """
        Build a Starlette endpoint running this handler.

        Returns:
            An ``async def endpoint(request) -> Response`` for Starlette routes.
        """
        from request_chain.adapters.starlette import as_starlette_endpoint

        return as_starlette_endpoint(self)

    def get_chain_info(self) -> Dict[str, Any]:
        """
        Get information about the registered chain.

        Returns:
            dict: Handler name, steps in order, resolver and transformer presence.
        """
        return {
            "name": self.name,
            "step_count": len(self._steps),
            "steps": [step.describe() for step in self._steps],
            "has_resolver": self.has_resolver,
            "has_transformer": self.has_transformer,
        }

    def __repr__(self) -> str:
        return f"Handler(name={self.name!r}, steps={len(self._steps)}, resolver={self.has_resolver})"
