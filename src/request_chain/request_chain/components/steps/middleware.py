# ABOUTME: Middleware and passthrough step variants wrapping user callables
# ABOUTME: Middleware steps receive the context; passthrough steps use the host-style signature

from collections.abc import Mapping
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional

from loguru import logger

from request_chain.components.utils import call_maybe_async
from request_chain.exceptions import ContextContractError
from request_chain.interfaces.chain import AbstractResponseSink, AbstractStep, Proceed
from request_chain.models.chain.enum import StepKind
from request_chain.models.http.request import ChainRequest


class MiddlewareStep(AbstractStep):
    """
    Step wrapping a user middleware ``fn(request, response, proceed, context)``.

    The callable may be sync or async. A returned mapping is merged into the
    context by the executor. When a ``provides`` manifest is given, returned
    keys outside it raise ContextContractError.
    """

    kind = StepKind.MIDDLEWARE

    def __init__(
        self,
        fn: Callable[..., Any],
        name: str,
        provides: Optional[Iterable[str]] = None,
    ):
        super().__init__(name)
        self.fn = fn
        self.provides: Optional[FrozenSet[str]] = frozenset(provides) if provides is not None else None
        self._logger = logger.bind(name=f"{__name__}.{self.name}")

    async def __call__(
        self,
        request: ChainRequest,
        response: AbstractResponseSink,
        proceed: Proceed,
        context: Dict[str, Any],
    ) -> Optional[Mapping[str, Any]]:
        contribution = await call_maybe_async(self.fn, request, response, proceed, context)

        if self.provides is not None and isinstance(contribution, Mapping):
            undeclared = set(contribution) - self.provides
            if undeclared:
                raise ContextContractError(
                    f"Middleware {self.name} returned undeclared context keys: {sorted(undeclared)}",
                    code="UNDECLARED_CONTEXT_KEYS",
                    details={"step": self.name, "undeclared": sorted(undeclared), "provides": sorted(self.provides)},
                )

        return contribution

    def describe(self) -> Dict[str, Any]:
        description = super().describe()
        if self.provides is not None:
            description["provides"] = sorted(self.provides)
        return description


class PassthroughStep(AbstractStep):
    """
    Step accepting a pre-existing host-style middleware as-is.

    The callable has the signature ``fn(request, response, proceed)`` and never
    sees the context. Its return value follows the same merge rule as any step.
    """

    kind = StepKind.PASSTHROUGH

    def __init__(self, fn: Callable[..., Any], name: str):
        super().__init__(name)
        self.fn = fn

    async def __call__(
        self,
        request: ChainRequest,
        response: AbstractResponseSink,
        proceed: Proceed,
        context: Dict[str, Any],
    ) -> Optional[Mapping[str, Any]]:
        return await call_maybe_async(self.fn, request, response, proceed)
