# ABOUTME: Abstract step interface defining the uniform contract of chain steps
# ABOUTME: Validators, middlewares and passthrough steps all inherit from AbstractStep

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from request_chain.models.chain.enum import StepKind

if TYPE_CHECKING:
    from request_chain.interfaces.chain.response import AbstractResponseSink
    from request_chain.models.http.request import ChainRequest

Proceed = Callable[..., Any]


class AbstractStep(ABC):
    """
    Abstract base class for all handler chain steps.

    This class defines the contract every step follows, so the executor can
    drive validators, user middlewares and passthrough middlewares the same way.
    """

    kind: StepKind

    def __init__(self, name: str):
        """
        Initialize step with a name.

        Args:
            name: Name used in execution paths and logs.
        """
        self.name = name

    @abstractmethod
    async def __call__(
        self,
        request: "ChainRequest",
        response: "AbstractResponseSink",
        proceed: Proceed,
        context: Dict[str, Any],
    ) -> Optional[Mapping[str, Any]]:
        """
        Run the step for one request.

        Args:
            request: The request being handled. Steps may replace its locations.
            response: The response sink. A step that writes to it ends the chain.
            proceed: Signal callable. Calling it with an exception raises that
                exception inside the step; calling it without one does nothing.
            context: Snapshot of the context accumulated by earlier steps.

        Returns:
            A mapping to merge into the context, or None.

        Raises:
            Exception: Any exception ends the chain and is dispatched by the executor.
        """
        pass

    def describe(self) -> Dict[str, Any]:
        """
        Get a description of this step for introspection.

        Returns:
            dict: Step name and kind.
        """
        return {"name": self.name, "kind": self.kind.value}

    def __repr__(self) -> str:
        """String representation of step."""
        return f"{self.__class__.__name__}(name={self.name!r})"
