# ABOUTME: ChainContext model for one execution of a handler chain
# ABOUTME: Holds the accumulating context values and the execution path

from collections.abc import Mapping
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, ConfigDict


class ChainContext(BaseModel):
    """
    Per-execution state of a handler chain.

    ``values`` is the context threaded through the steps. It starts empty and
    grows by last-write-wins merges of the mappings steps return. A ChainContext
    belongs to exactly one execution and is discarded afterwards.
    """

    # Context identification
    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique execution identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Execution start timestamp")

    # Accumulated context
    values: Dict[str, Any] = Field(default_factory=dict, description="Accumulated context values")

    # Execution state
    execution_path: List[str] = Field(default_factory=list, description="Names of steps executed so far")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def merge(self, contribution: Any) -> bool:
        """
        Merge a step's return value into the context.

        Only mappings are merged; ``None``, lists, tuples, strings and other
        values leave the context unchanged.

        Args:
            contribution: The value returned by a step.

        Returns:
            bool: True if the context was updated.
        """
        if contribution is None or not isinstance(contribution, Mapping):
            return False
        self.values = {**self.values, **contribution}
        return True

    def snapshot(self) -> Dict[str, Any]:
        """
        Get a copy of the context values to hand to a step.

        Returns:
            A shallow copy of the current context values.
        """
        return dict(self.values)

    def add_execution_step(self, step_name: str) -> None:
        """
        Add a step to the execution path.

        Args:
            step_name: Name of the step that was executed.
        """
        self.execution_path.append(step_name)

    def get_execution_path(self) -> List[str]:
        """
        Get the execution path of steps.

        Returns:
            List of step names that have been executed
        """
        return self.execution_path.copy()

    def get_execution_duration(self) -> float:
        """
        Get the duration since execution start in milliseconds.

        Returns:
            float: Duration in milliseconds.
        """
        now = datetime.now(UTC)
        return (now - self.timestamp).total_seconds() * 1000

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get a context value by key."""
        return self.values.get(key, default)
