# ABOUTME: ChainResult and ChainOutcome models describing how an execution ended
# ABOUTME: Contains the terminal action, timing and error information of one execution

from datetime import datetime, UTC
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict


class ChainOutcome(str, Enum):
    """
    Terminal action of a chain execution.

    Every execution ends with exactly one of these.
    """

    STEP_RESPONDED = "step_responded"
    RESOLVED = "resolved"
    TRANSFORMED = "transformed"
    VALIDATION_FAILED = "validation_failed"
    APPLICATION_ERROR = "application_error"
    DELEGATED = "delegated"

    @property
    def is_error(self) -> bool:
        return self in (
            ChainOutcome.VALIDATION_FAILED,
            ChainOutcome.APPLICATION_ERROR,
            ChainOutcome.DELEGATED,
        )


class ChainResult(BaseModel):
    """
    Result of one handler chain execution.

    Informational only: the response itself lives in the response sink or,
    for delegated errors, with the host.
    """

    execution_id: str = Field(description="Identifier of the execution")
    outcome: ChainOutcome = Field(description="Terminal action of the execution")

    # Timing information
    started_at: datetime = Field(description="When the execution started")
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the execution completed"
    )

    # Execution details
    execution_path: List[str] = Field(default_factory=list, description="Names of steps that ran")
    context: Dict[str, Any] = Field(default_factory=dict, description="Final context values")
    status_code: Optional[int] = Field(default=None, description="Status written by the chain, if any")

    # Error information
    error: Optional[str] = Field(default=None, description="Error message if the execution ended with an error")
    error_type: Optional[str] = Field(default=None, description="Class name of that error")
    failed_step: Optional[str] = Field(default=None, description="Name of the step that raised")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def get_execution_time_ms(self) -> float:
        """
        Get the execution time in milliseconds.

        Returns:
            float: Execution time in milliseconds.
        """
        return (self.completed_at - self.started_at).total_seconds() * 1000

    def is_successful(self) -> bool:
        """Check if the execution ended without an error."""
        return not self.outcome.is_error

    def get_execution_summary(self) -> Dict[str, Any]:
        """
        Get a summary of the execution.

        Returns:
            Dict[str, Any]: Summary containing key execution facts.
        """
        summary = {
            "execution_id": self.execution_id,
            "outcome": self.outcome.value,
            "execution_time_ms": self.get_execution_time_ms(),
            "steps_executed": len(self.execution_path),
            "status_code": self.status_code,
        }

        if self.error is not None:
            summary["error"] = self.error
            summary["error_type"] = self.error_type
            summary["failed_step"] = self.failed_step

        return summary
