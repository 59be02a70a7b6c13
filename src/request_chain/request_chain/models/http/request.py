# ABOUTME: ChainRequest model, the transport-independent view of one request
# ABOUTME: Validator steps replace its locations with validated values

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from request_chain.models.http.enum import ValidationTarget


class ChainRequest(BaseModel):
    """
    Request seen by the steps of a handler chain.

    The four validation targets are plain attributes so validators can swap in
    validated values for every step that runs after them. ``raw`` keeps the
    host's own request object for anything the chain does not model.
    """

    method: str = Field(default="GET", description="HTTP method")
    path: str = Field(default="/", description="Request path")

    body: Any = Field(default=None, description="Parsed request body")
    query: Dict[str, Any] = Field(default_factory=dict, description="Query string parameters")
    headers: Dict[str, Any] = Field(default_factory=dict, description="Request headers with lower-case keys")
    params: Dict[str, Any] = Field(default_factory=dict, description="Path parameters")

    raw: Optional[Any] = Field(default=None, description="Host request object", exclude=True)

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=False,
    )

    def model_post_init(self, __context: Any) -> None:
        self.headers = {str(key).lower(): value for key, value in self.headers.items()}

    def get_location(self, target: ValidationTarget) -> Any:
        """
        Get the value stored at a validation target.

        Args:
            target: The request location to read.

        Returns:
            The current value of that location.
        """
        return getattr(self, ValidationTarget(target).value)

    def set_location(self, target: ValidationTarget, value: Any) -> None:
        """
        Replace the value stored at a validation target.

        Args:
            target: The request location to write.
            value: The new value, usually the validated output of a schema.
        """
        setattr(self, ValidationTarget(target).value, value)
