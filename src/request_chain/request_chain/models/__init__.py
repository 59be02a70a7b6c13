# ABOUTME: Models package initialization
# ABOUTME: Exports request, context, result and status models

# HTTP models
from .http import ChainRequest, ValidationTarget, HTTPStatus, HTTP_STATUS_TEXT, status_text

# Chain execution models
from .chain import ChainContext, ChainResult, ChainOutcome, StepKind

__all__ = [
    # HTTP
    "ChainRequest",
    "ValidationTarget",
    "HTTPStatus",
    "HTTP_STATUS_TEXT",
    "status_text",
    # Chain
    "ChainContext",
    "ChainResult",
    "ChainOutcome",
    "StepKind",
]
