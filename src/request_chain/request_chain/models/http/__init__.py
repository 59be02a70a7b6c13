# ABOUTME: HTTP models package for request handler chains
# ABOUTME: Exports the request view, validation targets and status table

from .enum import ValidationTarget
from .request import ChainRequest
from .status import HTTPStatus, HTTP_STATUS_TEXT, status_text

__all__ = ["ChainRequest", "ValidationTarget", "HTTPStatus", "HTTP_STATUS_TEXT", "status_text"]
