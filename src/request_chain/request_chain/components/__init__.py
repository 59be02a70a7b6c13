# ABOUTME: Components package for request handler chains
# ABOUTME: Exports the handler builder and step variants

from .handler import ChainExecutor, ErrorDispatcher, Handler
from .steps import MiddlewareStep, PassthroughStep, ValidatorStep

__all__ = [
    "ChainExecutor",
    "ErrorDispatcher",
    "Handler",
    "MiddlewareStep",
    "PassthroughStep",
    "ValidatorStep",
]
