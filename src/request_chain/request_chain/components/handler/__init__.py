# ABOUTME: Handler package for request handler chains
# ABOUTME: Exports the builder, the executor and the error dispatcher

from .dispatcher import ErrorDispatcher
from .executor import ChainExecutor, proceed_signal
from .handler import Handler

__all__ = ["ChainExecutor", "ErrorDispatcher", "Handler", "proceed_signal"]
