# ABOUTME: Chain interfaces package for request handler chains
# ABOUTME: Exports abstract interfaces for steps and response sinks

from .response import AbstractResponseSink
from .step import AbstractStep, Proceed

__all__ = ["AbstractResponseSink", "AbstractStep", "Proceed"]
