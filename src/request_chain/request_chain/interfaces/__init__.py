# ABOUTME: Interfaces package exports
# ABOUTME: Exports all abstract interfaces used by handler chains

# Chain interfaces
from .chain import AbstractResponseSink, AbstractStep, Proceed

__all__ = [
    "AbstractResponseSink",
    "AbstractStep",
    "Proceed",
]
