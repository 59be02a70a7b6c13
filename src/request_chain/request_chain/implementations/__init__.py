# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the chain interfaces

"""
Implementations

This module contains simple implementations of the chain interfaces.
"""

from .memory import BodyKind, BufferedResponseSink

__all__ = [
    "BodyKind",
    "BufferedResponseSink",
]
