# ABOUTME: In-memory implementations package
# ABOUTME: Implementations that keep their state in process memory only

from .response.response_sink import BodyKind, BufferedResponseSink

__all__ = [
    "BodyKind",
    "BufferedResponseSink",
]
