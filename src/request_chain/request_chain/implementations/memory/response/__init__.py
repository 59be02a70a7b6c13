# ABOUTME: In-memory response sink package
# ABOUTME: Exports the buffered response sink used by host adapters and tests

from .response_sink import BodyKind, BufferedResponseSink

__all__ = ["BodyKind", "BufferedResponseSink"]
