# ABOUTME: Chain models package for request handler chains
# ABOUTME: Exports per-execution context and result models and step kinds

from .context import ChainContext
from .enum import StepKind
from .result import ChainResult, ChainOutcome

__all__ = ["ChainContext", "ChainResult", "ChainOutcome", "StepKind"]
