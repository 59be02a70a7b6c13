# ABOUTME: Step variants package for handler chains
# ABOUTME: Exports validator, middleware and passthrough steps

from .middleware import MiddlewareStep, PassthroughStep
from .validator import ValidatorStep, build_field_map_model, is_parse_capable

__all__ = [
    "MiddlewareStep",
    "PassthroughStep",
    "ValidatorStep",
    "build_field_map_model",
    "is_parse_capable",
]
