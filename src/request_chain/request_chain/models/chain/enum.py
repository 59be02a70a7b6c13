# ABOUTME: Enumerations for handler chain steps
# ABOUTME: Defines the step variants a handler chain can hold

from enum import Enum


class StepKind(str, Enum):
    """
    Step variants of a handler chain.

    All variants present the same call signature to the executor.
    """

    VALIDATOR = "validator"
    MIDDLEWARE = "middleware"
    PASSTHROUGH = "passthrough"
