# ABOUTME: Enumerations for request locations that can be validated
# ABOUTME: Defines the four fixed validation targets on a request

from enum import Enum


class ValidationTarget(str, Enum):
    """
    Request locations a validator step can validate.

    Header keys are lower-cased by the host, so header schemas must
    declare lower-case field names.
    """

    BODY = "body"
    QUERY = "query"
    HEADERS = "headers"
    PARAMS = "params"

    def __str__(self) -> str:
        return self.value
