# ABOUTME: Contract test configuration and fixtures
# ABOUTME: Provides the request, sink and proceed stand-ins shared by contract tests

import pytest

from request_chain.implementations.memory.response import BufferedResponseSink
from request_chain.models import ChainRequest


@pytest.fixture
def chain_request():
    """Create a request with every location populated."""
    return ChainRequest(
        method="POST",
        path="/users/1",
        body={"name": "John Doe"},
        query={"page": "1"},
        headers={"Authorization": "token"},
        params={"user_id": "1"},
    )


@pytest.fixture
def response_sink():
    """Create a fresh response sink."""
    return BufferedResponseSink(name="contract_sink")


@pytest.fixture
def recording_proceed():
    """Create a proceed callback that records what it was called with."""

    class RecordingProceed:
        def __init__(self):
            self.calls = []

        def __call__(self, err=None):
            self.calls.append(err)

    return RecordingProceed()
