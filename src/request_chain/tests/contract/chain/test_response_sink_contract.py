# ABOUTME: Contract tests for AbstractResponseSink interface implementations
# ABOUTME: Verifies the single-write behaviour the executor and dispatcher rely on

from typing import List, Type

import pytest

from request_chain.exceptions import ChainException
from request_chain.implementations.memory.response import BufferedResponseSink
from request_chain.interfaces.chain import AbstractResponseSink
from tests.contract.base_contract_test import ContractTestBase


class TestResponseSinkContract(ContractTestBase[AbstractResponseSink]):
    """
    Contract tests for AbstractResponseSink interface.

    This test class verifies that all response sink implementations:
    - Properly inherit from AbstractResponseSink
    - Start unsent with status 200
    - Chain status() and set_header() calls
    - Report headers_sent after any finishing write
    - Refuse a second finishing write
    """

    @property
    def interface_class(self) -> Type[AbstractResponseSink]:
        """The AbstractResponseSink interface class."""
        return AbstractResponseSink

    @property
    def implementations(self) -> List[Type[AbstractResponseSink]]:
        """List of concrete response sink implementations to test."""
        return [BufferedResponseSink]

    @pytest.mark.contract
    def test_initial_state(self):
        """Verify new sinks have nothing written."""
        for impl_class in self.implementations:
            sink = impl_class()
            assert sink.headers_sent is False
            assert sink.status_code == 200

    @pytest.mark.contract
    def test_status_and_header_chain(self):
        """Verify status() and set_header() return the sink."""
        for impl_class in self.implementations:
            sink = impl_class()
            assert sink.status(201) is sink
            assert sink.set_header("x-id", "1") is sink
            assert sink.status_code == 201
            assert sink.headers_sent is False

    @pytest.mark.contract
    @pytest.mark.parametrize(
        "finish",
        [
            lambda sink: sink.json({"ok": True}),
            lambda sink: sink.send("ok"),
            lambda sink: sink.send(),
            lambda sink: sink.redirect("/"),
        ],
    )
    def test_finishing_writes(self, finish):
        """Verify every finishing write marks the response as sent and cannot repeat."""
        for impl_class in self.implementations:
            sink = impl_class()
            finish(sink)

            assert sink.headers_sent is True
            with pytest.raises(ChainException):
                finish(sink)
