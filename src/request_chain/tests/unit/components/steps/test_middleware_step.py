# ABOUTME: Unit tests for MiddlewareStep and PassthroughStep
# ABOUTME: Tests sync/async callables, context access and the provides manifest

import pytest

from request_chain.components.steps import MiddlewareStep, PassthroughStep
from request_chain.exceptions import ApplicationError, ContextContractError
from request_chain.implementations.memory.response import BufferedResponseSink
from request_chain.models import ChainRequest, StepKind


def _proceed(err=None):
    if err is not None:
        raise err


class TestMiddlewareStep:
    """Test suite for MiddlewareStep."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sync_middleware_receives_context(self):
        """Test a sync middleware gets all four arguments and its return is passed on."""
        seen = {}

        def middleware(request, response, proceed, context):
            seen["context"] = context
            seen["request"] = request
            return {"age": context["age"] + 1}

        step = MiddlewareStep(middleware, "increment")
        request = ChainRequest()

        contribution = await step(request, BufferedResponseSink(), _proceed, {"age": 12})

        assert contribution == {"age": 13}
        assert seen["context"] == {"age": 12}
        assert seen["request"] is request
        assert step.kind is StepKind.MIDDLEWARE

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_async_middleware(self):
        """Test async middlewares are awaited."""

        async def middleware(request, response, proceed, context):
            return {"name": "John Doe"}

        step = MiddlewareStep(middleware, "load_name")

        assert await step(ChainRequest(), BufferedResponseSink(), _proceed, {}) == {"name": "John Doe"}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        """Test errors raised by the middleware are not caught by the step."""

        def middleware(request, response, proceed, context):
            raise ApplicationError(403, "denied")

        with pytest.raises(ApplicationError):
            await MiddlewareStep(middleware, "auth")(ChainRequest(), BufferedResponseSink(), _proceed, {})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_proceed_with_error_raises(self):
        """Test calling proceed with an error surfaces that error."""
        error = ApplicationError(401, "login required")

        def middleware(request, response, proceed, context):
            proceed(error)

        with pytest.raises(ApplicationError) as exc_info:
            await MiddlewareStep(middleware, "auth")(ChainRequest(), BufferedResponseSink(), _proceed, {})

        assert exc_info.value is error

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_provides_allows_declared_keys(self):
        """Test declared keys pass the manifest check."""
        step = MiddlewareStep(lambda req, res, proceed, ctx: {"user": "a"}, "auth", provides=["user", "role"])

        assert await step(ChainRequest(), BufferedResponseSink(), _proceed, {}) == {"user": "a"}
        assert step.describe()["provides"] == ["role", "user"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_provides_rejects_undeclared_keys(self):
        """Test undeclared keys raise a context contract error."""
        step = MiddlewareStep(lambda req, res, proceed, ctx: {"user": "a", "admin": True}, "auth", provides=["user"])

        with pytest.raises(ContextContractError) as exc_info:
            await step(ChainRequest(), BufferedResponseSink(), _proceed, {})

        assert exc_info.value.code == "UNDECLARED_CONTEXT_KEYS"
        assert exc_info.value.details["undeclared"] == ["admin"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_provides_ignores_non_mapping_returns(self):
        """Test non-mapping returns are not checked against the manifest."""
        step = MiddlewareStep(lambda req, res, proceed, ctx: "not a mapping", "auth", provides=[])

        assert await step(ChainRequest(), BufferedResponseSink(), _proceed, {}) == "not a mapping"


class TestPassthroughStep:
    """Test suite for PassthroughStep."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_called_without_context(self):
        """Test passthrough callables get request, response and proceed only."""
        calls = []

        def host_middleware(request, response, proceed):
            calls.append((request, response, proceed))
            proceed()

        step = PassthroughStep(host_middleware, "host")
        request = ChainRequest()
        response = BufferedResponseSink()

        assert await step(request, response, _proceed, {"secret": 1}) is None
        assert calls == [(request, response, _proceed)]
        assert step.kind is StepKind.PASSTHROUGH

    @pytest.mark.unit
    def test_describe(self):
        """Test the description names the step and its kind."""
        description = PassthroughStep(lambda req, res, proceed: None, "host").describe()

        assert description["name"] == "host"
        assert description["kind"] == "passthrough"
