# ABOUTME: Integration tests for middleware chains served through Starlette
# ABOUTME: Tests context merging across middlewares, short-circuits and host-style middlewares

from typing import Optional

import pytest
from starlette.routing import Route

from request_chain import ApplicationError, Handler
from tests.constants import TestRequestData


async def load_profile(request, response, proceed, context):
    if request.query.get("failInMiddlewareOne") == "yes":
        raise ApplicationError(400, "This should fail")
    return {"name": "John Doe", "age": 12}


def no_contribution(request, response, proceed, context):
    pass


async def bump_age(request, response, proceed, context):
    if request.query.get("failInMiddlewareTwo") == "yes":
        raise ApplicationError(401, "This should fail in middleware two")
    if context.get("name") != "John Doe":
        raise RuntimeError("Middleware two should have the previous context applied")
    return {"age": 20}


@pytest.fixture
def client(make_client):
    handler = (
        Handler("chained")
        .validate("params", {"userId": str})
        .validate(
            "query",
            {"failInMiddlewareOne": (Optional[str], None), "failInMiddlewareTwo": (Optional[str], None)},
        )
        .middleware(load_profile)
        .middleware(no_contribution)
        .middleware(bump_age)
        .resolve(lambda request, response, context: {"name": context["name"], "age": context["age"]})
        .transform(lambda data, response: {"data": data, "meta": {}})
    )
    return make_client(Route("/user/{userId}", handler.starlette()))


class TestChainedMiddlewares:
    """Context flows through several middlewares into the resolver."""

    @pytest.mark.integration
    def test_success(self, client):
        response = client.get(f"/user/{TestRequestData.USER_ID}")

        assert response.status_code == 200
        assert response.json() == {"data": {"name": "John Doe", "age": 20}, "meta": {}}

    @pytest.mark.integration
    def test_fail_in_first_middleware(self, client):
        response = client.get("/user/1", params={"failInMiddlewareOne": "yes"})

        assert response.status_code == 400
        assert response.json() == {"errors": ["This should fail"], "type": "Bad Request"}

    @pytest.mark.integration
    def test_first_failure_stops_later_middlewares(self, client):
        response = client.get("/user/1", params={"failInMiddlewareOne": "yes", "failInMiddlewareTwo": "yes"})

        assert response.status_code == 400

    @pytest.mark.integration
    def test_fail_in_later_middleware(self, client):
        response = client.get("/user/1", params={"failInMiddlewareTwo": "yes"})

        assert response.status_code == 401
        assert response.json() == {"errors": ["This should fail in middleware two"], "type": "Unauthorized"}


class TestEarlyResponses:
    """Middlewares that answer the request themselves."""

    @pytest.mark.integration
    def test_middleware_response_ends_chain(self, make_client):
        resolved = []

        def require_token(request, response, proceed, context):
            if "x-token" not in request.headers:
                response.status(401).json({"errors": ["token required"]})

        def resolver(request, response, context):
            resolved.append(True)
            return "ok"

        handler = Handler().middleware(require_token).resolve(resolver).transform(lambda data, response: data)
        client = make_client(Route("/secure", handler.starlette()))

        denied = client.get("/secure")
        allowed = client.get("/secure", headers={"X-Token": "1"})

        assert denied.status_code == 401
        assert denied.json() == {"errors": ["token required"]}
        assert allowed.status_code == 200
        assert allowed.text == "ok"
        assert resolved == [True]

    @pytest.mark.integration
    def test_host_style_middleware(self, make_client):
        seen = []

        def host_logger(request, response, proceed):
            seen.append(request.path)
            response.set_header("x-served-by", "chain")
            proceed()

        handler = (
            Handler()
            .use(host_logger)
            .resolve(lambda request, response, context: context)
            .transform(lambda context, response: {"context": context})
        )
        client = make_client(Route("/items", handler.starlette()))

        response = client.get("/items")

        assert response.status_code == 200
        assert response.json() == {"context": {}}
        assert response.headers["x-served-by"] == "chain"
        assert seen == ["/items"]

    @pytest.mark.integration
    def test_host_style_middleware_error_via_proceed(self, make_client):
        def host_guard(request, response, proceed):
            proceed(ApplicationError(403, "denied"))

        handler = Handler().use(host_guard).resolve(lambda request, response, context: None)
        client = make_client(Route("/guarded", handler.starlette()))

        response = client.get("/guarded")

        assert response.status_code == 403
        assert response.json() == {"errors": ["denied"], "type": "Forbidden"}
