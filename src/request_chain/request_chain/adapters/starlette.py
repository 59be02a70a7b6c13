# ABOUTME: Starlette adapter turning a Handler into a route endpoint
# ABOUTME: Builds ChainRequests from Starlette requests and renders buffered responses

import json
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List

from loguru import logger
from pydantic_core import to_jsonable_python
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response

from request_chain.implementations.memory.response import BodyKind, BufferedResponseSink
from request_chain.models.http.request import ChainRequest

if TYPE_CHECKING:
    from request_chain.components.handler.handler import Handler

_logger = logger.bind(name=__name__)


async def read_body(request: Request) -> Any:
    """
    Read and decode the body of a Starlette request.

    Returns:
        ``{}`` for an empty body, the decoded JSON value for JSON bodies, and
        the raw text when the body is not valid JSON.
    """
    raw = await request.body()
    if not raw:
        return {}

    try:
        return json.loads(raw)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


def read_query(request: Request) -> Dict[str, Any]:
    """
    Read the query string of a Starlette request.

    A key given once maps to its value; a repeated key maps to the list of
    its values in order.
    """
    grouped: Dict[str, List[str]] = {}
    for key, value in request.query_params.multi_items():
        grouped.setdefault(key, []).append(value)
    return {key: values if len(values) > 1 else values[0] for key, values in grouped.items()}


async def build_chain_request(request: Request) -> ChainRequest:
    """
    Build the chain's view of a Starlette request.

    Args:
        request: The incoming Starlette request.

    Returns:
        ChainRequest with body, query, lower-cased headers and path params.
    """
    return ChainRequest(
        method=request.method,
        path=request.url.path,
        body=await read_body(request),
        query=read_query(request),
        headers=dict(request.headers),
        params=dict(request.path_params),
        raw=request,
    )


def render_response(sink: BufferedResponseSink) -> Response:
    """
    Render a buffered response into a Starlette response.

    Args:
        sink: The sink the chain wrote to.

    Returns:
        The matching Starlette response.
    """
    headers = sink.headers
    if sink.body_kind is BodyKind.JSON:
        return JSONResponse(to_jsonable_python(sink.body), status_code=sink.status_code, headers=headers)
    if sink.body_kind is BodyKind.REDIRECT:
        location = headers.pop("location")
        return RedirectResponse(location, status_code=sink.status_code, headers=headers)
    if sink.body_kind is BodyKind.RAW:
        return Response(sink.body, status_code=sink.status_code, headers=headers, media_type=sink.media_type)
    return Response(status_code=sink.status_code, headers=headers)


def as_starlette_endpoint(handler: "Handler") -> Callable[[Request], Awaitable[Response]]:
    """
    Build a Starlette endpoint running a handler chain.

    Unclassified errors are re-raised from the endpoint so Starlette's own
    exception handlers produce the fallback response. An error delegated after
    the chain already wrote the response is logged and the written response
    is sent.

    Args:
        handler: A handler with a resolver.

    Returns:
        ``async def endpoint(request) -> Response``.

    Raises:
        HandlerConfigurationError: If the handler has no resolver.
    """
    executor = handler.build_executor()

    async def endpoint(request: Request) -> Response:
        delegated: List[BaseException] = []

        def proceed(err: BaseException) -> None:
            delegated.append(err)

        chain_request = await build_chain_request(request)
        sink = BufferedResponseSink()
        result = await executor.execute(chain_request, sink, proceed)

        if delegated:
            error = delegated[0]
            if not sink.headers_sent:
                raise error
            # The written response stands; the error can no longer change it
            _logger.warning(
                f"Handler {handler.name} raised {type(error).__name__} after writing "
                f"a {sink.status_code} response, keeping the written response: {error}"
            )

        if not sink.headers_sent:
            _logger.warning(
                f"Handler {handler.name} finished without writing a response "
                f"(outcome: {result.outcome.value}), sending empty {sink.status_code}"
            )
        return render_response(sink)

    endpoint.__name__ = handler.name
    return endpoint
